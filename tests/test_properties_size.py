# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import pytest

from backitup.core.error import BackitupError
from backitup.properties.size import Size


def test_invalid_unit_raises():
    with pytest.raises(BackitupError):
        Size(5, "xb")


def test_negative_size_raises():
    with pytest.raises(BackitupError):
        Size(-1)


@pytest.mark.parametrize(
    "value, unit, expected_value",
    [
        (0, "b", 0),
        (512, "b", 512),
        (1, "kb", 1024),
        (3, "MB", 3 * 1024 * 1024),
        (2, "gb", 2 * 1024**3),
        (1, "tb", 1024**4),
    ],
)
def test_init_converts_to_bytes(value, unit, expected_value):
    assert Size(value, unit).value == expected_value


@pytest.mark.parametrize(
    "size, expected",
    [
        (Size(0), "0b"),
        (Size(900), "900b"),
        (Size(1024), "1kb"),
        (Size(1536), "1536b"),
        (Size(150, "mb"), "150mb"),
        (Size(1536, "mb"), "1536mb"),
        (Size(1100, "mb"), "1gb"),
        (Size(1700, "b"), "1700b"),
        (Size(1000, "kb"), "1000kb"),
        (Size(1100, "kb"), "1mb"),
        (Size(3, "tb"), "3tb"),
    ],
)
def test_str_human_readable(size, expected):
    assert str(size) == expected


def test_add_sizes():
    assert Size(1, "kb") + Size(24) == Size(1048)


def test_add_non_size_not_supported():
    with pytest.raises(TypeError):
        _ = Size(1) + 5

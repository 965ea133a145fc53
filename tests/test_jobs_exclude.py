# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import pytest

from backitup.jobs.exclude import expand_pattern, expand_patterns, is_excluded
from backitup.core.error import BackitupError


def test_expand_pattern_produces_all_variants():
    assert expand_pattern("node_modules") == [
        "node_modules",
        "node_modules/*",
        "*/node_modules",
        "*/node_modules/*",
    ]


def test_expand_pattern_strips_trailing_slash():
    assert expand_pattern("venv/")[0] == "venv"


@pytest.mark.parametrize("pattern", ["", "   ", "/", "//"])
def test_expand_pattern_rejects_empty(pattern):
    with pytest.raises(BackitupError):
        expand_pattern(pattern)


def test_expand_patterns_keeps_order_and_drops_duplicates():
    expanded = expand_patterns(["venv", ".git", "venv"])

    assert expanded == expand_pattern("venv") + expand_pattern(".git")


def test_expand_patterns_empty():
    assert expand_patterns([]) == []


@pytest.mark.parametrize(
    "member, excluded",
    [
        ("myproject", False),
        ("myproject/file.txt", False),
        ("myproject/node_modules", True),
        ("myproject/node_modules/", True),
        ("myproject/node_modules/pkg/index.js", True),
        ("myproject/sub/node_modules", True),
        ("myproject/sub/node_modules/pkg/index.js", True),
        ("myproject/node_modules_backup", False),
        ("myproject/my_node_modules", False),
        ("myproject/.DS_Store", True),
        ("myproject/sub/.DS_Store", True),
        ("myproject/src/cache.pyc", True),
        ("myproject/src/cache.py", False),
    ],
)
def test_is_excluded(member, excluded):
    patterns = expand_patterns(["node_modules", ".DS_Store", "*.pyc"])

    assert is_excluded(member, patterns) is excluded


def test_is_excluded_is_case_sensitive():
    assert not is_excluded("myproject/Venv", expand_patterns(["venv"]))


def test_is_excluded_without_patterns():
    assert not is_excluded("myproject/anything", [])

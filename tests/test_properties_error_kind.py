# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import pytest

from backitup.core.error import (
    ArchiveFailedError,
    BackitupError,
    JobError,
    OutputDirUnavailableError,
    SourceNotFoundError,
)
from backitup.properties.error_kind import ErrorKind


@pytest.mark.parametrize(
    "kind, expected",
    [
        (ErrorKind.SOURCE_NOT_FOUND, "SourceNotFound"),
        (ErrorKind.OUTPUT_DIR_UNAVAILABLE, "OutputDirUnavailable"),
        (ErrorKind.ARCHIVE_FAILED, "ArchiveFailed"),
    ],
)
def test_error_kind_str(kind, expected):
    assert str(kind) == expected


@pytest.mark.parametrize(
    "error_cls, kind",
    [
        (SourceNotFoundError, ErrorKind.SOURCE_NOT_FOUND),
        (OutputDirUnavailableError, ErrorKind.OUTPUT_DIR_UNAVAILABLE),
        (ArchiveFailedError, ErrorKind.ARCHIVE_FAILED),
    ],
)
def test_job_errors_carry_their_kind(error_cls, kind):
    error = error_cls("message")

    assert isinstance(error, JobError)
    assert isinstance(error, BackitupError)
    assert error.kind is kind
    assert str(error) == "message"


def test_job_errors_use_failed_jobs_exit_code():
    assert JobError.exit_code != BackitupError.exit_code
    assert SourceNotFoundError.exit_code == JobError.exit_code

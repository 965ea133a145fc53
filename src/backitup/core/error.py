# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout backitup.

This module defines the backitup-specific exceptions: a general recoverable
error used for configuration and usage problems, and per-job errors raised
while processing a single backup job. Each exception carries an associated
exit code used by backitup commands to report failures consistently.
"""

from backitup.core.config import CFG
from backitup.properties.error_kind import ErrorKind


class BackitupError(Exception):
    """Common exception type for all recoverable backitup errors."""

    exit_code = CFG.exit_codes.default


class JobError(BackitupError):
    """
    Raised when a single backup job cannot be completed.

    Job errors never abort a run: the runner converts them
    into a failed result for the job and continues with the next one.
    """

    exit_code = CFG.exit_codes.failed_jobs
    kind: ErrorKind


class SourceNotFoundError(JobError):
    """Raised when the source path does not exist or is not a directory."""

    kind = ErrorKind.SOURCE_NOT_FOUND


class OutputDirUnavailableError(JobError):
    """Raised when the output directory cannot be created or written to."""

    kind = ErrorKind.OUTPUT_DIR_UNAVAILABLE


class ArchiveFailedError(JobError):
    """Raised when the archiving or compression step fails."""

    kind = ErrorKind.ARCHIVE_FAILED

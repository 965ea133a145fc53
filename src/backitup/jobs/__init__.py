# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Backup jobs and their results.

This module provides `BackupJob`, the immutable description of one source
directory to archive, `ArchiveResult`, the outcome of processing it, and
`JobLoader`, which builds the job list from a job file and command-line arguments.
The expansion and matching of exclude patterns lives in `backitup.jobs.exclude`.
"""

from .job import ArchiveResult, BackupJob
from .loader import JobLoader

__all__ = [
    "ArchiveResult",
    "BackupJob",
    "JobLoader",
]

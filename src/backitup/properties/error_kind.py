# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Enumeration of the ways a backup job can fail.

This module defines `ErrorKind`, which classifies a failed backup job as a
missing source, an unusable output directory, or a failed archiving step.
"""

from enum import Enum


class ErrorKind(Enum):
    """
    Kind of failure of a backup job.
    """

    SOURCE_NOT_FOUND = 1
    OUTPUT_DIR_UNAVAILABLE = 2
    ARCHIVE_FAILED = 3

    def __str__(self):
        return "".join(part.capitalize() for part in self.name.split("_"))

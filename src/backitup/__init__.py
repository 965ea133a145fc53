# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the backitup command-line tool.

This package provides the internal logic behind backitup's backup workflow.
It defines backup jobs and the loading of job files, the expansion of exclude
patterns, the compressors producing gzip-compressed tar archives, and the
archiver processing every job in isolation. All backitup CLI commands
ultimately delegate to the functionality implemented here.
"""

from .backitup import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "archive",
    "core",
    "jobs",
    "plan",
    "properties",
    "run",
]

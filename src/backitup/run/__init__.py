# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
The `backitup run` command.

This module provides the command archiving the configured source directories
and the `ResultsPresenter` summarizing the outcome of every job.
"""

from .presenter import ResultsPresenter

__all__ = [
    "ResultsPresenter",
]

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
The `backitup plan` command.

This module provides the command and the `PlanPresenter` showing which archives
would be created from which sources, without touching the filesystem.
"""

from .presenter import PlanPresenter

__all__ = [
    "PlanPresenter",
]

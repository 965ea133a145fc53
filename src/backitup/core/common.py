# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
General utility functions for the backitup library.

This module provides helpers for YAML loading, path resolution, splitting
pattern lists, formatting durations, and sizing rich panels.
"""

import os
import re
from datetime import timedelta
from functools import lru_cache
from pathlib import Path

import yaml
from rich.console import Console

from .logger import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def load_yaml_loader() -> type[yaml.SafeLoader]:
    """Return the fastest available safe YAML loader (CSafeLoader if possible)."""
    try:
        from yaml import (
            CSafeLoader as SafeLoader,  # ty: ignore[possibly-missing-import]
        )

        logger.debug("Loaded YAML CLoader.")
    except ImportError:
        from yaml import SafeLoader

        logger.debug("Loaded default YAML loader.")

    return SafeLoader


def resolve_path(path: str | Path, base: Path | None = None) -> Path:
    """
    Convert a path to an absolute path without resolving symlinks.

    A leading `~` is expanded to the user's home directory. Relative paths
    are interpreted relative to `base` (or the current working directory).

    Args:
        path (str | Path): The path to convert.
        base (Path | None): Directory used as the anchor for relative paths.

    Returns:
        Path: Absolute, normalized path.
    """
    path = Path(path).expanduser()
    if not path.is_absolute():
        path = (base or Path.cwd()) / path

    # collapse '..' and '.' segments but keep symlinks as configured
    return Path(os.path.normpath(path))


def split_patterns(string: str | None) -> list[str]:
    """
    Split a string containing multiple exclude patterns into a list.

    The patterns can be separated by commas (,) or colons (:).
    Whitespace around patterns is stripped; spaces inside patterns are kept.

    Args:
        string (str | None): The string containing patterns. If None or empty,
                             an empty list is returned.

    Returns:
        list[str]: The individual non-empty patterns in their original order.
    """
    if not string:
        return []

    return [p.strip() for p in re.split(r"[:,]", string) if p.strip()]


def format_duration(td: timedelta) -> str:
    """
    Format a timedelta object into a human-readable string.

    Sub-second durations are reported as '0s'.

    Args:
        td (timedelta): The duration to format.

    Returns:
        str: Human-readable string, e.g., "1h2m5s".
    """
    total_seconds = int(td.total_seconds())
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds or not parts:
        parts.append(f"{seconds}s")

    return "".join(parts)


def get_panel_width(
    console: Console, factor: int, min_width: int | None, max_width: int | None
):
    """
    Calculate the width of a panel relative to the console width, constrained by
    optional minimum and maximum width values.

    Args:
        console (Console): A rich Console-like object that provides terminal size.
        factor (int): A divisor used to scale down the terminal width.
        min_width (int): The minimum allowable panel width. If None, no lower bound is applied.
        max_width (int): The maximum allowable panel width. If None, no upper bound is applied.

    Returns:
        int: The computed panel width after applying scaling and bounds.
    """

    term_width = console.size.width
    panel_width = term_width // factor
    if min_width is not None:
        panel_width = max(panel_width, min_width)
    if max_width is not None:
        panel_width = min(panel_width, max_width)

    return panel_width

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Expansion and matching of exclude patterns.

An exclude pattern names a file or directory that must be omitted from an
archive regardless of where it appears in the archived tree. Each pattern
`p` is therefore expanded into the variants `p`, `p/*`, `*/p` and `*/p/*`,
which are matched against archive member names (e.g. `myproject/sub/p/x`).
As in tar's own exclusion matching, `*` also matches across `/`.
"""

from collections.abc import Iterable
from fnmatch import fnmatchcase

from backitup.core.error import BackitupError


def expand_pattern(pattern: str) -> list[str]:
    """
    Expand a single exclude pattern into its anchoring-agnostic variants.

    Args:
        pattern (str): Name or glob pattern, e.g. 'node_modules' or '*.pyc'.
            Trailing slashes are ignored.

    Returns:
        list[str]: The pattern itself, its contents, its nested occurrences,
            and the contents of its nested occurrences.

    Raises:
        BackitupError: If the pattern is empty.
    """
    stripped = pattern.strip().rstrip("/")
    if not stripped:
        raise BackitupError(f"Invalid exclude pattern '{pattern}'.")

    return [stripped, f"{stripped}/*", f"*/{stripped}", f"*/{stripped}/*"]


def expand_patterns(patterns: Iterable[str]) -> list[str]:
    """
    Expand all exclude patterns, keeping their order and dropping duplicates.
    """
    expanded: list[str] = []
    for pattern in patterns:
        for variant in expand_pattern(pattern):
            if variant not in expanded:
                expanded.append(variant)

    return expanded


def is_excluded(member_name: str, expanded_patterns: Iterable[str]) -> bool:
    """
    Check whether an archive member matches any of the expanded patterns.

    Args:
        member_name (str): Name of the member inside the archive, relative
            to the archive root (e.g. 'myproject/node_modules').
        expanded_patterns (Iterable[str]): Patterns produced by `expand_patterns`.

    Returns:
        bool: True if the member should be left out of the archive.
    """
    name = member_name.rstrip("/")
    return any(fnmatchcase(name, pattern) for pattern in expanded_patterns)

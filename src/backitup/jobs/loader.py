# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Construction of the backup job list from a YAML job file and command-line arguments.

A job file looks like this:

    output_dir: /offline/backups/projects
    excludes: [venv, node_modules, .git]
    sources:
      - /home/user/Public/myproject_a
      - path: /home/user/myproject_b
        output_dir: /offline/backups/other
        excludes: [dist]

Relative paths in the job file are interpreted relative to the file's directory.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Self

import yaml

from backitup.core.common import load_yaml_loader, resolve_path
from backitup.core.config import CFG
from backitup.core.error import BackitupError
from backitup.core.logger import get_logger

from .job import BackupJob

logger = get_logger(__name__)


class JobLoader:
    """
    Collects sources, output directories and exclude patterns and builds the backup jobs.
    """

    def __init__(
        self,
        output_dir: Path | None = None,
        excludes: Iterable[str] = (),
        default_excludes: bool = False,
    ):
        """
        Initialize the loader with the global settings shared by all sources.

        Args:
            output_dir (Path | None): Absolute output directory used by sources without their own.
            excludes (Iterable[str]): Patterns excluded from every archive.
            default_excludes (bool): Prepend `CFG.defaults.excludes` to the patterns.
        """
        self._output_dir = output_dir
        patterns = (list(CFG.defaults.excludes) if default_excludes else []) + list(
            excludes
        )
        # drop duplicates, keep the first occurrence
        self._excludes = list(dict.fromkeys(patterns))
        # (source, output dir override, extra excludes)
        self._sources: list[tuple[Path, Path | None, list[str]]] = []

    @classmethod
    def fromFile(
        cls,
        file: Path,
        output_dir: Path | None = None,
        excludes: Iterable[str] = (),
        default_excludes: bool = False,
    ) -> Self:
        """
        Create a loader from a YAML job file.

        Settings passed as arguments take precedence over the output directory
        of the file and extend its exclude patterns.

        Args:
            file (Path): Path to the job file.
            output_dir (Path | None): Output directory overriding the one in the file.
            excludes (Iterable[str]): Patterns added to the ones in the file.
            default_excludes (bool): Prepend `CFG.defaults.excludes` to the patterns.

        Raises:
            BackitupError: If the file cannot be read or has an invalid structure.
        """
        data = JobLoader._readFile(file)
        base = resolve_path(file).parent

        file_output = data.get("output_dir")
        if file_output is not None and not isinstance(file_output, str):
            raise BackitupError(f"Invalid 'output_dir' in job file '{file}'.")

        loader = cls(
            output_dir or (resolve_path(file_output, base) if file_output else None),
            JobLoader._readPatterns(data.get("excludes"), file) + list(excludes),
            default_excludes,
        )

        sources = data.get("sources") or []
        if not isinstance(sources, list):
            raise BackitupError(f"'sources' in job file '{file}' must be a list.")

        for item in sources:
            loader._addFileSource(item, base, file)

        return loader

    def addSource(
        self,
        source: str | Path,
        output_dir: str | Path | None = None,
        excludes: Iterable[str] = (),
        base: Path | None = None,
    ) -> None:
        """
        Register a source directory.

        Args:
            source (str | Path): Path to the source directory.
            output_dir (str | Path | None): Output directory for this source only.
            excludes (Iterable[str]): Patterns appended to the global ones for this source.
            base (Path | None): Anchor for relative paths; the current directory if None.
        """
        self._sources.append(
            (
                resolve_path(source, base),
                resolve_path(output_dir, base) if output_dir else None,
                list(excludes),
            )
        )

    def build(self) -> tuple[BackupJob, ...]:
        """
        Build the immutable list of backup jobs.

        Returns:
            tuple[BackupJob, ...]: The jobs in the order the sources were registered.

        Raises:
            BackitupError: If there are no sources, a source has no output directory,
                or an exclude pattern is invalid.
        """
        if not self._sources:
            raise BackitupError("No source directories to back up.")

        jobs = []
        for source, output_dir, extra in self._sources:
            output_dir = output_dir or self._output_dir
            if output_dir is None:
                raise BackitupError(
                    f"No output directory specified for source '{source}'."
                )

            patterns = tuple(dict.fromkeys(self._excludes + extra))
            jobs.append(BackupJob(source, output_dir, patterns))

        logger.debug(f"Backup jobs: {jobs}.")
        return tuple(jobs)

    def _addFileSource(self, item: Any, base: Path, file: Path) -> None:
        """
        Register a source described by an entry of the job file.
        """
        if isinstance(item, str):
            self.addSource(item, base=base)
            return

        if not isinstance(item, dict) or not isinstance(item.get("path"), str):
            raise BackitupError(
                f"Invalid source '{item}' in job file '{file}': expected a path or a mapping with 'path'."
            )

        output_dir = item.get("output_dir")
        if output_dir is not None and not isinstance(output_dir, str):
            raise BackitupError(
                f"Invalid 'output_dir' of source '{item['path']}' in job file '{file}'."
            )

        self.addSource(
            item["path"],
            output_dir,
            JobLoader._readPatterns(item.get("excludes"), file),
            base,
        )

    @staticmethod
    def _readFile(file: Path) -> dict[str, Any]:
        """
        Load the YAML job file into a dictionary.
        """
        try:
            with open(file) as f:
                data = yaml.load(f, Loader=load_yaml_loader())
        except (OSError, yaml.YAMLError) as e:
            raise BackitupError(f"Could not read job file '{file}': {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise BackitupError(f"Job file '{file}' must contain a mapping.")

        return data

    @staticmethod
    def _readPatterns(value: Any, file: Path) -> list[str]:
        """
        Validate a list of exclude patterns read from the job file.
        """
        if value is None:
            return []
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise BackitupError(
                f"Exclude patterns in job file '{file}' must be a list of strings."
            )

        return value


def load_jobs(
    job_file: Path | None,
    sources: Iterable[str],
    output_dir: str | None,
    excludes: Iterable[str],
    default_excludes: bool,
) -> tuple[BackupJob, ...]:
    """
    Build the backup jobs from the options of a backitup command.

    Sources given on the command line are appended after the sources of the job file.

    Args:
        job_file (Path | None): Optional YAML job file.
        sources (Iterable[str]): Source directories given on the command line.
        output_dir (str | None): Output directory given on the command line.
        excludes (Iterable[str]): Exclude patterns given on the command line.
        default_excludes (bool): Also exclude `CFG.defaults.excludes`.

    Returns:
        tuple[BackupJob, ...]: The jobs to run.

    Raises:
        BackitupError: If the jobs cannot be constructed.
    """
    resolved_output = resolve_path(output_dir) if output_dir else None

    if job_file:
        loader = JobLoader.fromFile(
            job_file, resolved_output, excludes, default_excludes
        )
    else:
        loader = JobLoader(resolved_output, excludes, default_excludes)

    for source in sources:
        loader.addSource(source)

    return loader.build()

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Self

from backitup.core.config import CFG
from backitup.core.error import BackitupError, JobError
from backitup.properties.error_kind import ErrorKind
from backitup.properties.size import Size

from .exclude import expand_patterns


@dataclass(frozen=True)
class BackupJob:
    """
    A single unit of work: one source directory archived into one output directory.

    Jobs are immutable for the duration of a run.
    """

    # Absolute path to the directory to archive.
    source_path: Path
    # Absolute path to the directory the archive is written into.
    output_dir: Path
    # Ordered glob patterns excluded from the archive at any depth.
    exclude_patterns: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # normalize to Path and tuple even if the job was built from plain values,
        # collapsing '.' and '..' segments
        object.__setattr__(self, "source_path", Path(os.path.normpath(self.source_path)))
        object.__setattr__(self, "output_dir", Path(os.path.normpath(self.output_dir)))
        object.__setattr__(self, "exclude_patterns", tuple(self.exclude_patterns))

        for label, path in (
            ("Source path", self.source_path),
            ("Output directory", self.output_dir),
        ):
            if not path.is_absolute():
                raise BackitupError(f"{label} '{path}' is not an absolute path.")

        if not self.source_path.name:
            raise BackitupError(
                f"Source path '{self.source_path}' has no base name to archive."
            )

        # raises BackitupError for an empty pattern
        expand_patterns(self.exclude_patterns)

    @property
    def name(self) -> str:
        """Base name of the source directory."""
        return self.source_path.name

    @property
    def parent(self) -> Path:
        """Directory containing the source directory."""
        return self.source_path.parent

    def archiveName(self, timestamp: datetime, date_only: bool = False) -> str:
        """
        Construct the file name of the archive created at the given time.

        Args:
            timestamp (datetime): Time at which the archive is created.
            date_only (bool): Omit the time of day from the name.

        Returns:
            str: Name in the form `<basename>_<timestamp><suffix>`.
        """
        fmt = (
            CFG.date_formats.archive_date_only
            if date_only
            else CFG.date_formats.archive
        )
        return f"{self.name}_{timestamp.strftime(fmt)}{CFG.defaults.suffix}"

    def archivePath(self, timestamp: datetime, date_only: bool = False) -> Path:
        """Absolute path of the archive created at the given time."""
        return self.output_dir / self.archiveName(timestamp, date_only)


@dataclass(frozen=True)
class ArchiveResult:
    """
    Outcome of processing a single backup job.
    """

    job: BackupJob
    output_file: Path
    success: bool
    size_bytes: int | None = None
    error_kind: ErrorKind | None = None
    error_message: str | None = None

    @classmethod
    def succeeded(cls, job: BackupJob, output_file: Path, size_bytes: int) -> Self:
        """Create a result of a successfully archived job."""
        return cls(job=job, output_file=output_file, success=True, size_bytes=size_bytes)

    @classmethod
    def failed(cls, job: BackupJob, output_file: Path, error: JobError) -> Self:
        """Create a result of a job that failed with the given error."""
        return cls(
            job=job,
            output_file=output_file,
            success=False,
            error_kind=error.kind,
            error_message=str(error),
        )

    @property
    def size(self) -> Size | None:
        """Size of the created archive, if any."""
        return Size(self.size_bytes) if self.size_bytes is not None else None


def count_failed(results: list[ArchiveResult]) -> int:
    """Return the number of failed jobs among the results."""
    return sum(not result.success for result in results)


def total_size(results: list[ArchiveResult]) -> Size:
    """Return the combined size of all archives created successfully."""
    total = Size(0)
    for result in results:
        if result.size is not None:
            total += result.size

    return total

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import os
from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path

from backitup.core.common import format_duration
from backitup.core.config import CFG
from backitup.core.error import (
    ArchiveFailedError,
    JobError,
    OutputDirUnavailableError,
    SourceNotFoundError,
)
from backitup.core.logger import get_logger
from backitup.jobs.job import ArchiveResult, BackupJob, count_failed, total_size
from backitup.properties.size import Size

from .compressor import Compressor

logger = get_logger(__name__, show_time=True)


class Archiver:
    """
    Archives a sequence of backup jobs one after another.

    Every job is processed in isolation: a failing job is reported
    in its result and the remaining jobs are still attempted.
    """

    def __init__(
        self,
        compressor: Compressor,
        date_only: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the Archiver.

        Args:
            compressor (Compressor): Tool used to create the archives.
            date_only (bool): Timestamp archives with the date only, omitting the time of day.
            clock (Callable[[], datetime]): Source of the archive timestamps.
        """
        self._compressor = compressor
        self._date_only = date_only
        self._clock = clock

    def run(self, jobs: Sequence[BackupJob]) -> list[ArchiveResult]:
        """
        Archive all jobs in the order they are provided.

        Args:
            jobs (Sequence[BackupJob]): The jobs to process.

        Returns:
            list[ArchiveResult]: One result per job, in the same order.
        """
        results = [self.archive(job) for job in jobs]

        failed = count_failed(results)
        logger.info(
            f"All archiving tasks complete: {len(results) - failed} succeeded, "
            f"{failed} failed, {total_size(results)} written."
        )
        return results

    def archive(self, job: BackupJob) -> ArchiveResult:
        """
        Archive a single job, converting any job error into a failed result.

        Args:
            job (BackupJob): The job to process.

        Returns:
            ArchiveResult: The outcome of the job.
        """
        output_file = job.archivePath(self._clock(), self._date_only)
        logger.info(f"Processing '{job.name}'.")

        start = datetime.now()
        try:
            size = self._archive(job, output_file)
        except JobError as e:
            logger.warning(f"Failed to back up '{job.source_path}' ({e.kind}): {e}")
            return ArchiveResult.failed(job, output_file, e)

        logger.info(
            f"Archive complete. Size: {Size(size)}. Took {format_duration(datetime.now() - start)}."
        )
        return ArchiveResult.succeeded(job, output_file, size)

    def _archive(self, job: BackupJob, output_file: Path) -> int:
        """
        Validate the job, create its archive and return the archive size in bytes.

        The archive is first written next to `output_file` under a partial name
        and only renamed to `output_file` once it is complete, so an existing
        archive of the same name is kept if the job fails.

        Raises:
            SourceNotFoundError: If the source is missing or is not a directory.
            OutputDirUnavailableError: If the output directory cannot be used.
            ArchiveFailedError: If creating, inspecting or renaming the archive fails.
        """
        Archiver._ensureSource(job.source_path)
        Archiver._ensureOutputDir(job.output_dir)

        partial_file = Archiver._partialPath(output_file)
        logger.info(f"Target: '{output_file}'.")
        try:
            self._compressor.compress(
                job.parent, job.name, job.exclude_patterns, partial_file
            )
            size = partial_file.stat().st_size
            os.replace(partial_file, output_file)
        except ArchiveFailedError:
            Archiver._removePartial(partial_file)
            raise
        except OSError as e:
            Archiver._removePartial(partial_file)
            raise ArchiveFailedError(
                f"Could not finalize archive '{output_file}': {e}"
            ) from e

        return size

    @staticmethod
    def _partialPath(output_file: Path) -> Path:
        """
        Path under which the archive is written before it is complete.
        """
        return output_file.with_name(output_file.name + CFG.defaults.partial_suffix)

    @staticmethod
    def _ensureSource(source: Path) -> None:
        """
        Make sure the source exists and is a directory.

        Raises:
            SourceNotFoundError: If it does not.
        """
        if not source.exists():
            raise SourceNotFoundError(f"Source folder '{source}' not found.")

        if not source.is_dir():
            raise SourceNotFoundError(f"Source '{source}' is not a directory.")

    @staticmethod
    def _ensureOutputDir(output_dir: Path) -> None:
        """
        Create the output directory if it does not exist yet and check it is writable.

        Raises:
            OutputDirUnavailableError: If the directory cannot be created or written to.
        """
        logger.debug(f"Ensuring output directory exists: '{output_dir}'.")
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirUnavailableError(
                f"Could not create output directory '{output_dir}': {e}"
            ) from e

        if not os.access(output_dir, os.W_OK | os.X_OK):
            raise OutputDirUnavailableError(
                f"Output directory '{output_dir}' is not writable."
            )

    @staticmethod
    def _removePartial(partial_file: Path) -> None:
        """
        Delete a partially written archive, if there is one.
        """
        try:
            partial_file.unlink(missing_ok=True)
            logger.debug(f"Removed partial archive '{partial_file}'.")
        except OSError as e:
            logger.warning(f"Could not remove partial archive '{partial_file}': {e}")

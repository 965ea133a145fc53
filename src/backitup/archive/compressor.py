# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import shutil
import subprocess
import tarfile
from abc import ABC
from collections.abc import Callable, Sequence
from pathlib import Path

from backitup.core.config import CFG
from backitup.core.error import ArchiveFailedError, BackitupError
from backitup.core.logger import get_logger

from backitup.jobs.exclude import expand_patterns, is_excluded

logger = get_logger(__name__)


class Compressor(ABC):
    """
    Abstract base class for the tools creating gzip-compressed tar archives.

    Concrete compressors must implement `envName` and `compress`.
    All failures while creating an archive must be raised as ArchiveFailedError.
    """

    # registry of available compressors
    _registry: dict[str, type["Compressor"]] = {}

    def __init__(self, verbose: bool = False):
        """
        Initialize the compressor.

        Args:
            verbose (bool): Log the name of every archived member.
        """
        self._verbose = verbose

    @staticmethod
    def envName() -> str:
        """
        Return the name under which the compressor is registered.
        """
        raise NotImplementedError(
            "envName method is not implemented for this compressor"
        )

    @staticmethod
    def isAvailable() -> bool:
        """
        Determine whether the compressor can be used on the current host.
        """
        return True

    def compress(
        self,
        source_root: Path,
        entry: str,
        exclude_patterns: Sequence[str],
        destination: Path,
    ) -> None:
        """
        Archive `source_root / entry` into `destination`.

        The archive is created with `source_root` as the working root, so all
        members are stored relative to it, starting with `entry`.

        Args:
            source_root (Path): Directory containing the entry to archive.
            entry (str): Name of the directory inside `source_root` to archive.
            exclude_patterns (Sequence[str]): Unexpanded exclude patterns.
            destination (Path): Path of the archive to create.

        Raises:
            ArchiveFailedError: If the archive could not be created.
        """
        raise NotImplementedError(
            "compress method is not implemented for this compressor"
        )

    @classmethod
    def fromStr(cls, name: str, verbose: bool = False) -> "Compressor":
        """
        Create the compressor registered under the given name.

        Raises:
            BackitupError: If no compressor is registered under the name
                or the compressor cannot be used on this host.
        """
        try:
            compressor_cls = cls._registry[name]
        except KeyError as e:
            raise BackitupError(
                f"Unknown archiving backend '{name}'. Available backends: {', '.join(cls._registry)}."
            ) from e

        if not compressor_cls.isAvailable():
            raise BackitupError(
                f"Archiving backend '{name}' is not available on this host."
            )

        logger.debug(f"Using archiving backend '{name}'.")
        return compressor_cls(verbose)

    @classmethod
    def names(cls) -> list[str]:
        """Names of all registered compressors."""
        return list(cls._registry)


def compressor(cls: type[Compressor]) -> type[Compressor]:
    """
    Class decorator registering a compressor under its `envName`.
    """
    Compressor._registry[cls.envName()] = cls
    return cls


@compressor
class TarCompressor(Compressor):
    """
    Creates archives by running the system `tar` utility.

    Works with both GNU tar and BSD tar.
    """

    @staticmethod
    def envName() -> str:
        return "tar"

    @staticmethod
    def isAvailable() -> bool:
        return shutil.which(CFG.defaults.tar_binary) is not None

    def compress(
        self,
        source_root: Path,
        entry: str,
        exclude_patterns: Sequence[str],
        destination: Path,
    ) -> None:
        command = self._buildCommand(source_root, entry, exclude_patterns, destination)
        logger.debug(f"Running command: {command}.")

        try:
            result = subprocess.run(
                command,
                text=True,
                check=False,
                capture_output=True,
                errors="replace",
            )
        except OSError as e:
            raise ArchiveFailedError(
                f"Could not run '{CFG.defaults.tar_binary}': {e}."
            ) from e

        if self._verbose:
            # GNU tar lists the members on stdout, BSD tar on stderr
            for line in (result.stdout + result.stderr).splitlines():
                logger.debug(f"  {line}")

        if result.returncode != 0:
            raise ArchiveFailedError(
                f"'{CFG.defaults.tar_binary}' exited with code {result.returncode}: {result.stderr.strip()}"
            )

    def _buildCommand(
        self,
        source_root: Path,
        entry: str,
        exclude_patterns: Sequence[str],
        destination: Path,
    ) -> list[str]:
        """
        Construct the tar command as an argument list.

        Returns:
            list[str]: Arguments for `subprocess.run`, one path per argument.
        """
        command = [
            CFG.defaults.tar_binary,
            "-czvf" if self._verbose else "-czf",
            str(destination),
        ]
        # exclude options must precede the archived entry
        command.extend(f"--exclude={p}" for p in expand_patterns(exclude_patterns))
        command.extend(["-C", str(source_root), entry])

        return command


@compressor
class TarfileCompressor(Compressor):
    """
    Creates archives with Python's `tarfile` module, without any external tool.
    """

    @staticmethod
    def envName() -> str:
        return "tarfile"

    def compress(
        self,
        source_root: Path,
        entry: str,
        exclude_patterns: Sequence[str],
        destination: Path,
    ) -> None:
        member_filter = self._makeFilter(expand_patterns(exclude_patterns))

        try:
            with tarfile.open(destination, "w:gz") as archive:
                archive.add(source_root / entry, arcname=entry, filter=member_filter)
        except (OSError, tarfile.TarError) as e:
            raise ArchiveFailedError(f"Could not write archive: {e}") from e

    def _makeFilter(
        self, expanded_patterns: list[str]
    ) -> Callable[[tarfile.TarInfo], tarfile.TarInfo | None]:
        """
        Create a tarfile filter dropping excluded members.

        Returning None from the filter also prevents tarfile from
        descending into an excluded directory.
        """

        def _filter(info: tarfile.TarInfo) -> tarfile.TarInfo | None:
            if is_excluded(info.name, expanded_patterns):
                logger.debug(f"Excluding '{info.name}'.")
                return None

            if self._verbose:
                logger.debug(f"  {info.name}")
            return info

        return _filter

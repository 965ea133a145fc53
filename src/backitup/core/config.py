# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for backitup.

This module defines dataclasses representing all configurable aspects of backitup,
including environment variables, date formats, exit codes, archiving defaults,
and presentation settings.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by backitup."""

    # Enables backitup debug mode.
    debug_mode: str = "BACKITUP_DEBUG"
    # Path to the backitup configuration file.
    config_file: str = "BACKITUP_CONFIG"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Date format used in log messages.
    standard: str = "%Y-%m-%d %H:%M:%S"
    # Timestamp inserted into archive names.
    archive: str = "%Y-%m-%d_%H-%M-%S"
    # Timestamp inserted into archive names when only the date is requested.
    archive_date_only: str = "%Y-%m-%d"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for configuration and usage errors.
    default: int = 91
    # Returned when at least one backup job failed.
    failed_jobs: int = 92
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class ArchivingDefaults:
    """Default settings for creating archives."""

    # Name of the compressor backend used when none is specified.
    backend: str = "tar"
    # Name of the tar binary used by the 'tar' backend.
    tar_binary: str = "tar"
    # Suffix of the created archives.
    suffix: str = ".tgz"
    # Suffix appended to an archive while it is being written.
    partial_suffix: str = ".part"
    # Patterns excluded when default excludes are requested.
    excludes: list[str] = field(
        default_factory=lambda: [
            "venv",
            ".data_store",
            "node_modules",
            ".git",
            "temp_cache",
            ".DS_Store",
        ]
    )


@dataclass
class SizeOptions:
    """Options associated with the Size dataclass."""

    # Maximal error acceptable when rounding Size values for display.
    max_rounding_error: float = 0.1


@dataclass
class PresenterSettings:
    """Settings for the results and plan presenters."""

    # Maximal width of the panels.
    max_width: int | None = None
    # Minimal width of the panels.
    min_width: int | None = 80
    # Style used for border lines.
    border_style: str = "white"
    # Style used for the title.
    title_style: str = "white bold"
    # Style used for table headers.
    headers_style: str = "default bold"
    # Style used for table values.
    main_style: str = "white"
    # Style used for secondary information (exclude patterns, directories).
    secondary_style: str = "grey70"
    # Style used for successful jobs.
    success_style: str = "bright_green"
    # Style used for failed jobs.
    failure_style: str = "bright_red"

    # Mark used to denote a successful job.
    success_mark: str = "✔"
    # Mark used to denote a failed job.
    failure_mark: str = "✘"


@dataclass
class Config:
    """Main configuration for backitup."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)
    defaults: ArchivingDefaults = field(default_factory=ArchivingDefaults)
    size: SizeOptions = field(default_factory=SizeOptions)
    presenter: PresenterSettings = field(default_factory=PresenterSettings)

    # Name of the backitup binary.
    binary_name: str = "backitup"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read backitup config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path) if (env_path := os.getenv("BACKITUP_CONFIG")) else None,
            # 2. Current working directory (for development/override)
            Path.cwd() / "backitup_config.toml",
            # 3. XDG config home (standard user config location)
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "backitup"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses properly.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for backitup.
CFG = Config.load()

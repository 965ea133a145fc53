# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from datetime import datetime
from pathlib import Path
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand
from click_option_group import optgroup
from rich.console import Console

from backitup.core.common import split_patterns
from backitup.core.config import CFG
from backitup.core.error import BackitupError
from backitup.core.logger import get_logger
from backitup.jobs.loader import load_jobs

from .presenter import PlanPresenter

logger = get_logger(__name__)
console = Console()


# Note that all options must be part of an optgroup.
@click.command(
    short_help="Show what would be archived without archiving anything.",
    help=f"""Show the backup jobs `{CFG.binary_name} run` would perform with the same options.

{click.style("SOURCE", fg="green")}   Directory to back up. Can be repeated. Optional if a job file is provided.

Nothing is written to disk: source directories are not checked and output directories are not created.""",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@click.argument(
    "sources",
    type=str,
    nargs=-1,
    metavar=click.style("SOURCE", fg="green"),
)
@optgroup.group(f"{click.style('Jobs', fg='yellow')}")
@optgroup.option(
    "--jobs",
    "-c",
    "job_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file listing the sources, the output directory, and the exclude patterns.",
)
@optgroup.option(
    "--output-dir",
    "-o",
    type=str,
    default=None,
    help="Directory to write the archives to. Overrides the output directory of the job file.",
)
@optgroup.option(
    "--exclude",
    "-e",
    type=str,
    multiple=True,
    help="""Name or glob pattern to exclude at any depth. Can be repeated,
or contain several patterns separated by commas or colons.""",
)
@optgroup.option(
    "--default-excludes",
    is_flag=True,
    default=False,
    help=f"Also exclude the default patterns: {', '.join(CFG.defaults.excludes)}.",
)
@optgroup.group(f"{click.style('Display', fg='yellow')}")
@optgroup.option(
    "--date-only",
    is_flag=True,
    default=False,
    help="Show archive names timestamped with the date only.",
)
@optgroup.option(
    "--expand",
    is_flag=True,
    default=False,
    help="Show every exclude pattern in the expanded form passed to the archiver.",
)
def plan(
    sources: tuple[str, ...],
    job_file: Path | None,
    output_dir: str | None,
    exclude: tuple[str, ...],
    default_excludes: bool,
    date_only: bool,
    expand: bool,
) -> NoReturn:
    """
    Print the backup jobs for the specified source directories.
    """
    try:
        jobs = load_jobs(
            job_file,
            sources,
            output_dir,
            [p for e in exclude for p in split_patterns(e)],
            default_excludes,
        )
        presenter = PlanPresenter(jobs, datetime.now(), date_only)
        console.print(presenter.createPlanPanel(console, expand))
        sys.exit(0)
    except BackitupError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)

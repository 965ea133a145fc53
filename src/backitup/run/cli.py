# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from pathlib import Path
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand
from click_option_group import optgroup
from rich.console import Console

from backitup.archive.archiver import Archiver
from backitup.archive.compressor import Compressor
from backitup.core.common import split_patterns
from backitup.core.config import CFG
from backitup.core.error import BackitupError
from backitup.core.logger import enable_debug_logging, get_logger
from backitup.jobs.job import count_failed
from backitup.jobs.loader import load_jobs

from .presenter import ResultsPresenter

logger = get_logger(__name__)
console = Console()


# Note that all options must be part of an optgroup.
@click.command(
    short_help="Archive source directories into timestamped tarballs.",
    help=f"""Archive each source directory into its own compressed, timestamped archive.

{click.style("SOURCE", fg="green")}   Directory to back up. Can be repeated. Optional if a job file is provided.

Every archive is named `<directory name>_<timestamp>{CFG.defaults.suffix}` and is written to the output directory.
The archive contains the directory itself (not its absolute path), without the excluded files and directories.

Sources are processed one by one. A failing source does not stop the remaining ones;
`{CFG.binary_name} run` exits with code {CFG.exit_codes.failed_jobs} if any source failed.""",
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
@optgroup.group(f"{click.style('Archiving', fg='yellow')}")
@optgroup.option(
    "--date-only",
    is_flag=True,
    default=False,
    help="Timestamp the archives with the date only, omitting the time of day.",
)
@optgroup.option(
    "--backend",
    type=click.Choice(Compressor.names()),
    default=CFG.defaults.backend,
    show_default=True,
    help="Tool used to create the archives.",
)
@optgroup.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Print debug information including the names of all archived files.",
)
def run(
    sources: tuple[str, ...],
    job_file: Path | None,
    output_dir: str | None,
    exclude: tuple[str, ...],
    default_excludes: bool,
    date_only: bool,
    backend: str,
    verbose: bool,
) -> NoReturn:
    """
    Archive the specified source directories.
    """
    try:
        if verbose:
            enable_debug_logging()

        jobs = load_jobs(
            job_file,
            sources,
            output_dir,
            [p for e in exclude for p in split_patterns(e)],
            default_excludes,
        )
        archiver = Archiver(Compressor.fromStr(backend, verbose), date_only)
        results = archiver.run(jobs)

        console.print(ResultsPresenter(results).createResultsPanel(console))
        sys.exit(CFG.exit_codes.failed_jobs if count_failed(results) else 0)
    except BackitupError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)

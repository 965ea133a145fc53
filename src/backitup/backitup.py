# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys

import click
from click_help_colors import HelpColorsGroup

from backitup.plan.cli import plan
from backitup.run.cli import run

__version__ = "0.4.0"

# support both --help and -h
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(
    cls=HelpColorsGroup,
    help_options_color="bright_blue",
    invoke_without_command=True,
    context_settings=_CONTEXT_SETTINGS,
)
@click.option(
    "--version",
    is_flag=True,
    help="Print the current version of backitup and exit.",
)
@click.pass_context
def cli(ctx: click.Context, version: bool):
    """
    Run any backitup command.

    backitup archives project directories into compressed, timestamped tarballs,
    leaving out heavy or unnecessary directories such as virtual environments and
    dependency caches.
    """
    if version:
        print(__version__)
        sys.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        sys.exit(0)


cli.add_command(run)
cli.add_command(plan)

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from .config import CFG

# prefix shared by the names of all backitup loggers
_PACKAGE_PREFIX = "backitup"


def get_logger(name: str, show_time: bool = False) -> logging.Logger:
    """
    Return a logger with unified formatting.
    Messages are rendered by rich's RichHandler with colored levels.
    """
    logger = logging.getLogger(name)

    debug_mode = os.environ.get(CFG.env_vars.debug_mode) is not None
    logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    console = Console(stderr=True)
    handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        show_path=False,
        show_level=True,
        show_time=show_time or debug_mode,
        log_time_format=CFG.date_formats.standard,
        tracebacks_width=None,
        tracebacks_code_width=None,
    )

    handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def enable_debug_logging() -> None:
    """
    Switch all already created backitup loggers (and their handlers) to DEBUG level.

    Used by the `--verbose` flag of the commands; setting the debug environment
    variable has the same effect for loggers created afterwards.
    """
    for name, logger in logging.Logger.manager.loggerDict.items():
        if not name.startswith(_PACKAGE_PREFIX) or not isinstance(
            logger, logging.Logger
        ):
            continue

        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)

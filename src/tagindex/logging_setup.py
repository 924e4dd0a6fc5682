"""Logging for the tagindex command line.

Records from ``tagindex.*`` loggers go to a Rich handler on stderr so that
command output on stdout stays clean. Code that imports tagindex as a library
and never calls :func:`configure_logging` keeps the standard logging setup.
"""

from __future__ import annotations

import logging
import os
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["LOG_LEVEL_ENV", "PACKAGE_LOGGER", "configure_logging", "level_from_env", "log_console"]

PACKAGE_LOGGER: Final[str] = "tagindex"
LOG_LEVEL_ENV: Final[str] = "TAGINDEX_LOG_LEVEL"

log_console = Console(stderr=True)


def level_from_env(default: int = logging.INFO) -> int:
    """Level named by ``TAGINDEX_LOG_LEVEL``, or ``default`` if unset or unknown."""
    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Route package logs to stderr; safe to call more than once."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if isinstance(existing, RichHandler):
            package_logger.removeHandler(existing)

    handler = RichHandler(console=log_console, show_path=False, markup=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger.addHandler(handler)

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = level_from_env()
    package_logger.setLevel(level)
    package_logger.propagate = False
    return package_logger

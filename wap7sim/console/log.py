"""Logging setup for the interactive simulator.

All modules log through ``logging.getLogger(__name__)`` below the
``wap7sim`` package logger. This module attaches a single ``RichHandler``
writing to stderr, so log lines never interleave with command output on
stdout, and flips the package logger between the normal and verbose level.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from wap7sim.config import DEFAULT_LOG_LEVEL, VERBOSE_LOG_LEVEL

PACKAGE_LOGGER = "wap7sim"


def configure_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Attach the rich handler to the package logger and set its level.

    Calling it again replaces the handler installed by an earlier call.

    Args:
        verbose: Start at the verbose level instead of the default one.
        console: Console to log to. Defaults to a stderr console.

    Returns:
        logging.Logger: The package logger.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(VERBOSE_LOG_LEVEL if verbose else DEFAULT_LOG_LEVEL)
    root.propagate = False
    return root


def is_verbose() -> bool:
    return logging.getLogger(PACKAGE_LOGGER).level == VERBOSE_LOG_LEVEL


def toggle_verbose() -> bool:
    """Switch the package logger between default and verbose level.

    Returns:
        bool: True if verbose logging is now enabled.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    enable = root.level != VERBOSE_LOG_LEVEL
    root.setLevel(VERBOSE_LOG_LEVEL if enable else DEFAULT_LOG_LEVEL)
    return enable

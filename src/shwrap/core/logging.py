"""Logging setup shared by every module."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from shwrap.core.constants import APP_NAME

__all__ = ["configure_logging", "get_logger"]

_configured = False


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Route shwrap logs to stderr through rich. Safe to call repeatedly."""
    global _configured

    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level)
    if _configured:
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    _configured = True

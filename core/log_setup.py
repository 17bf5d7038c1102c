"""
log_setup.py - Logging Setup

Rich-backed logging for the renamer. Library modules call get_logger();
only front ends call setup_logging().
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "renamer"


def setup_logging(level: str = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    """
    Configure and return the renamer root logger

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console: Rich console to log to (defaults to stderr, stdout carries the report)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level.upper())

    # Avoid adding duplicate handlers
    if logger.handlers:
        return logger

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_time=True,
        show_path=False,
        log_time_format="[%X]",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    logger.debug("Logger initialized")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child of the renamer logger"""
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")

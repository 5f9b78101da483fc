"""Logging setup for the pathnorm CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from pathnorm.config import LogLevel

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: TRACE,
}


def setup_logging(level: LogLevel | str = LogLevel.INFO) -> logging.Logger:
    """Route pathnorm's loggers to stderr through rich.

    Safe to call repeatedly; the previous handler is replaced.

    Args:
        level: Configured log level name

    Returns:
        The package logger
    """
    logger = logging.getLogger("pathnorm")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(LEVELS[LogLevel(level)])
    return logger

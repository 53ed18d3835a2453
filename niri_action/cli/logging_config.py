"""Logging configuration for the niri-action CLI.

Provides:
- WARNING level by default, INFO with --verbose, DEBUG with --debug
- Colored level names when stderr is a terminal
- IPC and picker traffic logged at DEBUG by the core modules
"""

import logging
import sys


DEFAULT_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"

ROOT_LOGGER = "niri_action"


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in an ANSI color."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        original = record.levelname
        color = self.COLORS.get(original)
        if color:
            record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # Other handlers see the same record
            record.levelname = original


def setup_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the niri_action logger.

    ``debug`` wins over ``verbose``. Calling this again replaces the handler.
    """
    if debug:
        level, log_format = logging.DEBUG, DEBUG_FORMAT
    elif verbose:
        level, log_format = logging.INFO, VERBOSE_FORMAT
    else:
        level, log_format = logging.WARNING, DEFAULT_FORMAT

    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    logger.propagate = False
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    formatter_class = ColoredFormatter if sys.stderr.isatty() else logging.Formatter
    handler.setFormatter(formatter_class(log_format))
    logger.addHandler(handler)

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get logger instance under the niri_action hierarchy."""
    return logging.getLogger(name)

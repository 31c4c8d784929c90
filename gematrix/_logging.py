"""
Logging helpers for gematrix.

Library modules only ask for loggers; handlers are installed by the CLI or by the embedding application.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "gematrix"

def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    return logging.getLogger(name)

def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Configure logging for the gematrix package.

    Args:
        level: Logging level (default: INFO)
        format_string: Log format string (default: DEFAULT_FORMAT)
        date_format: Date format string (default: DEFAULT_DATE_FORMAT)
        stream: Output stream (default: sys.stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT,
    ))
    logger.addHandler(handler)
    return logger

def enable_debug_logging() -> None:
    configure_logging(level=logging.DEBUG)

def disable_logging() -> None:
    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())

# Library default: stay silent unless the application configures handlers.
logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())

"""Logging setup shared by all trip_insights modules."""

import logging
import sys
from typing import Optional

from trip_insights.conf.settings import settings
from .io_utils import ensure_dir


def setup_logger(
    name: str,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
) -> logging.Logger:
    """Configure a logger with a console handler and an optional file handler.

    Args:
        name: Logger name
        log_level: Level name (defaults to settings.log_level)
        log_file: File name for the file handler (None = console only)
        log_dir: Directory for log_file (defaults to settings.logs_path)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel((log_level or settings.log_level).upper())

    formatter = logging.Formatter(settings.log_format)

    # Avoid stacking handlers when called twice for the same name
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        logger.addHandler(console)

    if log_file is None and settings.log_to_file:
        log_file = f"{name}.log"

    if log_file:
        log_path = ensure_dir(log_dir or settings.logs_path)
        file_handler = logging.FileHandler(log_path / log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger.

    Module loggers carry no handlers of their own; records propagate to
    whatever setup_logger() configured higher up.
    """
    return logging.getLogger(name)

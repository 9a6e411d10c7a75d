"""Utility modules for trip insights."""

from .logging_utils import setup_logger, get_logger
from .time_utils import (
    parse_timestamp,
    to_epoch_seconds,
    duration_seconds,
)
from .io_utils import (
    ensure_dir,
    decode_json,
    load_json,
    write_report,
)

__all__ = [
    # Logging
    "setup_logger",
    "get_logger",
    # Time
    "parse_timestamp",
    "to_epoch_seconds",
    "duration_seconds",
    # IO
    "ensure_dir",
    "decode_json",
    "load_json",
    "write_report",
]

"""Timestamp parsing and duration utilities."""

from datetime import datetime, timezone
from typing import Union
import re
import pandas as pd

TimestampLike = Union[str, int, float, datetime, pd.Timestamp]

# Epoch seconds that arrived as text, e.g. "1700000000" or "1700000000.25"
_EPOCH_STRING = re.compile(r"^-?\d+(\.\d+)?$")

# Calendar date prefix required of ISO-8601 text (rules out "now", "today")
_ISO_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")


def _from_epoch(seconds: float) -> datetime:
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError) as e:
        raise ValueError(f"Epoch timestamp out of range: {seconds}") from e


def parse_timestamp(ts: TimestampLike) -> datetime:
    """Parse timestamp to a timezone-aware UTC datetime.

    Numbers (and numeric strings) are Unix epoch seconds; other strings must be
    ISO-8601. Naive datetimes and strings without an offset are taken as UTC.

    Args:
        ts: Timestamp in various formats

    Returns:
        datetime object in UTC
    """
    if isinstance(ts, bool):
        raise ValueError(f"Cannot parse timestamp of type {type(ts)}: {ts}")
    elif isinstance(ts, pd.Timestamp):
        parsed = ts.to_pydatetime()
    elif isinstance(ts, datetime):
        parsed = ts
    elif isinstance(ts, (int, float)):
        return _from_epoch(ts)
    elif isinstance(ts, str):
        text = ts.strip()
        if _EPOCH_STRING.match(text):
            return _from_epoch(float(text))
        if not _ISO_DATE_PREFIX.match(text):
            raise ValueError(f"Not an ISO-8601 timestamp: {ts!r}")
        parsed = pd.to_datetime(text, format="ISO8601").to_pydatetime()
    else:
        raise ValueError(f"Cannot parse timestamp of type {type(ts)}: {ts}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_epoch_seconds(ts: TimestampLike) -> float:
    """Convert timestamp to seconds since the Unix epoch."""
    return parse_timestamp(ts).timestamp()


def duration_seconds(start: TimestampLike, end: TimestampLike) -> float:
    """Seconds elapsed from start to end (negative if end precedes start)."""
    return to_epoch_seconds(end) - to_epoch_seconds(start)

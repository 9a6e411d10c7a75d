"""Tests for timestamp parsing."""

from datetime import datetime, timedelta, timezone

import pandas as pd
import pytest

from trip_insights.utils.time_utils import duration_seconds, parse_timestamp, to_epoch_seconds


def test_epoch_seconds():
    assert parse_timestamp(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert parse_timestamp(1_700_000_000.5).timestamp() == 1_700_000_000.5


def test_numeric_string_is_epoch():
    assert to_epoch_seconds("1700000000") == 1_700_000_000


def test_iso_strings():
    parsed = parse_timestamp("2024-05-01T08:00:00Z")
    assert parsed == datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)

    offset = parse_timestamp("2024-05-01T10:00:00+02:00")
    assert offset == parsed
    assert offset.utcoffset() == timedelta(0)


def test_naive_values_are_utc():
    assert parse_timestamp(datetime(2024, 5, 1, 8)).tzinfo == timezone.utc
    assert parse_timestamp("2024-05-01 08:00:00").tzinfo == timezone.utc


def test_pandas_timestamp():
    ts = pd.Timestamp("2024-05-01T08:00:00Z")
    assert parse_timestamp(ts) == datetime(2024, 5, 1, 8, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", [None, True, [1, 2], "not a time"])
def test_unparseable_values(value):
    with pytest.raises(ValueError):
        parse_timestamp(value)


def test_duration_seconds_mixed_inputs():
    assert duration_seconds(0, "1970-01-01T00:02:05Z") == 125


@pytest.mark.parametrize("value", ["now", "today", "yesterday", "May 1st 2024"])
def test_relative_and_free_text_rejected(value):
    with pytest.raises(ValueError, match="ISO-8601"):
        parse_timestamp(value)


@pytest.mark.parametrize("value", [1e20, "1e20", -1e20, "99999999999999999999"])
def test_epoch_out_of_range(value):
    with pytest.raises(ValueError):
        parse_timestamp(value)

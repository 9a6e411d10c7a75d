"""Tests for trip payload parsing."""

import json
from datetime import datetime, timezone

import pytest

from conftest import TRIP_A_ID, make_trip_payload
from trip_insights.errors import MalformedTripError
from trip_insights.ingestion import (
    build_trip_metadata,
    load_trip,
    parse_trip_payload,
    validate_trip_document,
)
from trip_insights.schemas import TyreType


def test_parse_upload_payload():
    payload = make_trip_payload([10, 20], session_start=1_700_000_000, session_end=None)
    trip = parse_trip_payload(json.dumps(payload))

    assert trip.id == TRIP_A_ID
    assert trip.session_id == 1
    assert trip.tyre_type is TyreType.SUMMER
    assert len(trip.points) == 2
    assert trip.session_start == datetime.fromtimestamp(1_700_000_000, tz=timezone.utc)
    assert trip.end_boundary == trip.points[-1].timestamp


def test_camel_case_keys_accepted():
    payload = make_trip_payload([10])
    payload["sessionId"] = payload.pop("session_id")
    payload["sessionStart"] = "2024-05-01T08:00:00Z"
    payload.pop("session_start")
    payload["points"] = payload.pop("data")

    trip = parse_trip_payload(json.dumps(payload).encode())
    assert trip.session_start.year == 2024
    assert trip.has_points


def test_invalid_json():
    with pytest.raises(MalformedTripError, match="Invalid JSON format"):
        parse_trip_payload("{not json")


def test_schema_errors_are_listed():
    payload = make_trip_payload([10, 20], tyreType="Slick")
    payload["data"][1]["speed"] = "fast"

    with pytest.raises(MalformedTripError) as exc_info:
        parse_trip_payload(json.dumps(payload))

    error = exc_info.value
    assert len(error.errors) == 2
    assert "speed" in str(error)
    assert "All-Season" in str(error)


def test_non_uuid_id_rejected():
    payload = make_trip_payload([10], trip_id="trip-1")
    with pytest.raises(MalformedTripError, match="uuid"):
        parse_trip_payload(json.dumps(payload))


def test_load_trip_from_file(tmp_path):
    path = tmp_path / "trip.json"
    path.write_text(json.dumps(make_trip_payload([10, 20, 30])), encoding="utf8")

    trip = load_trip(path)
    assert [p.speed for p in trip.points] == [10, 20, 30]


def test_trip_metadata():
    payload = make_trip_payload(
        [10],
        startLocation={
            "longitude": 13.4,
            "latitude": 52.5,
            "city": "Berlin",
            "street": "Unter den Linden",
            "district": "Mitte",
        },
    )
    metadata = build_trip_metadata(parse_trip_payload(json.dumps(payload)))

    assert metadata == {
        "driverName": "Alex",
        "carModel": "Civic",
        "startLocation": {"city": "Berlin", "district": "Mitte", "street": "Unter den Linden"},
        "endLocation": None,
    }


@pytest.mark.parametrize("session_start", ["now", "today", 1e20])
def test_unusable_session_start_rejected(session_start):
    payload = make_trip_payload([10], session_start=session_start)

    with pytest.raises(MalformedTripError) as exc_info:
        parse_trip_payload(json.dumps(payload))

    assert "session_start" in str(exc_info.value)


def test_string_integers_rejected():
    payload = make_trip_payload([10, 20])
    payload["session_id"] = "12"
    payload["data"][0]["index"] = "0"

    with pytest.raises(MalformedTripError) as exc_info:
        parse_trip_payload(json.dumps(payload))

    assert len(exc_info.value.errors) == 2


def test_load_trip_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf8")

    with pytest.raises(MalformedTripError, match="Invalid JSON format"):
        load_trip(path)


def test_validate_decoded_document():
    trip = validate_trip_document(make_trip_payload([10, 20]))
    assert trip.id == TRIP_A_ID

    with pytest.raises(MalformedTripError, match="data"):
        validate_trip_document({**make_trip_payload([10]), "data": "none"})

"""Shared trip fixtures."""

from typing import List, Optional

import pytest

from trip_insights.schemas import TripSession

TRIP_A_ID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"
TRIP_B_ID = "0f8fad5b-d9cb-469f-a165-70867728950e"


def make_trip_payload(
    speeds: List[float],
    distances: Optional[List[float]] = None,
    session_start=0,
    session_end=2,
    trip_id: str = TRIP_A_ID,
    **extra,
) -> dict:
    """Build an upload-shaped trip dict with one point per second."""
    if distances is None:
        distances = [500.0 * i for i in range(len(speeds))]

    start_epoch = session_start if isinstance(session_start, (int, float)) else 0

    payload = {
        "id": trip_id,
        "session_id": 1,
        "session_start": session_start,
        "session_end": session_end,
        "driverName": "Alex",
        "tyreType": "Summer",
        "carModel": "Civic",
        "data": [
            {
                "index": i,
                "timestamp": start_epoch + i,
                "longitude": 13.40 + i * 0.001,
                "latitude": 52.52 + i * 0.001,
                "speed": speed,
                "distance": distance,
            }
            for i, (speed, distance) in enumerate(zip(speeds, distances))
        ],
    }
    payload.update(extra)
    return payload


def make_trip(speeds: List[float], **kwargs) -> TripSession:
    return TripSession.model_validate(make_trip_payload(speeds, **kwargs))


@pytest.fixture
def trip_a() -> TripSession:
    return make_trip([10, 20, 30], distances=[0, 500, 1000])


@pytest.fixture
def trip_b() -> TripSession:
    return make_trip([5, 10, 15], distances=[0, 500, 1000], trip_id=TRIP_B_ID)


@pytest.fixture
def empty_trip() -> TripSession:
    return make_trip(
        [],
        trip_id=TRIP_B_ID,
        session_end=None,
        startLocation={"city": "Berlin", "street": "Unter den Linden", "district": "Mitte"},
        endLocation=None,
    )

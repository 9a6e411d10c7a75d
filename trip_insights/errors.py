"""Exceptions raised by trip analysis."""

from typing import List, Optional


class TripInsightsError(Exception):
    """Base class for trip insight errors."""


class NoDataError(TripInsightsError, ValueError):
    """Trip has no telemetry points but the operation needs at least one."""

    def __init__(self, trip_id: Optional[str] = None, message: Optional[str] = None):
        self.trip_id = trip_id
        if message is None:
            message = f"Trip {trip_id} has no telemetry points" if trip_id else "Trip has no telemetry points"
        super().__init__(message)


class MalformedTripError(TripInsightsError, ValueError):
    """Trip payload failed to parse or did not match the trip schema."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = errors or []
        super().__init__(message)

"""Shared per-trip aggregation used by insights and comparisons."""

from dataclasses import dataclass
from typing import Optional
import numpy as np
import pandas as pd

from trip_insights.conf.settings import settings
from trip_insights.errors import NoDataError
from trip_insights.schemas.trip import TripSession
from trip_insights.utils.logging_utils import get_logger
from trip_insights.utils.time_utils import duration_seconds

logger = get_logger(__name__)

# m/s -> km/h
MS_TO_KMH = 3.6
METERS_PER_KM = 1000.0
SECONDS_PER_MINUTE = 60.0


@dataclass(frozen=True)
class TripAggregate:
    """Unrounded aggregate statistics for one trip.

    Speeds are in km/h; the per-point speed field is m/s and is converted
    here, once, for every caller.
    """

    distance_km: float
    duration_seconds: float
    avg_speed_kmh: float
    max_speed_kmh: float
    min_speed_kmh: float
    point_count: int

    @property
    def duration_minutes(self) -> float:
        return self.duration_seconds / SECONDS_PER_MINUTE


def round_half_up(value: float, decimals: Optional[int] = None) -> float:
    """Round to a fixed number of decimals, ties going up (toward +inf).

    Matches ``Math.round(value * 10**decimals) / 10**decimals`` so summaries
    agree with what dashboards computed client side. Python's round() uses
    banker's rounding on exact ties.

    Args:
        value: Value to round
        decimals: Decimal places (defaults to settings.rounding_decimals)

    Returns:
        Rounded float (never -0.0)
    """
    if decimals is None:
        decimals = settings.rounding_decimals

    factor = 10.0 ** decimals
    rounded = float(np.floor(value * factor + 0.5) / factor)

    if rounded == 0:
        return 0.0
    return rounded


def speed_series(trip: TripSession) -> pd.Series:
    """Per-point speeds (m/s) as a float Series, in point order."""
    return pd.Series([p.speed for p in trip.points], dtype="float64", name="speed")


def aggregate_trip(trip: TripSession) -> TripAggregate:
    """Compute distance, duration and speed aggregates for a trip.

    Distance comes from the last point's cumulative ``distance`` (no
    recomputation from coordinates). Duration runs from ``session_start`` to
    ``session_end``, or to the last point's timestamp when the session has
    no recorded end.

    Args:
        trip: Trip with at least one point

    Returns:
        TripAggregate with unrounded values

    Raises:
        NoDataError: If the trip has no points
    """
    if not trip.has_points:
        raise NoDataError(trip.id)

    last = trip.points[-1]
    speeds = speed_series(trip)

    aggregate = TripAggregate(
        distance_km=last.distance / METERS_PER_KM,
        duration_seconds=duration_seconds(trip.session_start, trip.end_boundary),
        avg_speed_kmh=float(speeds.mean()) * MS_TO_KMH,
        max_speed_kmh=float(speeds.max()) * MS_TO_KMH,
        min_speed_kmh=float(speeds.min()) * MS_TO_KMH,
        point_count=len(speeds),
    )

    logger.debug(
        f"Aggregated trip {trip.id}: {aggregate.point_count} points, "
        f"{aggregate.distance_km:.3f} km, {aggregate.duration_seconds:.1f} s"
    )

    return aggregate

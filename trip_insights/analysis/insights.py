"""Single-trip insight calculation."""

from typing import Optional

from trip_insights.conf.settings import settings
from trip_insights.schemas.summaries import InsightSummary
from trip_insights.schemas.trip import TripSession
from trip_insights.utils.logging_utils import get_logger
from .aggregate import aggregate_trip, round_half_up, SECONDS_PER_MINUTE

logger = get_logger(__name__)


def compute_insights(trip: TripSession) -> InsightSummary:
    """Summarize one trip.

    A trip without points is valid: descriptive fields are passed through,
    every numeric field is None and ``has_data`` is False.

    Args:
        trip: Validated trip session

    Returns:
        InsightSummary with distance in km, time in whole seconds and speeds
        in km/h, rounded to settings.rounding_decimals
    """
    descriptive = dict(
        driver_name=trip.driver_name,
        tyre_type=trip.tyre_type,
        car_model=trip.car_model,
        start_location=trip.start_location,
        end_location=trip.end_location,
    )

    if not trip.has_points:
        logger.info(f"Trip {trip.id} has no points, returning descriptive summary only")
        return InsightSummary(**descriptive, has_data=False)

    aggregate = aggregate_trip(trip)

    return InsightSummary(
        **descriptive,
        total_distance=round_half_up(aggregate.distance_km),
        total_time=int(round_half_up(aggregate.duration_seconds, 0)),
        average_speed=round_half_up(aggregate.avg_speed_kmh),
        max_speed=round_half_up(aggregate.max_speed_kmh),
        min_speed=round_half_up(aggregate.min_speed_kmh),
        has_data=True,
    )


def format_duration(seconds: Optional[float]) -> str:
    """Format a duration in seconds as minutes with two decimals.

    >>> format_duration(90)
    '1.50 min'
    >>> format_duration(None)
    'N/A'
    """
    if seconds is None:
        return settings.unavailable_marker

    minutes = round_half_up(seconds / SECONDS_PER_MINUTE, 2)
    return f"{minutes:.2f} min"

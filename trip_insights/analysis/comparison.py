"""Cross-trip comparison."""

import math
from typing import Optional

from trip_insights.errors import NoDataError
from trip_insights.schemas.summaries import ComparisonSummary, MetricComparison
from trip_insights.schemas.trip import TripSession
from trip_insights.utils.logging_utils import get_logger
from .aggregate import aggregate_trip, round_half_up

logger = get_logger(__name__)


def diff_metric(current: float, comparison: float, metric: Optional[str] = None) -> MetricComparison:
    """Compare one metric value against its baseline.

    Difference and percentage are computed from the unrounded inputs; all
    four fields are rounded afterwards. A zero baseline, or one so small that
    the ratio is not a finite number, leaves ``percentage_diff`` as None.

    Args:
        current: Value for the trip being inspected
        comparison: Baseline value
        metric: Metric name, used in log messages only

    Returns:
        MetricComparison
    """
    difference = current - comparison

    if comparison == 0:
        logger.warning(
            f"Baseline for {metric or 'metric'} is zero, percentage difference unavailable"
        )
        percentage_diff = None
    else:
        percentage_diff = round_half_up(difference / comparison * 100)
        if not math.isfinite(percentage_diff):
            logger.warning(
                f"Baseline for {metric or 'metric'} ({comparison!r}) is too small, "
                f"percentage difference unavailable"
            )
            percentage_diff = None

    return MetricComparison(
        current=round_half_up(current),
        comparison=round_half_up(comparison),
        difference=round_half_up(difference),
        percentage_diff=percentage_diff,
    )


def compare_trips(current: TripSession, comparison: TripSession) -> ComparisonSummary:
    """Compare distance, time, average speed and max speed of two trips.

    Args:
        current: Trip being inspected
        comparison: Baseline trip

    Returns:
        ComparisonSummary (distance in km, time in minutes, speeds in km/h)

    Raises:
        NoDataError: If either trip has no points
    """
    if not current.has_points:
        raise NoDataError(current.id, f"Current trip {current.id} has no telemetry points")
    if not comparison.has_points:
        raise NoDataError(
            comparison.id, f"Comparison trip {comparison.id} has no telemetry points"
        )

    logger.info(f"Comparing trip {current.id} against {comparison.id}")

    a = aggregate_trip(current)
    b = aggregate_trip(comparison)

    return ComparisonSummary(
        total_distance=diff_metric(a.distance_km, b.distance_km, "totalDistance"),
        total_time=diff_metric(a.duration_minutes, b.duration_minutes, "totalTime"),
        average_speed=diff_metric(a.avg_speed_kmh, b.avg_speed_kmh, "averageSpeed"),
        max_speed=diff_metric(a.max_speed_kmh, b.max_speed_kmh, "maxSpeed"),
    )

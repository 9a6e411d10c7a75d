"""Trip insight and comparison computations."""

from .aggregate import (
    aggregate_trip,
    round_half_up,
    TripAggregate,
    MS_TO_KMH,
)
from .insights import compute_insights, format_duration
from .comparison import compare_trips, diff_metric

__all__ = [
    # Aggregation
    "aggregate_trip",
    "round_half_up",
    "TripAggregate",
    "MS_TO_KMH",
    # Insights
    "compute_insights",
    "format_duration",
    # Comparison
    "compare_trips",
    "diff_metric",
]

"""Trip insights and trip comparison for vehicle telemetry sessions."""

from .analysis import compute_insights, compare_trips, format_duration
from .schemas import TripSession, InsightSummary, ComparisonSummary

__version__ = "0.1.0"

__all__ = [
    "compute_insights",
    "compare_trips",
    "format_duration",
    "TripSession",
    "InsightSummary",
    "ComparisonSummary",
]

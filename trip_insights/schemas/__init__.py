"""Data schemas and contracts for trip analysis."""

from .trip import TelemetryPoint, TripSession, Location, TyreType
from .summaries import InsightSummary, MetricComparison, ComparisonSummary

__all__ = [
    # Input
    "TelemetryPoint",
    "TripSession",
    "Location",
    "TyreType",
    # Output
    "InsightSummary",
    "MetricComparison",
    "ComparisonSummary",
]

"""Insight and comparison summary schemas.

Summaries serialize with camelCase keys (``totalDistance``, ``hasData``,
``percentageDiff``) so they can be returned as JSON unchanged. Unavailable
values are ``None`` and serialize as ``null``.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .trip import Location, TyreType


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(by_alias=True, mode="json")


class InsightSummary(_CamelModel):
    """Derived statistics for a single trip."""

    # Descriptive (passed through)
    driver_name: Optional[str] = None
    tyre_type: Optional[TyreType] = None
    car_model: Optional[str] = None
    start_location: Optional[Location] = None
    end_location: Optional[Location] = None

    # Numeric (None = unavailable)
    total_distance: Optional[float] = Field(None, description="Total distance (km)")
    total_time: Optional[int] = Field(None, description="Session duration (seconds)")
    average_speed: Optional[float] = Field(None, description="Mean speed (km/h)")
    max_speed: Optional[float] = Field(None, description="Maximum speed (km/h)")
    min_speed: Optional[float] = Field(None, description="Minimum speed (km/h)")

    has_data: bool = Field(..., description="Whether the trip had any points")


class MetricComparison(_CamelModel):
    """One metric of a trip compared against a baseline trip."""

    current: float
    comparison: float
    difference: float
    percentage_diff: Optional[float] = Field(
        None, description="Relative difference in %; None when the baseline is zero"
    )

    @property
    def percentage_available(self) -> bool:
        return self.percentage_diff is not None


class ComparisonSummary(_CamelModel):
    """Four-metric comparison of two trips.

    Units: total_distance in km, total_time in minutes, speeds in km/h.
    """

    total_distance: MetricComparison
    total_time: MetricComparison
    average_speed: MetricComparison
    max_speed: MetricComparison

    def metrics(self) -> Dict[str, MetricComparison]:
        return {
            "totalDistance": self.total_distance,
            "totalTime": self.total_time,
            "averageSpeed": self.average_speed,
            "maxSpeed": self.max_speed,
        }

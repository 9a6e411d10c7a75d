"""Trip session and telemetry point schemas."""

from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import UUID
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, field_validator

from trip_insights.utils.time_utils import parse_timestamp


class TyreType(str, Enum):
    """Tyre fitted for the trip."""

    WINTER = "Winter"
    SUMMER = "Summer"
    ALL_SEASON = "All-Season"


class Location(BaseModel):
    """Place descriptor for the start or end of a trip."""

    model_config = ConfigDict(frozen=True)

    longitude: Optional[float] = Field(None, description="Longitude (degrees)")
    latitude: Optional[float] = Field(None, description="Latitude (degrees)")
    city: Optional[str] = Field(None, description="City name")
    street: Optional[str] = Field(None, description="Street name")
    district: Optional[str] = Field(None, description="District name")


class TelemetryPoint(BaseModel):
    """One timestamped GPS + speed + cumulative distance sample."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "index": 0,
                "timestamp": "2024-05-01T08:00:00Z",
                "longitude": 13.4050,
                "latitude": 52.5200,
                "speed": 12.5,
                "distance": 0.0,
            }
        },
    )

    index: StrictInt = Field(..., description="Sample ordinal (strictly increasing)")
    timestamp: datetime = Field(..., description="Sample time (ISO8601 or epoch seconds)")
    longitude: float = Field(..., description="Longitude (degrees)")
    latitude: float = Field(..., description="Latitude (degrees)")
    speed: float = Field(..., description="Instantaneous speed (m/s)")
    distance: float = Field(..., description="Cumulative distance from trip start (m)")

    @field_validator("timestamp", mode="before")
    @classmethod
    def _parse_timestamp(cls, value):
        return parse_timestamp(value)


class TripSession(BaseModel):
    """One uploaded telemetry recording.

    Accepts the upload payload keys (``session_id``, ``data``, ``driverName``)
    as well as their camelCase / descriptive spellings. Points are expected in
    chronological order with non-decreasing ``distance``.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "7c9e6679-7425-40de-944b-e07fc1f90ae7",
                "session_id": 12,
                "session_start": "2024-05-01T08:00:00Z",
                "session_end": "2024-05-01T08:30:00Z",
                "driverName": "Alex",
                "tyreType": "Summer",
                "carModel": "Civic",
                "data": [],
            }
        },
    )

    id: str = Field(..., description="Trip identifier (UUID)")
    session_id: StrictInt = Field(
        ..., validation_alias=AliasChoices("session_id", "sessionId")
    )
    session_start: datetime = Field(
        ..., validation_alias=AliasChoices("session_start", "sessionStart")
    )
    session_end: Optional[datetime] = Field(
        None,
        validation_alias=AliasChoices("session_end", "sessionEnd"),
        description="Session end; when absent the last point bounds the trip",
    )

    driver_name: Optional[str] = Field(
        None, validation_alias=AliasChoices("driverName", "driver_name")
    )
    tyre_type: Optional[TyreType] = Field(
        None, validation_alias=AliasChoices("tyreType", "tyre_type")
    )
    car_model: Optional[str] = Field(
        None, validation_alias=AliasChoices("carModel", "car_model")
    )
    start_location: Optional[Location] = Field(
        None, validation_alias=AliasChoices("startLocation", "start_location")
    )
    end_location: Optional[Location] = Field(
        None, validation_alias=AliasChoices("endLocation", "end_location")
    )

    points: List[TelemetryPoint] = Field(
        default_factory=list, validation_alias=AliasChoices("data", "points")
    )

    @field_validator("id")
    @classmethod
    def _check_uuid(cls, value: str) -> str:
        try:
            UUID(value)
        except ValueError:
            raise ValueError(f"Invalid uuid: {value}") from None
        return value

    @field_validator("session_start", "session_end", mode="before")
    @classmethod
    def _parse_session_time(cls, value):
        if value is None:
            return None
        return parse_timestamp(value)

    @property
    def has_points(self) -> bool:
        return len(self.points) > 0

    @property
    def end_boundary(self) -> Optional[datetime]:
        """session_end if recorded, else the last point's timestamp."""
        if self.session_end is not None:
            return self.session_end
        if self.points:
            return self.points[-1].timestamp
        return None

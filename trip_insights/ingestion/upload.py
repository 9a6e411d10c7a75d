"""Parse uploaded trip payloads into TripSession objects."""

from pathlib import Path
from typing import Any, Dict, List, Optional
import orjson
from pydantic import ValidationError

from trip_insights.errors import MalformedTripError
from trip_insights.schemas.trip import Location, TripSession
from trip_insights.utils.io_utils import decode_json, load_json
from trip_insights.utils.logging_utils import get_logger

logger = get_logger(__name__)


def format_validation_errors(exc: ValidationError) -> List[str]:
    """Render pydantic errors as ``"dotted.path: message"`` strings."""
    messages = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"])
        messages.append(f"{path}: {error['msg']}")
    return messages


def validate_trip_document(document: Any) -> TripSession:
    """Validate an already decoded JSON document against the trip schema.

    Raises:
        MalformedTripError: Listing every failing field
    """
    try:
        trip = TripSession.model_validate(document)
    except ValidationError as e:
        errors = format_validation_errors(e)
        raise MalformedTripError(", ".join(errors), errors=errors) from e

    logger.info(f"Parsed trip {trip.id}: {len(trip.points)} points")
    return trip


def parse_trip_payload(payload: str | bytes) -> TripSession:
    """Parse and validate a JSON trip upload.

    Args:
        payload: Raw JSON document

    Returns:
        Validated TripSession

    Raises:
        MalformedTripError: If the document is not JSON or does not match the
            trip schema. The message lists every failing field.
    """
    try:
        document = decode_json(payload)
    except orjson.JSONDecodeError:
        raise MalformedTripError("Invalid JSON format") from None

    return validate_trip_document(document)


def load_trip(file_path: str | Path) -> TripSession:
    """Load and validate a trip JSON file.

    Args:
        file_path: Path to uploaded JSON file

    Returns:
        Validated TripSession

    Raises:
        MalformedTripError: As parse_trip_payload
        OSError: If the file cannot be read
    """
    logger.info(f"Loading trip from {file_path}")
    try:
        document = load_json(file_path)
    except orjson.JSONDecodeError:
        raise MalformedTripError(f"Invalid JSON format in {file_path}") from None

    return validate_trip_document(document)


def _location_metadata(location: Optional[Location]) -> Optional[Dict[str, Any]]:
    if location is None:
        return None
    return {
        "city": location.city,
        "district": location.district,
        "street": location.street,
    }


def build_trip_metadata(trip: TripSession) -> Dict[str, Any]:
    """Quick-access descriptor stored next to an uploaded trip.

    Args:
        trip: Validated trip

    Returns:
        Dict with driverName, carModel, startLocation and endLocation
    """
    return {
        "driverName": trip.driver_name,
        "carModel": trip.car_model,
        "startLocation": _location_metadata(trip.start_location),
        "endLocation": _location_metadata(trip.end_location),
    }

"""Trip upload parsing."""

from .upload import (
    parse_trip_payload,
    validate_trip_document,
    load_trip,
    build_trip_metadata,
    format_validation_errors,
)

__all__ = [
    "parse_trip_payload",
    "validate_trip_document",
    "load_trip",
    "build_trip_metadata",
    "format_validation_errors",
]

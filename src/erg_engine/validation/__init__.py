"""Boundary parsing and OCR field repair."""

from erg_engine.validation.boundary import (
    parse_intervals,
    parse_profile,
    parse_raw_measurement,
    parse_workout_fields,
)
from erg_engine.validation.field_validator import validate_measurement

__all__ = [
    "parse_intervals",
    "parse_profile",
    "parse_raw_measurement",
    "parse_workout_fields",
    "validate_measurement",
]

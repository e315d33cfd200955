"""Pure functions mapping API payload dicts to engine models.

No I/O. Two entry paths exist:

* ``parse_workout_fields`` — the workout-creation boundary. Required fields
  and numeric ranges are enforced; violations raise InputRangeError and the
  request is rejected rather than silently corrected.
* ``parse_raw_measurement`` — the OCR path. The vision model's JSON is a
  best-effort guess, so unparseable values simply become absent and the
  field validator repairs the rest.

Payload keys are the camelCase wire names used by the mobile client.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from erg_engine.exceptions import InputRangeError
from erg_engine.models.athlete import AthleteProfile
from erg_engine.models.enums import (
    CONFIDENCE_BOUNDS,
    HEART_RATE_BOUNDS,
    MAX_INTERVALS,
    MAX_TOTAL_DISTANCE_METRES,
    MAX_TOTAL_TIME_SECONDS,
    STROKE_RATE_BOUNDS,
)
from erg_engine.models.interval import Interval
from erg_engine.models.measurement import RawMeasurement

_SPLIT_KEYS = ("avgSplitSeconds", "avgSplit")
_INTERVAL_HR_KEYS = ("avgHeartRate", "heartRate")


def parse_workout_fields(payload: dict[str, Any]) -> RawMeasurement:
    """Validate a workout-creation payload against the boundary ranges.

    Raises:
        InputRangeError: If a required field is missing or any field is
            non-numeric or outside its range.
    """
    if not isinstance(payload, dict):
        raise InputRangeError("Workout payload must be an object")

    total_time = _require_number(payload, "totalTimeSeconds")
    if not 0 < total_time <= MAX_TOTAL_TIME_SECONDS:
        raise InputRangeError(
            f"totalTimeSeconds must be in (0, {MAX_TOTAL_TIME_SECONDS:g}]",
            field="totalTimeSeconds",
            value=total_time,
        )

    total_distance = _require_number(payload, "totalDistanceMetres")
    if not 0 < total_distance <= MAX_TOTAL_DISTANCE_METRES:
        raise InputRangeError(
            f"totalDistanceMetres must be in (0, {MAX_TOTAL_DISTANCE_METRES:g}]",
            field="totalDistanceMetres",
            value=total_distance,
        )

    split = None
    for key in _SPLIT_KEYS:
        split = _optional_number(payload, key)
        if split is not None:
            if split <= 0:
                raise InputRangeError(f"{key} must be positive", field=key, value=split)
            break

    confidence = _optional_number(payload, "confidence")
    if confidence is not None:
        low, high = CONFIDENCE_BOUNDS
        if confidence != int(confidence) or not low <= confidence <= high:
            raise InputRangeError(
                f"confidence must be an integer in [{low}, {high}]",
                field="confidence",
                value=confidence,
            )

    return RawMeasurement(
        total_time_seconds=total_time,
        total_distance_metres=total_distance,
        avg_split_seconds=split,
        avg_heart_rate=_optional_in_range(payload, "avgHeartRate", HEART_RATE_BOUNDS),
        max_heart_rate=_optional_in_range(payload, "maxHeartRate", HEART_RATE_BOUNDS),
        avg_stroke_rate=_optional_in_range(payload, "avgStrokeRate", STROKE_RATE_BOUNDS),
        confidence=int(confidence) if confidence is not None else None,
    )


def parse_raw_measurement(payload: dict[str, Any]) -> RawMeasurement:
    """Map vision-model JSON to a RawMeasurement without range checks.

    Missing, null or non-numeric values become None.
    """
    if not isinstance(payload, dict):
        return RawMeasurement()

    split = None
    for key in _SPLIT_KEYS:
        split = _to_float(payload.get(key))
        if split is not None:
            break

    confidence = _to_float(payload.get("confidence"))
    return RawMeasurement(
        total_time_seconds=_to_float(payload.get("totalTimeSeconds")),
        total_distance_metres=_to_float(payload.get("totalDistanceMetres")),
        avg_split_seconds=split,
        avg_heart_rate=_to_float(payload.get("avgHeartRate")),
        max_heart_rate=_to_float(payload.get("maxHeartRate")),
        avg_stroke_rate=_to_float(payload.get("avgStrokeRate")),
        confidence=int(round(confidence)) if confidence is not None else None,
    )


def parse_intervals(raw: Any) -> tuple[Interval, ...]:
    """Validate a JSON intervals array into a tuple of Interval.

    ``None`` means "no intervals array" and yields an empty tuple. An
    element may give ``splitSeconds``/``split`` instead of ``timeSeconds``;
    the time is then derived from distance and split.

    Raises:
        InputRangeError: If the value is not a list, is too long, or any
            element is malformed. The message names the offending index.
    """
    if raw is None:
        return ()
    if not isinstance(raw, (list, tuple)):
        raise InputRangeError("intervals must be an array", field="intervals", value=raw)
    if len(raw) > MAX_INTERVALS:
        raise InputRangeError(
            f"intervals cannot contain more than {MAX_INTERVALS} entries",
            field="intervals",
            value=len(raw),
        )
    return tuple(_parse_interval(index, entry) for index, entry in enumerate(raw))


def parse_profile(payload: Optional[dict[str, Any]]) -> AthleteProfile:
    """Map a user-profile dict to an AthleteProfile, defaulting unknown fields."""
    payload = payload or {}
    age = _to_float(payload.get("age"))
    max_hr = _to_float(payload.get("maxHr"))
    resting_hr = _to_float(payload.get("restingHr"))
    return AthleteProfile.with_defaults(
        age_years=int(age) if age is not None else None,
        weight_kg=_to_float(payload.get("weightKg")),
        height_cm=_to_float(payload.get("heightCm")),
        max_hr=int(max_hr) if max_hr is not None else None,
        resting_hr=int(resting_hr) if resting_hr is not None else None,
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_interval(index: int, entry: Any) -> Interval:
    field_prefix = f"intervals[{index}]"
    if not isinstance(entry, dict):
        raise InputRangeError(f"{field_prefix} must be an object", field=field_prefix, value=entry)

    distance = _require_number(entry, "distanceMetres", field_prefix)
    if distance < 0:
        raise InputRangeError(
            f"{field_prefix}.distanceMetres cannot be negative",
            field=f"{field_prefix}.distanceMetres",
            value=distance,
        )

    time = _optional_number(entry, "timeSeconds", field_prefix)
    if time is None:
        split = _optional_number(entry, "splitSeconds", field_prefix)
        if split is None:
            split = _optional_number(entry, "split", field_prefix)
        if split is None:
            raise InputRangeError(
                f"{field_prefix}.timeSeconds is required",
                field=f"{field_prefix}.timeSeconds",
            )
        time = split * distance / 500.0
    if time < 0:
        raise InputRangeError(
            f"{field_prefix}.timeSeconds cannot be negative",
            field=f"{field_prefix}.timeSeconds",
            value=time,
        )

    heart_rate = None
    for key in _INTERVAL_HR_KEYS:
        heart_rate = _optional_in_range(entry, key, HEART_RATE_BOUNDS, field_prefix)
        if heart_rate is not None:
            break

    return Interval(
        distance_metres=distance,
        time_seconds=time,
        avg_heart_rate=heart_rate,
        stroke_rate=_optional_in_range(entry, "strokeRate", STROKE_RATE_BOUNDS, field_prefix),
    )


def _to_float(value: Any) -> Optional[float]:
    """Coerce to a finite float, or None. Booleans are not numbers here."""
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    return result if math.isfinite(result) else None


def _qualified(key: str, prefix: str | None) -> str:
    return f"{prefix}.{key}" if prefix else key


def _optional_number(payload: dict[str, Any], key: str, prefix: str | None = None) -> Optional[float]:
    value = payload.get(key)
    if value is None:
        return None
    number = _to_float(value)
    if number is None:
        name = _qualified(key, prefix)
        raise InputRangeError(f"{name} must be a number", field=name, value=value)
    return number


def _require_number(payload: dict[str, Any], key: str, prefix: str | None = None) -> float:
    number = _optional_number(payload, key, prefix)
    if number is None:
        name = _qualified(key, prefix)
        raise InputRangeError(f"{name} is required", field=name)
    return number


def _optional_in_range(
    payload: dict[str, Any],
    key: str,
    bounds: tuple[float, float],
    prefix: str | None = None,
) -> Optional[float]:
    number = _optional_number(payload, key, prefix)
    if number is None:
        return None
    low, high = bounds
    if not low <= number <= high:
        name = _qualified(key, prefix)
        raise InputRangeError(
            f"{name} must be in [{low:g}, {high:g}]", field=name, value=number
        )
    return number

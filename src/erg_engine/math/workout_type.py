"""Workout-type inference from total distance and time."""

from __future__ import annotations

from erg_engine.models.enums import (
    ONE_MINUTE_TOLERANCE_SECONDS,
    STANDARD_DISTANCE_TYPES,
    STEADY_STATE_MIN_SECONDS,
    WORKOUT_TYPE_DISTANCE_TOLERANCE,
    WorkoutType,
)


def infer_workout_type(
    distance_metres: float,
    time_seconds: float,
    has_intervals: bool = False,
) -> WorkoutType:
    """Classify a workout for the legacy effort score.

    Order of checks: interval session, standard test distance (within 5%),
    one-minute test, long steady state (over 20 minutes), otherwise custom.
    """
    if has_intervals:
        return WorkoutType.INTERVALS

    for distance, workout_type in STANDARD_DISTANCE_TYPES:
        if abs(distance_metres - distance) / distance < WORKOUT_TYPE_DISTANCE_TOLERANCE:
            return workout_type

    if abs(time_seconds - 60.0) < ONE_MINUTE_TOLERANCE_SECONDS:
        return WorkoutType.ONE_MINUTE

    if time_seconds > STEADY_STATE_MIN_SECONDS:
        return WorkoutType.STEADY_STATE

    return WorkoutType.CUSTOM

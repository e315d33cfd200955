"""Pace, power and display helpers for ergometer data.

Reference:
    Concept2 pace/watts calculator: watts = 2.80 / pace^3, pace in s/m.
    Concept2 weight adjustment factor: (weight_kg / 75)^0.222.
"""

from __future__ import annotations

import math

from erg_engine.models.enums import (
    BODY_WEIGHT_EXPONENT,
    CONCEPT2_POWER_CONSTANT,
    REFERENCE_BODY_WEIGHT_KG,
    SPLIT_DISTANCE_METRES,
)


def split_seconds(distance_metres: float, time_seconds: float) -> float:
    """Pace in seconds per 500m. Returns 0.0 for non-positive distance."""
    if distance_metres <= 0:
        return 0.0
    return time_seconds / distance_metres * SPLIT_DISTANCE_METRES


def distance_from_time_and_split(time_seconds: float, split: float) -> float:
    """Distance implied by a total time and a 500m split."""
    if split <= 0:
        return 0.0
    return time_seconds / split * SPLIT_DISTANCE_METRES


def watts(distance_metres: float, time_seconds: float) -> float:
    """Average power from distance and time using the Concept2 formula."""
    if distance_metres <= 0 or time_seconds <= 0:
        return 0.0
    velocity = distance_metres / time_seconds
    return CONCEPT2_POWER_CONSTANT * velocity**3


def watts_from_split(split: float) -> float:
    """Average power for a 500m split in seconds."""
    if split <= 0:
        return 0.0
    return watts(SPLIT_DISTANCE_METRES, split)


def body_weight_factor(weight_kg: float) -> float:
    """Concept2 weight adjustment; heavier athletes move more absolute watts."""
    if weight_kg <= 0:
        return 1.0
    return (weight_kg / REFERENCE_BODY_WEIGHT_KG) ** BODY_WEIGHT_EXPONENT


def round_to_nearest(value: float, step: float) -> float:
    """Round half-up to the nearest multiple of ``step``."""
    return math.floor(value / step + 0.5) * step


def format_time(seconds: float) -> str:
    """Format seconds as an erg display string, e.g. ``7:23.4``."""
    total_tenths = int(round_to_nearest(seconds * 10, 1))
    minutes, tenths = divmod(total_tenths, 600)
    return f"{minutes}:{tenths // 10:02d}.{tenths % 10}"


def format_split(seconds: float) -> str:
    """Format a 500m split, e.g. ``1:45.0 /500m``."""
    return f"{format_time(seconds)} /500m"

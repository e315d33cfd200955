"""Legacy 0-10 effort score.

Kept for backward compatibility with scores already shown to athletes.
Heart-rate intensity relative to max HR contributes up to 6 points,
duration up to 2, the workout type up to 1 and a peak-HR spike up to 1.
Test pieces get a higher ceiling than steady state at the same HR ratio
because heart rate alone undercounts their anaerobic contribution.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from erg_engine.models.enums import (
    CONSERVATIVE_MAX_HR,
    LEGACY_BASE_SCORES,
    LEGACY_SCORE_MAX,
    LEGACY_TYPE_MODIFIERS,
    WorkoutType,
)
from erg_engine.models.interval import Interval


def time_weighted_heart_rate(intervals: Sequence[Interval]) -> float | None:
    """Average heart rate across intervals, weighted by interval duration.

    Intervals without heart rate are ignored. Returns None when no interval
    has heart-rate data.
    """
    with_hr = [i for i in intervals if i.avg_heart_rate is not None]
    if not with_hr:
        return None
    rates = np.array([i.avg_heart_rate for i in with_hr], dtype=np.float64)
    weights = np.array([max(i.time_seconds, 0.0) for i in with_hr], dtype=np.float64)
    if weights.sum() <= 0:
        return float(rates.mean())
    return float(np.average(rates, weights=weights))


def heart_rate_intensity_points(hr_ratio: float) -> float:
    """Points (0-6) for average HR as a fraction of max HR."""
    if hr_ratio >= 0.9:
        return 6.0
    if hr_ratio >= 0.8:
        return 5.0 + (hr_ratio - 0.8) * 10
    if hr_ratio >= 0.7:
        return 3.0 + (hr_ratio - 0.7) * 20
    if hr_ratio >= 0.6:
        return 1.0 + (hr_ratio - 0.6) * 20
    return max(0.0, hr_ratio * 1.67)


def duration_points(duration_minutes: float) -> float:
    """Points (0-2) for workout duration; 60 minutes earns the maximum."""
    if duration_minutes >= 60:
        return 2.0
    if duration_minutes >= 30:
        return 1.0 + (duration_minutes - 30) / 30
    if duration_minutes >= 10:
        return (duration_minutes - 10) / 20
    return 0.0


def peak_heart_rate_bonus(max_heart_rate: float | None, athlete_max_hr: float) -> float:
    """Bonus for touching 90% (+0.5) or 95% (+1.0) of the athlete's max HR."""
    if not max_heart_rate or athlete_max_hr <= 0:
        return 0.0
    ratio = max_heart_rate / athlete_max_hr
    if ratio >= 0.95:
        return 1.0
    if ratio >= 0.9:
        return 0.5
    return 0.0


def estimate_legacy_score(workout_type: WorkoutType, duration_seconds: float) -> float:
    """Duration-only estimate used when no heart-rate data exists."""
    duration_minutes = duration_seconds / 60
    base = LEGACY_BASE_SCORES.get(workout_type, 5.0)

    adjustment = 0.0
    if workout_type in (WorkoutType.STEADY_STATE, WorkoutType.CUSTOM):
        if duration_minutes >= 60:
            adjustment = 1.5
        elif duration_minutes >= 30:
            adjustment = 0.75

    return _clamp(base + adjustment)


def calculate_legacy_score(
    intervals: Sequence[Interval],
    athlete_max_hr: int,
    workout_type: WorkoutType,
    max_heart_rate: float | None = None,
) -> float:
    """Calculate the legacy 0-10 effort score for a workout.

    Args:
        intervals: Chronological workout intervals (non-empty).
        athlete_max_hr: Athlete's max HR; a conservative default is used
            when it is not positive.
        workout_type: Classification driving the type modifier.
        max_heart_rate: Peak HR recorded during the workout, if known.

    Returns:
        Score clamped to [0, 10]. Never fails for missing sensor data.
    """
    duration_seconds = sum(max(i.time_seconds, 0.0) for i in intervals)
    avg_hr = time_weighted_heart_rate(intervals)
    if avg_hr is None:
        return estimate_legacy_score(workout_type, duration_seconds)

    max_hr = athlete_max_hr if athlete_max_hr > 0 else CONSERVATIVE_MAX_HR

    score = heart_rate_intensity_points(avg_hr / max_hr)
    score += duration_points(duration_seconds / 60)
    score += LEGACY_TYPE_MODIFIERS.get(workout_type, 0.3)
    score += peak_heart_rate_bonus(max_heart_rate, max_hr)
    return _clamp(score)


def _clamp(score: float) -> float:
    return min(LEGACY_SCORE_MAX, max(0.0, score))

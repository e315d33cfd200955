"""UTx Effort Points (0-100): four orthogonal sub-scores and their composite.

Sub-scores, each clamped to [0, 100] before weighting:
    cardiac_load  — Karvonen heart-rate-reserve intensity, time-integrated
    work_output   — Concept2 power relative to a weight-adjusted reference
    pacing        — consistency (coefficient of variation) of interval splits
    economy       — distance per stroke relative to a reference

Missing data never suppresses effort: intervals without HR or stroke rate
contribute a neutral mid-scale value instead of zero.

Reference:
    Karvonen et al. (1957). The effects of training on heart rate.
    Ann Med Exp Biol Fenn 35(3):307-315.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from erg_engine.math.pace import body_weight_factor, watts, watts_from_split
from erg_engine.models.athlete import AthleteProfile
from erg_engine.models.effort import EffortBreakdown
from erg_engine.models.enums import (
    AGE_FACTOR_CAP,
    AGE_FACTOR_PER_YEAR,
    AGE_REFERENCE_YEARS,
    DISTANCE_CLASS_REFERENCES,
    NEUTRAL_SUBSCORE,
    PACING_CONSISTENCY_POINTS,
    PACING_CV_PENALTY,
    PACING_NEGATIVE_SPLIT_BONUS,
    WEIGHT_CARDIAC_LOAD,
    WEIGHT_ECONOMY,
    WEIGHT_PACING,
    WEIGHT_WORK_OUTPUT,
    ZONE_BUILDING_MIN,
    ZONE_PEAK_MIN,
    ZONE_TRAINING_MIN,
    EffortZone,
)
from erg_engine.models.interval import Interval


def clamp_subscore(value: float) -> float:
    """Clamp a sub-score to [0, 100]; NaN becomes 0."""
    if math.isnan(value):
        return 0.0
    return min(100.0, max(0.0, value))


def distance_class_reference(total_distance_metres: float) -> tuple[float, float]:
    """Return (reference split s/500m, reference distance per stroke) for a distance."""
    for upper_bound, ref_split, ref_dps in DISTANCE_CLASS_REFERENCES:
        if total_distance_metres <= upper_bound:
            return ref_split, ref_dps
    _, ref_split, ref_dps = DISTANCE_CLASS_REFERENCES[-1]
    return ref_split, ref_dps


def age_factor(age_years: int) -> float:
    """Cardiac credit for age: +0.5% per year over 30, capped at +30%."""
    return min(1.0 + (age_years - AGE_REFERENCE_YEARS) * AGE_FACTOR_PER_YEAR, AGE_FACTOR_CAP)


def _time_weighted_mean(values: Sequence[float], intervals: Sequence[Interval]) -> float:
    weights = np.array([max(i.time_seconds, 0.0) for i in intervals], dtype=np.float64)
    data = np.array(values, dtype=np.float64)
    if weights.sum() <= 0:
        return float(data.mean())
    return float(np.average(data, weights=weights))


def cardiac_load(profile: AthleteProfile, intervals: Sequence[Interval]) -> float:
    """Heart-rate-reserve intensity scaled to 0-100, time-integrated over intervals.

    (avg_hr - resting_hr) / (max_hr - resting_hr), clipped to [0, 1] and
    age-adjusted. Intervals without HR contribute the neutral value.
    """
    reserve = profile.hr_reserve
    factor = age_factor(profile.age_years)

    per_interval: list[float] = []
    for interval in intervals:
        if interval.avg_heart_rate is None or reserve <= 0:
            per_interval.append(NEUTRAL_SUBSCORE)
            continue
        intensity = (interval.avg_heart_rate - profile.resting_hr) / reserve
        intensity = max(0.0, min(1.0, intensity))
        per_interval.append(intensity * 100.0 * factor)

    return clamp_subscore(_time_weighted_mean(per_interval, intervals))


def work_output(profile: AthleteProfile, intervals: Sequence[Interval]) -> float:
    """Mechanical work proxy: average power vs. a weight-adjusted reference power.

    The reference power comes from the reference split for the workout's
    distance class, so a 2k at 1:30/500m and a 10k at 1:40/500m both score
    100 for a 75kg athlete.
    """
    total_distance = sum(max(i.distance_metres, 0.0) for i in intervals)
    total_time = sum(max(i.time_seconds, 0.0) for i in intervals)
    avg_watts = watts(total_distance, total_time)
    if avg_watts <= 0:
        return 0.0

    ref_split, _ = distance_class_reference(total_distance)
    expected_watts = watts_from_split(ref_split) * body_weight_factor(profile.weight_kg)
    return clamp_subscore(avg_watts / expected_watts * 100.0)


def pacing(intervals: Sequence[Interval]) -> float:
    """Split consistency across intervals, with a bonus for a negative split.

    Fewer than two intervals with a measurable pace gets the neutral score,
    since consistency is undefined for one data point.
    """
    splits = [
        i.split_seconds
        for i in intervals
        if i.split_seconds is not None and i.time_seconds > 0
    ]
    if len(splits) < 2:
        return NEUTRAL_SUBSCORE

    values = np.array(splits, dtype=np.float64)
    mean = float(values.mean())
    if mean <= 0:
        return NEUTRAL_SUBSCORE
    cv = float(values.std(ddof=0)) / mean

    consistency = max(0.0, 1.0 - cv * PACING_CV_PENALTY)
    score = consistency * PACING_CONSISTENCY_POINTS

    half = len(values) // 2
    if float(values[half:].mean()) < float(values[:half].mean()):
        score += PACING_NEGATIVE_SPLIT_BONUS

    return clamp_subscore(score)


def economy(intervals: Sequence[Interval]) -> float:
    """Distance per stroke relative to the reference for the distance class.

    Lower stroke rate at the same pace means more distance per stroke and a
    higher score. Intervals without stroke rate (or without a measurable
    pace) contribute the neutral value.
    """
    total_distance = sum(max(i.distance_metres, 0.0) for i in intervals)
    _, ref_dps = distance_class_reference(total_distance)

    per_interval: list[float] = []
    for interval in intervals:
        rate = interval.stroke_rate
        if not rate or rate <= 0 or interval.distance_metres <= 0 or interval.time_seconds <= 0:
            per_interval.append(NEUTRAL_SUBSCORE)
            continue
        velocity = interval.distance_metres / interval.time_seconds
        distance_per_stroke = velocity * 60.0 / rate
        per_interval.append(distance_per_stroke / ref_dps * 100.0)

    return clamp_subscore(_time_weighted_mean(per_interval, intervals))


def calculate_breakdown(profile: AthleteProfile, intervals: Sequence[Interval]) -> EffortBreakdown:
    """Compute all four sub-scores for a non-empty interval list."""
    return EffortBreakdown(
        cardiac_load=cardiac_load(profile, intervals),
        work_output=work_output(profile, intervals),
        pacing=pacing(intervals),
        economy=economy(intervals),
    )


def combine_effort_points(breakdown: EffortBreakdown) -> int:
    """Weighted composite of the sub-scores, rounded half-up and clamped to 0-100."""
    total = (
        WEIGHT_CARDIAC_LOAD * breakdown.cardiac_load
        + WEIGHT_WORK_OUTPUT * breakdown.work_output
        + WEIGHT_PACING * breakdown.pacing
        + WEIGHT_ECONOMY * breakdown.economy
    )
    return int(min(100, max(0, math.floor(total + 0.5))))


def effort_zone(effort_points: float) -> EffortZone:
    """Map Effort Points to a zone using closed-open buckets."""
    if effort_points >= ZONE_PEAK_MIN:
        return EffortZone.PEAK
    if effort_points >= ZONE_TRAINING_MIN:
        return EffortZone.TRAINING
    if effort_points >= ZONE_BUILDING_MIN:
        return EffortZone.BUILDING
    return EffortZone.RECOVERY

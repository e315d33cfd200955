"""Heart-rate analysis: Karvonen zones, aerobic efficiency, drift and trend.

Qualitative companion to Effort Points. Everything here needs heart-rate
data; detailed analysis (drift, trend) also needs several intervals.

Reference:
    Karvonen et al. (1957), Ann Med Exp Biol Fenn 35(3):307-315.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from erg_engine.math.legacy_score import time_weighted_heart_rate
from erg_engine.math.pace import watts
from erg_engine.models.athlete import AthleteProfile
from erg_engine.models.effort import (
    AerobicEfficiency,
    CardiacDrift,
    HeartRateAnalysis,
    HeartRateTrend,
    HeartRateZone,
)
from erg_engine.models.enums import (
    HR_DRIFT_MIN_INTERVALS,
    HR_TREND_MIN_INTERVALS,
    HRR_ZONE_BOUNDARIES,
)
from erg_engine.models.interval import Interval


def calculate_hrr_zones(max_hr: int, resting_hr: int) -> tuple[HeartRateZone, ...]:
    """Resolve the five HR-reserve zones to beats per minute."""
    reserve = max_hr - resting_hr
    zones: list[HeartRateZone] = []
    for zone, name, low_pct, high_pct in HRR_ZONE_BOUNDARIES:
        upper = max_hr if zone == 5 else round(resting_hr + reserve * high_pct)
        zones.append(
            HeartRateZone(
                zone=zone,
                name=name,
                min_pct=low_pct,
                max_pct=high_pct,
                min_hr=round(resting_hr + reserve * low_pct),
                max_hr=upper,
            )
        )
    return tuple(zones)


def zone_for_heart_rate(
    heart_rate: float, zones: Sequence[HeartRateZone]
) -> HeartRateZone:
    """Find the zone containing ``heart_rate``; out-of-range values clamp to Z1/Z5."""
    for zone in zones:
        if zone.min_hr <= heart_rate <= zone.max_hr:
            return zone
    if heart_rate > zones[-1].max_hr:
        return zones[-1]
    return zones[0]


def aerobic_efficiency(avg_watts: float, avg_hr: float, resting_hr: int) -> AerobicEfficiency:
    """Watts per heartbeat above resting; higher is a fitter aerobic system."""
    if avg_hr <= resting_hr:
        return AerobicEfficiency(watts_per_beat=0.0, rating="building")

    per_beat = avg_watts / (avg_hr - resting_hr)
    if per_beat >= 3.0:
        rating = "elite"
    elif per_beat >= 2.5:
        rating = "excellent"
    elif per_beat >= 2.0:
        rating = "good"
    elif per_beat >= 1.5:
        rating = "developing"
    else:
        rating = "building"
    return AerobicEfficiency(watts_per_beat=round(per_beat, 2), rating=rating)


def cardiac_drift(intervals: Sequence[Interval]) -> CardiacDrift | None:
    """Compare HR per watt between the first and second half of the session.

    A pacing issue is power dropping over 10% while HR-per-watt rises over
    10%. Needs at least four intervals with heart rate and power.
    """
    usable = [
        i for i in intervals
        if i.avg_heart_rate is not None and watts(i.distance_metres, i.time_seconds) > 0
    ]
    if len(usable) < HR_DRIFT_MIN_INTERVALS:
        return None

    power = np.array([watts(i.distance_metres, i.time_seconds) for i in usable])
    hr = np.array([i.avg_heart_rate for i in usable], dtype=np.float64)
    hr_per_watt = hr / power

    mid = len(usable) // 2
    first_ratio = float(hr_per_watt[:mid].mean())
    second_ratio = float(hr_per_watt[mid:].mean())
    drift_pct = (second_ratio - first_ratio) / first_ratio * 100

    first_power = float(power[:mid].mean())
    second_power = float(power[mid:].mean())
    power_drop_pct = (first_power - second_power) / first_power * 100

    if drift_pct < 3:
        rating = "excellent"
    elif drift_pct < 6:
        rating = "good"
    elif drift_pct < 10:
        rating = "moderate"
    elif power_drop_pct > 10:
        rating = "pacing_issue"
    else:
        rating = "high"

    return CardiacDrift(
        percent=round(drift_pct, 1),
        power_drop_percent=round(power_drop_pct, 1),
        rating=rating,
    )


def heart_rate_trend(intervals: Sequence[Interval]) -> HeartRateTrend | None:
    """Classify how interval heart rate moved from start to finish."""
    values = [i.avg_heart_rate for i in intervals if i.avg_heart_rate is not None]
    if len(values) < HR_TREND_MIN_INTERVALS:
        return None

    early_rise = values[1] - values[0]
    late_rise = values[-1] - values[-2]
    total_rise = values[-1] - values[0]

    if total_rise <= 0:
        pattern = "stable"
    elif late_rise > early_rise * 1.5 and late_rise > 5:
        pattern = "accelerating"
    elif abs(late_rise) < 3 and early_rise > 5:
        pattern = "plateaued"
    else:
        pattern = "steady_climb"

    return HeartRateTrend(
        pattern=pattern,
        start_hr=values[0],
        end_hr=values[-1],
        rise=total_rise,
    )


def analyse_heart_rate(
    profile: AthleteProfile, intervals: Sequence[Interval]
) -> HeartRateAnalysis:
    """Build the full heart-rate analysis for a workout."""
    avg_hr = time_weighted_heart_rate(intervals)
    if avg_hr is None:
        return HeartRateAnalysis(available=False, reason="No heart rate data recorded")

    zones = calculate_hrr_zones(profile.max_hr, profile.resting_hr)
    total_distance = sum(max(i.distance_metres, 0.0) for i in intervals)
    total_time = sum(max(i.time_seconds, 0.0) for i in intervals)

    percent_max = avg_hr / profile.max_hr * 100 if profile.max_hr > 0 else None
    percent_hrr = (
        (avg_hr - profile.resting_hr) / profile.hr_reserve * 100
        if profile.hr_reserve > 0
        else None
    )

    detailed = len(intervals) >= 2
    return HeartRateAnalysis(
        available=True,
        percent_max=round(percent_max, 1) if percent_max is not None else None,
        percent_hrr=round(percent_hrr, 1) if percent_hrr is not None else None,
        zone=zone_for_heart_rate(avg_hr, zones),
        efficiency=aerobic_efficiency(watts(total_distance, total_time), avg_hr, profile.resting_hr),
        drift=cardiac_drift(intervals) if detailed else None,
        trend=heart_rate_trend(intervals) if detailed else None,
        zones=zones,
    )

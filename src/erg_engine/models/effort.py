"""Effort scoring output — Effort Points, zone, breakdown and legacy score."""

from __future__ import annotations

from dataclasses import dataclass, field

from erg_engine.models.enums import EffortZone


@dataclass(frozen=True)
class EffortBreakdown:
    """Pre-weighting sub-scores, each on a 0-100 scale."""

    cardiac_load: float
    work_output: float
    pacing: float
    economy: float


@dataclass(frozen=True)
class EffortResult:
    """Complete effort assessment for one workout.

    Pure output: identical (profile, intervals) inputs always produce an
    identical result.
    """

    effort_points: int  # 0-100
    zone: EffortZone
    breakdown: EffortBreakdown
    legacy_score: float  # 0-10


@dataclass(frozen=True)
class HeartRateZone:
    """A Karvonen heart-rate zone resolved to beats per minute."""

    zone: int
    name: str
    min_pct: float
    max_pct: float
    min_hr: int
    max_hr: int


@dataclass(frozen=True)
class AerobicEfficiency:
    """Watts produced per heartbeat above resting."""

    watts_per_beat: float
    rating: str  # elite | excellent | good | developing | building


@dataclass(frozen=True)
class CardiacDrift:
    """HR-per-watt change between the first and second half of a session."""

    percent: float
    power_drop_percent: float
    rating: str  # excellent | good | moderate | high | pacing_issue


@dataclass(frozen=True)
class HeartRateTrend:
    """How interval heart rate evolved through the session."""

    pattern: str  # stable | accelerating | plateaued | steady_climb
    start_hr: float
    end_hr: float
    rise: float


@dataclass(frozen=True)
class HeartRateAnalysis:
    """Qualitative heart-rate insights for a workout.

    ``available`` is False (with a ``reason``) when no heart-rate data was
    recorded; every other field is then empty.
    """

    available: bool
    reason: str = ""
    percent_max: float | None = None
    percent_hrr: float | None = None
    zone: HeartRateZone | None = None
    efficiency: AerobicEfficiency | None = None
    drift: CardiacDrift | None = None
    trend: HeartRateTrend | None = None
    zones: tuple[HeartRateZone, ...] = field(default_factory=tuple)

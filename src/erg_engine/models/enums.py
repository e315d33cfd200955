"""Enumerations and numeric constants for the erg engine.

Constants that come from published formulas cite their source. The rest are
product choices: they are pinned here and regression-tested, and changing
any of them changes every stored score.
"""

from enum import Enum, IntEnum


class EffortZone(str, Enum):
    """Coarse training-intensity bucket derived from Effort Points."""

    RECOVERY = "recovery"
    BUILDING = "building"
    TRAINING = "training"
    PEAK = "peak"


class PBCategory(IntEnum):
    """Canonical race distances tracked as personal bests (value = metres)."""

    M500 = 500
    M1000 = 1000
    M2000 = 2000
    M5000 = 5000
    M6000 = 6000
    M10000 = 10000
    HALF_MARATHON = 21097
    MARATHON = 42195


class WorkoutType(str, Enum):
    """Workout classification used by the legacy effort score."""

    FIVE_HUNDRED = "five_hundred"
    ONE_THOUSAND = "one_thousand"
    TWO_THOUSAND = "two_thousand"
    FIVE_THOUSAND = "five_thousand"
    SIX_THOUSAND = "six_thousand"
    TEN_THOUSAND = "ten_thousand"
    HALF_MARATHON = "half_marathon"
    MARATHON = "marathon"
    ONE_MINUTE = "one_minute"
    INTERVALS = "intervals"
    STEADY_STATE = "steady_state"
    CUSTOM = "custom"


# ---------------------------------------------------------------------------
# API boundary ranges (inclusive unless noted)
# ---------------------------------------------------------------------------
MAX_TOTAL_TIME_SECONDS = 86400.0  # (0, 24h]
MAX_TOTAL_DISTANCE_METRES = 100000.0  # (0, 100km]
STROKE_RATE_BOUNDS = (10.0, 60.0)
HEART_RATE_BOUNDS = (30.0, 250.0)
CONFIDENCE_BOUNDS = (0, 100)
MAX_INTERVALS = 200

# ---------------------------------------------------------------------------
# Field validator (OCR repair) thresholds
# ---------------------------------------------------------------------------
SHORT_TOTAL_TIME_SECONDS = 120.0  # Below 2:00 the "time" is probably a split
SLOW_SPLIT_SECONDS = 200.0  # Above 3:20/500m the "split" is probably a time
PLAUSIBLE_HEART_RATE = (40.0, 220.0)
PLAUSIBLE_STROKE_RATE = (14.0, 50.0)
DISTANCE_MISMATCH_TOLERANCE = 0.15

CONFIDENCE_CAP_SWAP_SUSPECTED = 30
CONFIDENCE_CAP_SWAPPED = 60
CONFIDENCE_CAP_DISTANCE_MISMATCH = 50
CONFIDENCE_CAP_SENSOR_RANGE = 70
DEFAULT_CONFIDENCE = 80

# ---------------------------------------------------------------------------
# Pace / power — Concept2 ergometer formulas
# ---------------------------------------------------------------------------
SPLIT_DISTANCE_METRES = 500.0
# watts = 2.80 / pace^3 with pace in s/m, i.e. 2.80 * v^3 with v in m/s
CONCEPT2_POWER_CONSTANT = 2.80
# Concept2 weight adjustment: (weight / 75kg)^0.222
REFERENCE_BODY_WEIGHT_KG = 75.0
BODY_WEIGHT_EXPONENT = 0.222

# ---------------------------------------------------------------------------
# Effort Points (0-100) composite
# ---------------------------------------------------------------------------
WEIGHT_CARDIAC_LOAD = 0.40
WEIGHT_WORK_OUTPUT = 0.35
WEIGHT_PACING = 0.15
WEIGHT_ECONOMY = 0.10

NEUTRAL_SUBSCORE = 50.0

# Age credit on cardiac load: +0.5% per year over 30, capped at +30%
AGE_REFERENCE_YEARS = 30
AGE_FACTOR_PER_YEAR = 0.005
AGE_FACTOR_CAP = 1.3

# Pacing: consistency = 1 - CV * PACING_CV_PENALTY
PACING_CV_PENALTY = 10.0
PACING_CONSISTENCY_POINTS = 80.0
PACING_NEGATIVE_SPLIT_BONUS = 20.0

# Zone lower bounds (closed-open buckets)
ZONE_BUILDING_MIN = 25
ZONE_TRAINING_MIN = 50
ZONE_PEAK_MIN = 75

# Distance classes: (upper bound in metres, reference split s/500m,
# reference distance per stroke in metres). A 75kg athlete holding the
# reference split scores 100 on work output; holding the reference distance
# per stroke scores 100 on economy.
DISTANCE_CLASS_REFERENCES: tuple[tuple[float, float, float], ...] = (
    (750.0, 85.0, 9.5),  # 500m
    (1500.0, 88.0, 10.0),  # 1k
    (3000.0, 90.0, 10.5),  # 2k
    (5500.0, 95.0, 11.0),  # 5k
    (8000.0, 97.0, 11.0),  # 6k
    (15000.0, 100.0, 11.5),  # 10k
    (30000.0, 103.0, 11.5),  # half marathon
    (float("inf"), 106.0, 12.0),  # marathon and beyond
)

# ---------------------------------------------------------------------------
# Legacy effort score (0-10)
# ---------------------------------------------------------------------------
LEGACY_SCORE_MAX = 10.0
# Used only when a caller passes no max HR for the athlete
CONSERVATIVE_MAX_HR = 190

LEGACY_TYPE_MODIFIERS: dict[WorkoutType, float] = {
    WorkoutType.TWO_THOUSAND: 1.0,
    WorkoutType.ONE_THOUSAND: 0.8,
    WorkoutType.FIVE_HUNDRED: 0.6,
    WorkoutType.ONE_MINUTE: 0.8,
    WorkoutType.INTERVALS: 0.7,
    WorkoutType.FIVE_THOUSAND: 0.5,
    WorkoutType.SIX_THOUSAND: 0.4,
    WorkoutType.TEN_THOUSAND: 0.3,
    WorkoutType.HALF_MARATHON: 0.2,
    WorkoutType.MARATHON: 0.1,
    WorkoutType.STEADY_STATE: 0.0,
    WorkoutType.CUSTOM: 0.3,
}

# Estimated score when no heart-rate data exists
LEGACY_BASE_SCORES: dict[WorkoutType, float] = {
    WorkoutType.TWO_THOUSAND: 8.5,
    WorkoutType.ONE_THOUSAND: 8.0,
    WorkoutType.FIVE_HUNDRED: 7.5,
    WorkoutType.FIVE_THOUSAND: 7.0,
    WorkoutType.SIX_THOUSAND: 6.5,
    WorkoutType.TEN_THOUSAND: 6.0,
    WorkoutType.HALF_MARATHON: 5.5,
    WorkoutType.MARATHON: 5.0,
    WorkoutType.INTERVALS: 7.0,
    WorkoutType.STEADY_STATE: 4.0,
    WorkoutType.ONE_MINUTE: 8.0,
    WorkoutType.CUSTOM: 5.0,
}

# ---------------------------------------------------------------------------
# Workout-type inference
# ---------------------------------------------------------------------------
WORKOUT_TYPE_DISTANCE_TOLERANCE = 0.05
STANDARD_DISTANCE_TYPES: tuple[tuple[float, WorkoutType], ...] = (
    (500.0, WorkoutType.FIVE_HUNDRED),
    (1000.0, WorkoutType.ONE_THOUSAND),
    (2000.0, WorkoutType.TWO_THOUSAND),
    (5000.0, WorkoutType.FIVE_THOUSAND),
    (6000.0, WorkoutType.SIX_THOUSAND),
    (10000.0, WorkoutType.TEN_THOUSAND),
    (21097.0, WorkoutType.HALF_MARATHON),
    (42195.0, WorkoutType.MARATHON),
)
ONE_MINUTE_TOLERANCE_SECONDS = 5.0
STEADY_STATE_MIN_SECONDS = 1200.0

# ---------------------------------------------------------------------------
# Personal bests
# ---------------------------------------------------------------------------
PB_DISTANCE_TOLERANCE = 0.01

# ---------------------------------------------------------------------------
# Heart-rate analysis — Karvonen (1957) HR-reserve zones
# ---------------------------------------------------------------------------
HRR_ZONE_BOUNDARIES: tuple[tuple[int, str, float, float], ...] = (
    (1, "Recovery", 0.50, 0.60),
    (2, "Aerobic", 0.60, 0.70),
    (3, "Tempo", 0.70, 0.80),
    (4, "Threshold", 0.80, 0.90),
    (5, "Max", 0.90, 1.00),
)
HR_DRIFT_MIN_INTERVALS = 4
HR_TREND_MIN_INTERVALS = 3

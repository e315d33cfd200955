"""Data models for the erg engine."""

from erg_engine.models.athlete import AthleteProfile
from erg_engine.models.effort import (
    AerobicEfficiency,
    CardiacDrift,
    EffortBreakdown,
    EffortResult,
    HeartRateAnalysis,
    HeartRateTrend,
    HeartRateZone,
)
from erg_engine.models.enums import EffortZone, PBCategory, WorkoutType
from erg_engine.models.interval import Interval
from erg_engine.models.measurement import RawMeasurement, ValidatedMeasurement
from erg_engine.models.personal_best import (
    PersonalBestDecision,
    PersonalBestRecord,
    ScoredWorkout,
)
from erg_engine.models.pipeline_result import PipelineResult

__all__ = [
    "AerobicEfficiency",
    "AthleteProfile",
    "CardiacDrift",
    "EffortBreakdown",
    "EffortResult",
    "EffortZone",
    "HeartRateAnalysis",
    "HeartRateTrend",
    "HeartRateZone",
    "Interval",
    "PBCategory",
    "PersonalBestDecision",
    "PersonalBestRecord",
    "PipelineResult",
    "RawMeasurement",
    "ScoredWorkout",
    "ValidatedMeasurement",
    "WorkoutType",
]

"""Pipeline output — everything the calling service persists and fans out."""

from __future__ import annotations

from dataclasses import dataclass

from erg_engine.models.interval import Interval
from erg_engine.models.measurement import ValidatedMeasurement
from erg_engine.models.personal_best import PersonalBestDecision, ScoredWorkout


@dataclass(frozen=True)
class PipelineResult:
    """Repaired fields, the scored workout and the personal-best decision.

    ``intervals`` are the segments the engine actually scored, after the
    single-interval fallback and workout-level HR/stroke-rate fill-in.
    """

    measurement: ValidatedMeasurement
    workout: ScoredWorkout
    personal_best: PersonalBestDecision
    intervals: tuple[Interval, ...] = ()

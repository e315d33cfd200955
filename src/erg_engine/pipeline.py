"""WorkoutPipeline — repair, score and personal-best detection for one workout.

This is the calling service around the pure core: it owns the logging the
core functions deliberately do not do, and it hands downstream fan-out hooks
(coaching text, third-party sync) to an executor so they never block the
workout-creation response and their failures are only logged.
"""

from __future__ import annotations

import dataclasses
import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any, Callable, Sequence

from erg_engine.engine import EffortScoreEngine
from erg_engine.models.athlete import AthleteProfile
from erg_engine.models.enums import WorkoutType
from erg_engine.models.interval import Interval
from erg_engine.models.measurement import RawMeasurement, ValidatedMeasurement
from erg_engine.models.personal_best import ScoredWorkout
from erg_engine.models.pipeline_result import PipelineResult
from erg_engine.personal_best.detector import PersonalBestDetector
from erg_engine.personal_best.store import PersonalBestStore
from erg_engine.validation.boundary import (
    parse_intervals,
    parse_raw_measurement,
    parse_workout_fields,
)
from erg_engine.validation.field_validator import validate_measurement

logger = logging.getLogger(__name__)

ScoredHook = Callable[[PipelineResult], None]

HOOK_WORKERS = 4


class WorkoutPipeline:
    """Runs raw input through the field validator, effort engine and PB detector.

    Collaborators are passed in explicitly; the pipeline holds no global
    clients. The only shared state it touches is the PB store, through its
    atomic conditional update.

    Hooks run on ``executor``. When none is given and hooks are registered,
    the pipeline creates its own thread pool; call ``close()`` to drain it.
    """

    def __init__(
        self,
        store: PersonalBestStore,
        engine: EffortScoreEngine | None = None,
        detector: PersonalBestDetector | None = None,
        hooks: Sequence[ScoredHook] = (),
        executor: Executor | None = None,
    ) -> None:
        self.store = store
        self.engine = engine or EffortScoreEngine()
        self.detector = detector or PersonalBestDetector()
        self.hooks = tuple(hooks)
        self._owns_executor = executor is None and bool(self.hooks)
        if self._owns_executor:
            executor = ThreadPoolExecutor(
                max_workers=HOOK_WORKERS, thread_name_prefix="erg-hook"
            )
        self.executor = executor

    def close(self, wait: bool = True) -> None:
        """Shut down the hook executor if the pipeline created it."""
        if self._owns_executor and self.executor is not None:
            self.executor.shutdown(wait=wait)

    def repair(self, raw: RawMeasurement) -> ValidatedMeasurement:
        """Run the field validator and log what it found."""
        measurement = validate_measurement(raw)
        for warning in measurement.warnings:
            logger.warning("Measurement repaired: %s", warning)
        if measurement.fired_rules:
            logger.info(
                "Validator rules fired: %s (confidence=%d)",
                ", ".join(measurement.fired_rules),
                measurement.confidence,
            )
        return measurement

    def process(
        self,
        *,
        user_id: str,
        workout_id: str,
        profile: AthleteProfile,
        raw: RawMeasurement,
        intervals: Sequence[Interval] = (),
        achieved_at: datetime | None = None,
        workout_type: WorkoutType | None = None,
    ) -> PipelineResult:
        """Process one workout end to end.

        Intervals without their own heart rate or stroke rate inherit the
        workout-level averages from the repaired measurement.

        Raises:
            ValidationError: Propagated from the engine; the caller must not
                persist a workout with no measurable effort.
            PersonalBestStoreError: Propagated from the store.
        """
        measurement = self.repair(raw)
        segments = _scoring_segments(measurement, intervals)

        effort = self.engine.score(
            profile,
            segments,
            workout_type=workout_type,
            max_heart_rate=measurement.max_heart_rate,
        )
        logger.info(
            "Scored workout %s: %d EP (%s), legacy %.1f",
            workout_id,
            effort.effort_points,
            effort.zone.value,
            effort.legacy_score,
        )

        workout = ScoredWorkout(
            workout_id=workout_id,
            user_id=user_id,
            distance_metres=measurement.total_distance_metres
            or sum(s.distance_metres for s in segments),
            time_seconds=measurement.total_time_seconds
            or sum(s.time_seconds for s in segments),
            achieved_at=achieved_at or datetime.now(timezone.utc),
            effort=effort,
        )

        decision = self.detector.submit(workout, self.store)
        if decision.is_new_best:
            workout = dataclasses.replace(workout, is_personal_best=True)
            logger.info(
                "New personal best for user %s at %dm: %.1fs",
                user_id,
                int(decision.category),
                workout.time_seconds,
            )

        result = PipelineResult(
            measurement=measurement,
            workout=workout,
            personal_best=decision,
            intervals=segments,
        )
        self._fan_out(result)
        return result

    def process_payload(
        self,
        payload: dict[str, Any],
        *,
        user_id: str,
        workout_id: str,
        profile: AthleteProfile,
        from_ocr: bool = False,
        achieved_at: datetime | None = None,
    ) -> PipelineResult:
        """Parse an API payload and process it.

        Manual entries go through the strict boundary check (InputRangeError
        on violations); OCR payloads are parsed leniently and left to the
        field validator.
        """
        raw = parse_raw_measurement(payload) if from_ocr else parse_workout_fields(payload)
        fields = payload if isinstance(payload, dict) else {}
        return self.process(
            user_id=user_id,
            workout_id=workout_id,
            profile=profile,
            raw=raw,
            intervals=parse_intervals(fields.get("intervals")),
            achieved_at=achieved_at,
            workout_type=_workout_type_from_payload(fields),
        )

    def _fan_out(self, result: PipelineResult) -> None:
        for hook in self.hooks:
            future = self.executor.submit(hook, result)
            future.add_done_callback(_hook_failure_logger(hook, result.workout.workout_id))


def _scoring_segments(
    measurement: ValidatedMeasurement, intervals: Sequence[Interval]
) -> tuple[Interval, ...]:
    if not intervals:
        return (Interval.from_measurement(measurement),)
    return tuple(
        dataclasses.replace(
            interval,
            avg_heart_rate=(
                interval.avg_heart_rate
                if interval.avg_heart_rate is not None
                else measurement.avg_heart_rate
            ),
            stroke_rate=(
                interval.stroke_rate
                if interval.stroke_rate is not None
                else measurement.avg_stroke_rate
            ),
        )
        for interval in intervals
    )


def _hook_failure_logger(hook: ScoredHook, workout_id: str) -> Callable[[Future], None]:
    name = getattr(hook, "__name__", repr(hook))

    def _log(future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.warning(
                "Post-scoring hook %s failed for workout %s: %s", name, workout_id, exc
            )

    return _log


def _workout_type_from_payload(payload: dict[str, Any]) -> WorkoutType | None:
    value = payload.get("workoutType")
    if not value:
        return None
    try:
        return WorkoutType(value)
    except ValueError:
        # Client display types (e.g. "distance", "just_row") are inferred instead
        return None

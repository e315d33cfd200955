"""EffortScoreEngine — scores a workout for an athlete in both representations."""

from __future__ import annotations

from typing import Sequence

from erg_engine.exceptions import ValidationError
from erg_engine.math.effort_points import (
    calculate_breakdown,
    combine_effort_points,
    effort_zone,
)
from erg_engine.math.heart_rate import analyse_heart_rate
from erg_engine.math.legacy_score import calculate_legacy_score
from erg_engine.math.workout_type import infer_workout_type
from erg_engine.models.athlete import AthleteProfile
from erg_engine.models.effort import EffortResult, HeartRateAnalysis
from erg_engine.models.enums import WorkoutType
from erg_engine.models.interval import Interval


class EffortScoreEngine:
    """Produces the legacy 0-10 score and the 0-100 Effort Points result.

    Pure and stateless: safe to share between threads, and two calls with
    identical inputs return identical results.

    Usage:
        engine = EffortScoreEngine()
        result = engine.score(profile, intervals)
    """

    def score(
        self,
        profile: AthleteProfile,
        intervals: Sequence[Interval],
        *,
        workout_type: WorkoutType | None = None,
        max_heart_rate: float | None = None,
    ) -> EffortResult:
        """Score a workout.

        Args:
            profile: Athlete physiology. Never mutated.
            intervals: Chronological intervals; a workout without an
                intervals array is a single whole-workout interval.
            workout_type: Classification for the legacy score. Inferred from
                total distance and time when omitted.
            max_heart_rate: Peak HR recorded during the workout, if known.

        Returns:
            EffortResult with effort points, zone, breakdown and legacy score.

        Raises:
            ValidationError: If ``intervals`` is empty.
        """
        intervals = tuple(intervals)
        if not intervals:
            raise ValidationError("Cannot score a workout with no intervals")

        if workout_type is None:
            workout_type = self.classify(intervals)

        breakdown = calculate_breakdown(profile, intervals)
        effort_points = combine_effort_points(breakdown)

        return EffortResult(
            effort_points=effort_points,
            zone=effort_zone(effort_points),
            breakdown=breakdown,
            legacy_score=calculate_legacy_score(
                intervals,
                athlete_max_hr=profile.max_hr,
                workout_type=workout_type,
                max_heart_rate=max_heart_rate,
            ),
        )

    def analyse_heart_rate(
        self, profile: AthleteProfile, intervals: Sequence[Interval]
    ) -> HeartRateAnalysis:
        """Qualitative heart-rate analysis (zones, efficiency, drift, trend)."""
        intervals = tuple(intervals)
        if not intervals:
            raise ValidationError("Cannot analyse a workout with no intervals")
        return analyse_heart_rate(profile, intervals)

    @staticmethod
    def classify(intervals: Sequence[Interval]) -> WorkoutType:
        """Infer the workout type from the interval totals."""
        total_distance = sum(max(i.distance_metres, 0.0) for i in intervals)
        total_time = sum(max(i.time_seconds, 0.0) for i in intervals)
        return infer_workout_type(
            total_distance, total_time, has_intervals=len(intervals) > 1
        )

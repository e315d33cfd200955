"""Tests for EffortScoreEngine — scoring orchestration."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from erg_engine.engine import EffortScoreEngine
from erg_engine.exceptions import ValidationError
from erg_engine.models.athlete import AthleteProfile
from erg_engine.models.enums import EffortZone, WorkoutType
from erg_engine.models.interval import Interval


class TestEffortScoreEngine:
    def test_two_k_scenario(
        self, default_profile: AthleteProfile, two_k_test: tuple[Interval, ...]
    ) -> None:
        result = EffortScoreEngine().score(default_profile, two_k_test)
        assert result.effort_points == 72
        assert result.zone in (EffortZone.TRAINING, EffortZone.PEAK)
        assert result.legacy_score >= 5.0
        assert result.legacy_score == pytest.approx(7.0)
        assert result.breakdown.cardiac_load == pytest.approx(92.857, abs=0.01)

    def test_empty_intervals_rejected(self, default_profile: AthleteProfile) -> None:
        with pytest.raises(ValidationError):
            EffortScoreEngine().score(default_profile, [])

    def test_deterministic(
        self, default_profile: AthleteProfile, steady_pieces: tuple[Interval, ...]
    ) -> None:
        engine = EffortScoreEngine()
        first = engine.score(default_profile, list(steady_pieces))
        second = engine.score(default_profile, list(steady_pieces))
        assert first == second

    def test_deterministic_across_threads(
        self, default_profile: AthleteProfile, steady_pieces: tuple[Interval, ...]
    ) -> None:
        engine = EffortScoreEngine()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: engine.score(default_profile, steady_pieces), range(32)))
        assert all(r == results[0] for r in results)

    def test_single_interval_pacing_is_neutral(
        self, default_profile: AthleteProfile, two_k_test: tuple[Interval, ...]
    ) -> None:
        result = EffortScoreEngine().score(default_profile, two_k_test)
        assert result.breakdown.pacing == 50.0

    def test_degenerate_interval_in_range(self, default_profile: AthleteProfile) -> None:
        result = EffortScoreEngine().score(default_profile, [Interval(0, 0)])
        assert 0 <= result.effort_points <= 100
        assert 0.0 <= result.legacy_score <= 10.0

    def test_explicit_workout_type_overrides_inference(
        self, default_profile: AthleteProfile, two_k_test: tuple[Interval, ...]
    ) -> None:
        engine = EffortScoreEngine()
        inferred = engine.score(default_profile, two_k_test)
        steady = engine.score(
            default_profile, two_k_test, workout_type=WorkoutType.STEADY_STATE
        )
        # Only the legacy type modifier changes: 2k is +1.0, steady state +0
        assert inferred.legacy_score - steady.legacy_score == pytest.approx(1.0)
        assert inferred.effort_points == steady.effort_points

    def test_peak_hr_bonus(
        self, default_profile: AthleteProfile, two_k_test: tuple[Interval, ...]
    ) -> None:
        result = EffortScoreEngine().score(default_profile, two_k_test, max_heart_rate=186)
        assert result.legacy_score == pytest.approx(8.0)

    def test_classify(self, steady_pieces: tuple[Interval, ...]) -> None:
        assert EffortScoreEngine.classify(steady_pieces) == WorkoutType.INTERVALS
        assert EffortScoreEngine.classify([Interval(5000, 1200)]) == WorkoutType.FIVE_THOUSAND

    def test_analyse_heart_rate_rejects_empty(self, default_profile: AthleteProfile) -> None:
        with pytest.raises(ValidationError):
            EffortScoreEngine().analyse_heart_rate(default_profile, ())

    def test_analyse_heart_rate(
        self, default_profile: AthleteProfile, two_k_test: tuple[Interval, ...]
    ) -> None:
        analysis = EffortScoreEngine().analyse_heart_rate(default_profile, two_k_test)
        assert analysis.available is True

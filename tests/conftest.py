"""Shared test fixtures: athlete profiles, interval sets, PB store."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from erg_engine.models.athlete import AthleteProfile
from erg_engine.models.interval import Interval
from erg_engine.models.personal_best import ScoredWorkout
from erg_engine.personal_best.store import InMemoryPersonalBestStore


@pytest.fixture
def default_profile() -> AthleteProfile:
    """30-year-old, 75kg, max HR 190, resting 50: the configured defaults."""
    return AthleteProfile(
        age_years=30,
        weight_kg=75.0,
        height_cm=180.0,
        max_hr=190,
        resting_hr=50,
    )


@pytest.fixture
def masters_profile() -> AthleteProfile:
    """55-year-old, 90kg masters rower with a lower max HR."""
    return AthleteProfile(
        age_years=55,
        weight_kg=90.0,
        height_cm=188.0,
        max_hr=170,
        resting_hr=55,
    )


@pytest.fixture
def two_k_test() -> tuple[Interval, ...]:
    """A 7:00 2k at 1:45/500m, average HR 180."""
    return (Interval(distance_metres=2000.0, time_seconds=420.0, avg_heart_rate=180.0),)


@pytest.fixture
def steady_pieces() -> tuple[Interval, ...]:
    """4 x 1000m, perfectly even at 2:00/500m, HR drifting up."""
    return tuple(
        Interval(distance_metres=1000.0, time_seconds=240.0, avg_heart_rate=hr, stroke_rate=22.0)
        for hr in (140.0, 145.0, 148.0, 150.0)
    )


@pytest.fixture
def store() -> InMemoryPersonalBestStore:
    return InMemoryPersonalBestStore()


@pytest.fixture
def make_workout():
    """Factory for ScoredWorkout with sensible defaults."""

    def _make(
        time_seconds: float,
        distance_metres: float = 2000.0,
        workout_id: str = "w1",
        user_id: str = "athlete-1",
        day: int = 1,
    ) -> ScoredWorkout:
        return ScoredWorkout(
            workout_id=workout_id,
            user_id=user_id,
            distance_metres=distance_metres,
            time_seconds=time_seconds,
            achieved_at=datetime(2026, 3, day, 7, 0, tzinfo=timezone.utc),
        )

    return _make

"""Tests for API serialization of engine outputs."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from erg_engine.engine import EffortScoreEngine
from erg_engine.models.athlete import AthleteProfile
from erg_engine.models.effort import HeartRateAnalysis
from erg_engine.models.enums import PBCategory
from erg_engine.models.interval import Interval
from erg_engine.models.measurement import RawMeasurement
from erg_engine.models.personal_best import PersonalBestDecision, PersonalBestRecord
from erg_engine.serialization import (
    decision_to_dict,
    effort_to_dict,
    heart_rate_analysis_to_dict,
    measurement_to_dict,
    to_json_string,
)
from erg_engine.validation.field_validator import validate_measurement


class TestMeasurementToDict:
    def test_swapped_measurement(self) -> None:
        measurement = validate_measurement(
            RawMeasurement(total_time_seconds=105.0, avg_split_seconds=540.0)
        )
        data = measurement_to_dict(measurement)
        assert data["avgSplit"] == 105.0
        assert data["totalTimeSeconds"] == 540.0
        assert data["wasSwapped"] is True
        assert data["distanceEstimated"] is True
        assert isinstance(data["warnings"], list)
        assert data["confidence"] == 30


class TestEffortToDict:
    def test_wire_shape(
        self, default_profile: AthleteProfile, two_k_test: tuple[Interval, ...]
    ) -> None:
        data = effort_to_dict(EffortScoreEngine().score(default_profile, two_k_test))
        assert data["effortPoints"] == 72
        assert isinstance(data["effortPoints"], int)
        assert data["zone"] == "training"
        assert data["effortScore"] == 7.0
        assert data["breakdown"] == {
            "cardiacLoad": 92.9,
            "workOutput": 63.0,
            "pacing": 50.0,
            "economy": 50.0,
        }


class TestDecisionToDict:
    def test_new_best(self) -> None:
        record = PersonalBestRecord(
            user_id="u1",
            category=PBCategory.M2000,
            time_seconds=425.0,
            achieved_at=datetime(2026, 3, 1, 7, 0, tzinfo=timezone.utc),
            workout_id="w1",
        )
        data = decision_to_dict(
            PersonalBestDecision(category=PBCategory.M2000, is_new_best=True, record=record)
        )
        assert data["category"] == 2000
        assert data["isPersonalBest"] is True
        assert data["record"]["achievedAt"] == "2026-03-01T07:00:00+00:00"
        assert data["record"]["distanceMetres"] == 2000
        assert data["previous"] is None

    def test_no_category(self) -> None:
        data = decision_to_dict(PersonalBestDecision(category=None, is_new_best=False))
        assert data == {"category": None, "isPersonalBest": False, "record": None, "previous": None}


class TestHeartRateAnalysisToDict:
    def test_unavailable(self) -> None:
        data = heart_rate_analysis_to_dict(HeartRateAnalysis(available=False, reason="No HR"))
        assert data == {"available": False, "reason": "No HR"}

    def test_available(
        self, default_profile: AthleteProfile, steady_pieces: tuple[Interval, ...]
    ) -> None:
        analysis = EffortScoreEngine().analyse_heart_rate(default_profile, steady_pieces)
        data = heart_rate_analysis_to_dict(analysis)
        assert data["available"] is True
        assert len(data["zones"]) == 5
        assert "drift" in data
        assert data["trend"]["startHr"] == 140.0


class TestToJsonString:
    def test_round_trips_through_json(
        self, default_profile: AthleteProfile, two_k_test: tuple[Interval, ...]
    ) -> None:
        payload = effort_to_dict(EffortScoreEngine().score(default_profile, two_k_test))
        assert json.loads(to_json_string(payload)) == payload

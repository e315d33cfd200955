"""Tests for the field validator — OCR split/time repair and sensor range checks."""

from __future__ import annotations

import logging

import pytest

from erg_engine.models.enums import DEFAULT_CONFIDENCE
from erg_engine.models.measurement import RawMeasurement, ValidatedMeasurement
from erg_engine.validation.field_validator import validate_measurement
from erg_engine.validation.rules import REPAIR_RULES


class TestSplitTimeSwap:
    def test_swapped_ocr_scenario(self) -> None:
        raw = RawMeasurement(
            total_time_seconds=105.0,
            avg_split_seconds=540.0,
            total_distance_metres=None,
        )
        result = validate_measurement(raw)

        assert result.avg_split_seconds == 105.0
        assert result.total_time_seconds == 540.0
        assert result.was_swapped is True
        assert result.confidence <= 60
        # (540 / 105) * 500 = 2571.4 → nearest 10m
        assert result.total_distance_metres == 2570
        assert result.distance_estimated is True

    def test_swap_scenario_fires_rules_in_order(self) -> None:
        raw = RawMeasurement(total_time_seconds=105.0, avg_split_seconds=540.0)
        result = validate_measurement(raw)
        assert result.fired_rules == (
            "short_total_time",
            "slow_split",
            "split_time_swap",
            "estimate_distance",
        )
        # Worst concern wins: the swap suspicion caps at 30
        assert result.confidence == 30

    @pytest.mark.parametrize(
        "time,split",
        [(90.0, 95.0), (100.0, 420.0), (1.0, 2.0), (300.0, 1800.0), (119.0, 119.5)],
    )
    def test_split_never_exceeds_time_after_repair(self, time: float, split: float) -> None:
        result = validate_measurement(
            RawMeasurement(total_time_seconds=time, avg_split_seconds=split)
        )
        assert result.avg_split_seconds <= result.total_time_seconds
        assert result.was_swapped is True

    def test_equal_split_and_time_not_swapped(self) -> None:
        result = validate_measurement(
            RawMeasurement(total_time_seconds=150.0, avg_split_seconds=150.0)
        )
        assert result.was_swapped is False

    def test_short_time_is_evidence_only(self) -> None:
        # 1:40 total at 0:25 split is odd but consistent: flagged, not changed
        raw = RawMeasurement(
            total_time_seconds=100.0,
            avg_split_seconds=25.0,
            total_distance_metres=2000.0,
        )
        result = validate_measurement(raw)
        assert result.total_time_seconds == 100.0
        assert result.avg_split_seconds == 25.0
        assert result.was_swapped is False
        assert result.confidence == 30
        assert len(result.warnings) == 1

    def test_slow_split_flagged(self) -> None:
        raw = RawMeasurement(total_time_seconds=1800.0, avg_split_seconds=210.0)
        result = validate_measurement(raw)
        assert result.confidence == 30
        assert "slow_split" in result.fired_rules
        assert result.was_swapped is False


class TestDistance:
    def test_zero_distance_estimated(self) -> None:
        raw = RawMeasurement(
            total_time_seconds=1800.0, avg_split_seconds=120.0, total_distance_metres=0.0
        )
        result = validate_measurement(raw)
        assert result.total_distance_metres == 7500
        assert result.distance_estimated is True
        # Estimation alone is not a confidence concern
        assert result.confidence == DEFAULT_CONFIDENCE

    def test_no_estimate_without_split(self) -> None:
        result = validate_measurement(RawMeasurement(total_time_seconds=1800.0))
        assert result.total_distance_metres is None
        assert result.distance_estimated is False

    def test_mismatch_flagged_and_distance_kept(self) -> None:
        raw = RawMeasurement(
            total_time_seconds=420.0, avg_split_seconds=105.0, total_distance_metres=3000.0
        )
        result = validate_measurement(raw)
        assert result.total_distance_metres == 3000.0
        assert result.confidence == 50
        assert any("2000" in w for w in result.warnings)

    def test_small_mismatch_tolerated(self) -> None:
        # 2200 vs expected 2000 is 10% off, inside the 15% tolerance
        raw = RawMeasurement(
            total_time_seconds=420.0, avg_split_seconds=105.0, total_distance_metres=2200.0
        )
        result = validate_measurement(raw)
        assert result.confidence == DEFAULT_CONFIDENCE
        assert result.warnings == ()


class TestSensorRanges:
    def test_impossible_heart_rate_discarded(self) -> None:
        result = validate_measurement(RawMeasurement(avg_heart_rate=300.0))
        assert result.avg_heart_rate is None
        assert result.confidence <= 70

    def test_low_heart_rate_discarded(self) -> None:
        result = validate_measurement(RawMeasurement(avg_heart_rate=35.0))
        assert result.avg_heart_rate is None

    def test_boundary_heart_rates_kept(self) -> None:
        assert validate_measurement(RawMeasurement(avg_heart_rate=40.0)).avg_heart_rate == 40.0
        assert validate_measurement(RawMeasurement(avg_heart_rate=220.0)).avg_heart_rate == 220.0

    def test_max_heart_rate_passes_through(self) -> None:
        result = validate_measurement(RawMeasurement(max_heart_rate=188.0))
        assert result.max_heart_rate == 188.0

    def test_stroke_rate_kept_but_flagged(self) -> None:
        result = validate_measurement(RawMeasurement(avg_stroke_rate=55.0))
        assert result.avg_stroke_rate == 55.0
        assert result.confidence == 70
        assert len(result.warnings) == 1

    def test_plausible_stroke_rate_not_flagged(self) -> None:
        result = validate_measurement(RawMeasurement(avg_stroke_rate=24.0))
        assert result.warnings == ()


class TestConfidence:
    def test_defaults_to_80_when_clean(self) -> None:
        raw = RawMeasurement(
            total_time_seconds=420.0, avg_split_seconds=105.0, total_distance_metres=2000.0
        )
        result = validate_measurement(raw)
        assert result.confidence == 80
        assert result.warnings == ()
        assert result.fired_rules == ()

    def test_input_confidence_kept_when_clean(self) -> None:
        assert validate_measurement(RawMeasurement(confidence=95)).confidence == 95
        assert validate_measurement(RawMeasurement(confidence=40)).confidence == 40

    def test_input_confidence_clamped(self) -> None:
        assert validate_measurement(RawMeasurement(confidence=150)).confidence == 100
        assert validate_measurement(RawMeasurement(confidence=-5)).confidence == 0

    @pytest.mark.parametrize(
        "raw",
        [
            RawMeasurement(confidence=90, total_time_seconds=105.0, avg_split_seconds=540.0),
            RawMeasurement(confidence=20, total_time_seconds=105.0, avg_split_seconds=540.0),
            RawMeasurement(confidence=65, avg_heart_rate=300.0),
            RawMeasurement(confidence=55, avg_stroke_rate=5.0),
            RawMeasurement(
                confidence=99,
                total_time_seconds=420.0,
                avg_split_seconds=105.0,
                total_distance_metres=5000.0,
            ),
        ],
    )
    def test_never_increases(self, raw: RawMeasurement) -> None:
        assert validate_measurement(raw).confidence <= raw.confidence

    def test_worst_concern_wins(self) -> None:
        raw = RawMeasurement(avg_heart_rate=300.0, avg_stroke_rate=70.0, confidence=90)
        result = validate_measurement(raw)
        assert result.confidence == 70
        assert len(result.warnings) == 2


class TestPurity:
    def test_returns_validated_measurement(self) -> None:
        assert isinstance(validate_measurement(RawMeasurement()), ValidatedMeasurement)

    def test_empty_input_is_usable(self) -> None:
        result = validate_measurement(RawMeasurement())
        assert result.confidence == 80
        assert result.warnings == ()

    def test_does_not_log(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG)
        validate_measurement(RawMeasurement(total_time_seconds=105.0, avg_split_seconds=540.0))
        assert caplog.records == []

    def test_custom_rule_chain(self) -> None:
        # Only the HR rule: a swapped split/time is left alone
        hr_only = tuple(r for r in REPAIR_RULES if r.rule_id == "heart_rate_range")
        raw = RawMeasurement(total_time_seconds=100.0, avg_split_seconds=90.0, avg_heart_rate=300.0)
        result = validate_measurement(raw, rules=hr_only)
        assert result.avg_heart_rate is None
        assert result.fired_rules == ("heart_rate_range",)

    def test_invariant_enforced_on_construction(self) -> None:
        with pytest.raises(ValueError):
            ValidatedMeasurement(confidence=80, total_time_seconds=100.0, avg_split_seconds=200.0)

"""JSON serialization of engine outputs using the product's wire field names.

All functions are pure (no I/O). Effort Points is emitted as an integer and
the legacy score with one decimal, as the mobile client displays them.
"""

from __future__ import annotations

import json
from typing import Any

from erg_engine.models.effort import EffortResult, HeartRateAnalysis, HeartRateZone
from erg_engine.models.measurement import ValidatedMeasurement
from erg_engine.models.personal_best import PersonalBestDecision, PersonalBestRecord


def measurement_to_dict(measurement: ValidatedMeasurement) -> dict[str, Any]:
    """Convert a ValidatedMeasurement to the OCR response shape."""
    return {
        "totalTimeSeconds": measurement.total_time_seconds,
        "totalDistanceMetres": measurement.total_distance_metres,
        "avgSplit": measurement.avg_split_seconds,
        "avgHeartRate": measurement.avg_heart_rate,
        "maxHeartRate": measurement.max_heart_rate,
        "avgStrokeRate": measurement.avg_stroke_rate,
        "confidence": measurement.confidence,
        "warnings": list(measurement.warnings),
        "wasSwapped": measurement.was_swapped,
        "distanceEstimated": measurement.distance_estimated,
    }


def effort_to_dict(result: EffortResult) -> dict[str, Any]:
    """Convert an EffortResult; the breakdown is the pre-weighting sub-scores."""
    breakdown = result.breakdown
    return {
        "effortPoints": result.effort_points,
        "zone": result.zone.value,
        "breakdown": {
            "cardiacLoad": round(breakdown.cardiac_load, 1),
            "workOutput": round(breakdown.work_output, 1),
            "pacing": round(breakdown.pacing, 1),
            "economy": round(breakdown.economy, 1),
        },
        "effortScore": round(result.legacy_score, 1),
    }


def personal_best_to_dict(record: PersonalBestRecord) -> dict[str, Any]:
    """Convert a PersonalBestRecord to its persisted row shape."""
    return {
        "userId": record.user_id,
        "distanceMetres": int(record.category),
        "timeSeconds": record.time_seconds,
        "achievedAt": record.achieved_at.isoformat(),
        "workoutId": record.workout_id,
    }


def decision_to_dict(decision: PersonalBestDecision) -> dict[str, Any]:
    """Convert a PersonalBestDecision; ``record`` is set only for a new best."""
    return {
        "category": int(decision.category) if decision.category is not None else None,
        "isPersonalBest": decision.is_new_best,
        "record": personal_best_to_dict(decision.record) if decision.record else None,
        "previous": personal_best_to_dict(decision.previous) if decision.previous else None,
    }


def heart_rate_analysis_to_dict(analysis: HeartRateAnalysis) -> dict[str, Any]:
    """Convert a HeartRateAnalysis; unavailable analyses carry only a reason."""
    if not analysis.available:
        return {"available": False, "reason": analysis.reason}

    result: dict[str, Any] = {
        "available": True,
        "intensity": {
            "percentMax": analysis.percent_max,
            "percentHrr": analysis.percent_hrr,
        },
        "zone": _zone_to_dict(analysis.zone) if analysis.zone else None,
        "zones": [_zone_to_dict(z) for z in analysis.zones],
    }
    if analysis.efficiency is not None:
        result["efficiency"] = {
            "wattsPerBeat": analysis.efficiency.watts_per_beat,
            "rating": analysis.efficiency.rating,
        }
    if analysis.drift is not None:
        result["drift"] = {
            "percent": analysis.drift.percent,
            "powerDropPercent": analysis.drift.power_drop_percent,
            "rating": analysis.drift.rating,
        }
    if analysis.trend is not None:
        result["trend"] = {
            "pattern": analysis.trend.pattern,
            "startHr": analysis.trend.start_hr,
            "endHr": analysis.trend.end_hr,
            "rise": analysis.trend.rise,
        }
    return result


def to_json_string(payload: dict[str, Any], indent: int = 2) -> str:
    """Serialize an already-converted dict to a JSON string."""
    return json.dumps(payload, indent=indent)


def _zone_to_dict(zone: HeartRateZone) -> dict[str, Any]:
    return {
        "zone": zone.zone,
        "name": zone.name,
        "minHr": zone.min_hr,
        "maxHr": zone.max_hr,
    }

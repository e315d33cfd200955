"""Field validator — repairs raw erg measurements into a trusted field set.

This is a repair function, not a strict validator: it never raises and
always returns a usable ValidatedMeasurement. Uncertainty is reported
through ``confidence`` and ``warnings``; logging them is the caller's job.
"""

from __future__ import annotations

from erg_engine.models.enums import CONFIDENCE_BOUNDS, DEFAULT_CONFIDENCE
from erg_engine.models.measurement import RawMeasurement, ValidatedMeasurement
from erg_engine.validation.rules import REPAIR_RULES, RepairDraft, RepairRule


def validate_measurement(
    raw: RawMeasurement,
    rules: tuple[RepairRule, ...] = REPAIR_RULES,
) -> ValidatedMeasurement:
    """Apply every repair rule in order and build the validated measurement.

    Args:
        raw: Untrusted fields from manual entry or vision extraction.
        rules: Ordered repair rules. Defaults to the standard rule chain.

    Returns:
        A ValidatedMeasurement whose confidence is the minimum of the input
        confidence and every cap a rule applied (80 when nothing set it).
    """
    draft = RepairDraft(
        total_time_seconds=raw.total_time_seconds,
        total_distance_metres=raw.total_distance_metres,
        avg_split_seconds=raw.avg_split_seconds,
        avg_heart_rate=raw.avg_heart_rate,
        max_heart_rate=raw.max_heart_rate,
        avg_stroke_rate=raw.avg_stroke_rate,
        confidence=_clamp_confidence(raw.confidence),
    )

    for rule in rules:
        if rule.apply(draft):
            draft.fired_rules.append(rule.rule_id)

    confidence = draft.confidence if draft.confidence is not None else DEFAULT_CONFIDENCE

    return ValidatedMeasurement(
        confidence=confidence,
        total_time_seconds=draft.total_time_seconds,
        total_distance_metres=draft.total_distance_metres,
        avg_split_seconds=draft.avg_split_seconds,
        avg_heart_rate=draft.avg_heart_rate,
        max_heart_rate=draft.max_heart_rate,
        avg_stroke_rate=draft.avg_stroke_rate,
        warnings=tuple(draft.warnings),
        was_swapped=draft.was_swapped,
        distance_estimated=draft.distance_estimated,
        fired_rules=tuple(draft.fired_rules),
    )


def _clamp_confidence(confidence: int | None) -> int | None:
    if confidence is None:
        return None
    low, high = CONFIDENCE_BOUNDS
    return int(max(low, min(high, confidence)))

"""OCR repair rules for erg-screen measurements.

Vision extraction systematically confuses total elapsed time with the
per-500m split (both are ``M:SS`` displays of similar shape) and often reads
0 distance for time-based pieces. Each rule below checks one physical
constraint of erg output and either flags it (by capping confidence) or
repairs it. Rules run in the fixed order of ``REPAIR_RULES``; later rules
see the effects of earlier ones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from erg_engine.math.pace import distance_from_time_and_split, round_to_nearest
from erg_engine.models.enums import (
    CONFIDENCE_CAP_DISTANCE_MISMATCH,
    CONFIDENCE_CAP_SENSOR_RANGE,
    CONFIDENCE_CAP_SWAP_SUSPECTED,
    CONFIDENCE_CAP_SWAPPED,
    DISTANCE_MISMATCH_TOLERANCE,
    PLAUSIBLE_HEART_RATE,
    PLAUSIBLE_STROKE_RATE,
    SHORT_TOTAL_TIME_SECONDS,
    SLOW_SPLIT_SECONDS,
)


@dataclass
class RepairDraft:
    """Mutable working copy of a measurement while the rules run."""

    total_time_seconds: float | None
    total_distance_metres: float | None
    avg_split_seconds: float | None
    avg_heart_rate: float | None
    max_heart_rate: float | None
    avg_stroke_rate: float | None
    confidence: int | None
    warnings: list[str] = field(default_factory=list)
    was_swapped: bool = False
    distance_estimated: bool = False
    fired_rules: list[str] = field(default_factory=list)

    def cap_confidence(self, ceiling: int) -> None:
        """Lower confidence to ``ceiling`` if it is higher; never raise it."""
        if self.confidence is None:
            self.confidence = ceiling
        else:
            self.confidence = min(self.confidence, ceiling)


class RepairRule(ABC):
    """Base class for a single measurement repair rule.

    Subclasses define ``rule_id`` and implement ``apply()``, which mutates
    the draft and returns True when the rule fired.
    """

    rule_id: str

    @abstractmethod
    def apply(self, draft: RepairDraft) -> bool:
        ...


class ShortTotalTimeRule(RepairRule):
    """A total time under 2:00 is probably a split read as the time."""

    rule_id = "short_total_time"

    def apply(self, draft: RepairDraft) -> bool:
        if draft.total_time_seconds is None or draft.total_time_seconds >= SHORT_TOTAL_TIME_SECONDS:
            return False
        draft.cap_confidence(CONFIDENCE_CAP_SWAP_SUSPECTED)
        draft.warnings.append(
            f"Total time {draft.total_time_seconds:g}s is under "
            f"{SHORT_TOTAL_TIME_SECONDS:g}s; split and time may be swapped."
        )
        return True


class SlowSplitRule(RepairRule):
    """A split over 3:20/500m is probably the total time read as the split."""

    rule_id = "slow_split"

    def apply(self, draft: RepairDraft) -> bool:
        if draft.avg_split_seconds is None or draft.avg_split_seconds <= SLOW_SPLIT_SECONDS:
            return False
        draft.cap_confidence(CONFIDENCE_CAP_SWAP_SUSPECTED)
        draft.warnings.append(
            f"Split {draft.avg_split_seconds:g}s/500m is over "
            f"{SLOW_SPLIT_SECONDS:g}s; split and time may be swapped."
        )
        return True


class SplitTimeSwapRule(RepairRule):
    """A split longer than the whole workout is impossible: swap them."""

    rule_id = "split_time_swap"

    def apply(self, draft: RepairDraft) -> bool:
        split = draft.avg_split_seconds
        total = draft.total_time_seconds
        if split is None or total is None or split <= total:
            return False
        draft.avg_split_seconds, draft.total_time_seconds = total, split
        draft.was_swapped = True
        draft.cap_confidence(CONFIDENCE_CAP_SWAPPED)
        draft.warnings.append(
            f"Split ({split:g}s) was longer than total time ({total:g}s); values swapped."
        )
        return True


class EstimateDistanceRule(RepairRule):
    """Fill a missing or zero distance from time and split."""

    rule_id = "estimate_distance"

    def apply(self, draft: RepairDraft) -> bool:
        if draft.total_distance_metres:
            return False
        if not draft.total_time_seconds or not draft.avg_split_seconds:
            return False
        if draft.avg_split_seconds <= 0:
            return False
        estimate = distance_from_time_and_split(
            draft.total_time_seconds, draft.avg_split_seconds
        )
        draft.total_distance_metres = round_to_nearest(estimate, 10)
        draft.distance_estimated = True
        draft.warnings.append(
            f"Distance estimated as {draft.total_distance_metres:g}m from time and split."
        )
        return True


class DistanceMismatchRule(RepairRule):
    """Flag a recorded distance that disagrees with time and split by >15%.

    The recorded distance is kept: once swaps are corrected it is the more
    directly observed field.
    """

    rule_id = "distance_mismatch"

    def apply(self, draft: RepairDraft) -> bool:
        distance = draft.total_distance_metres
        total = draft.total_time_seconds
        split = draft.avg_split_seconds
        if not distance or not total or not split or split <= 0:
            return False
        expected = distance_from_time_and_split(total, split)
        if expected <= 0:
            return False
        if abs(distance - expected) / expected <= DISTANCE_MISMATCH_TOLERANCE:
            return False
        draft.cap_confidence(CONFIDENCE_CAP_DISTANCE_MISMATCH)
        draft.warnings.append(
            f"Distance {distance:g}m does not match time and split "
            f"(expected ~{round(expected)}m)."
        )
        return True


class HeartRateRangeRule(RepairRule):
    """Discard an average heart rate outside the physiological range."""

    rule_id = "heart_rate_range"

    def apply(self, draft: RepairDraft) -> bool:
        hr = draft.avg_heart_rate
        low, high = PLAUSIBLE_HEART_RATE
        if hr is None or low <= hr <= high:
            return False
        draft.avg_heart_rate = None
        draft.cap_confidence(CONFIDENCE_CAP_SENSOR_RANGE)
        draft.warnings.append(
            f"Average heart rate {hr:g} outside {low:g}-{high:g} bpm; discarded."
        )
        return True


class StrokeRateRangeRule(RepairRule):
    """Flag (but keep) an implausible average stroke rate."""

    rule_id = "stroke_rate_range"

    def apply(self, draft: RepairDraft) -> bool:
        rate = draft.avg_stroke_rate
        low, high = PLAUSIBLE_STROKE_RATE
        if rate is None or low <= rate <= high:
            return False
        draft.cap_confidence(CONFIDENCE_CAP_SENSOR_RANGE)
        draft.warnings.append(
            f"Stroke rate {rate:g} spm outside {low:g}-{high:g}; please verify."
        )
        return True


REPAIR_RULES: tuple[RepairRule, ...] = (
    ShortTotalTimeRule(),
    SlowSplitRule(),
    SplitTimeSwapRule(),
    EstimateDistanceRule(),
    DistanceMismatchRule(),
    HeartRateRangeRule(),
    StrokeRateRangeRule(),
)

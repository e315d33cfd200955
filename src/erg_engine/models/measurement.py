"""Workout field sets before and after OCR repair."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawMeasurement:
    """Untrusted, partially-populated workout fields.

    Produced by manual entry or by a vision model reading the erg screen.
    May be internally contradictory (e.g. split and total time swapped).
    """

    total_time_seconds: float | None = None
    total_distance_metres: float | None = None
    avg_split_seconds: float | None = None  # seconds per 500m
    avg_heart_rate: float | None = None
    max_heart_rate: float | None = None
    avg_stroke_rate: float | None = None
    confidence: int | None = None  # 0-100, extractor-supplied


@dataclass(frozen=True)
class ValidatedMeasurement:
    """Workout fields after the field validator has repaired them.

    ``confidence`` is never higher than the input confidence (or the 80
    default). When split and total time are both present the split is never
    longer than the total time.
    """

    confidence: int
    total_time_seconds: float | None = None
    total_distance_metres: float | None = None
    avg_split_seconds: float | None = None
    avg_heart_rate: float | None = None
    max_heart_rate: float | None = None
    avg_stroke_rate: float | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)
    was_swapped: bool = False
    distance_estimated: bool = False
    fired_rules: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if (
            self.avg_split_seconds is not None
            and self.total_time_seconds is not None
            and self.avg_split_seconds > self.total_time_seconds
        ):
            raise ValueError("avg_split_seconds cannot exceed total_time_seconds")

"""Interval — one chronological effort segment of a workout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from erg_engine.models.measurement import ValidatedMeasurement


@dataclass(frozen=True)
class Interval:
    """A single timed segment. Order within a workout is chronological."""

    distance_metres: float
    time_seconds: float
    avg_heart_rate: float | None = None
    stroke_rate: float | None = None

    @property
    def split_seconds(self) -> float | None:
        """Pace in seconds per 500m, or None when distance is not positive."""
        if self.distance_metres <= 0:
            return None
        return self.time_seconds / self.distance_metres * 500.0

    @classmethod
    def from_measurement(cls, measurement: ValidatedMeasurement) -> "Interval":
        """Model a workout without an intervals array as one whole-workout interval."""
        return cls(
            distance_metres=measurement.total_distance_metres or 0.0,
            time_seconds=measurement.total_time_seconds or 0.0,
            avg_heart_rate=measurement.avg_heart_rate,
            stroke_rate=measurement.avg_stroke_rate,
        )

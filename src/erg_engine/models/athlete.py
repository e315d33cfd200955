"""Athlete physiological profile — supplied by the caller, never mutated."""

from __future__ import annotations

from dataclasses import dataclass

from erg_engine import config


@dataclass(frozen=True)
class AthleteProfile:
    """Immutable physiological snapshot used for effort scoring."""

    age_years: int
    weight_kg: float
    height_cm: float
    max_hr: int
    resting_hr: int

    @property
    def hr_reserve(self) -> int:
        """Heart-rate reserve (max - resting), the Karvonen denominator."""
        return self.max_hr - self.resting_hr

    @classmethod
    def with_defaults(
        cls,
        age_years: int | None = None,
        weight_kg: float | None = None,
        height_cm: float | None = None,
        max_hr: int | None = None,
        resting_hr: int | None = None,
    ) -> "AthleteProfile":
        """Build a profile, filling unknown fields from configured defaults."""
        return cls(
            age_years=age_years if age_years is not None else config.DEFAULT_AGE_YEARS,
            weight_kg=weight_kg if weight_kg is not None else config.DEFAULT_WEIGHT_KG,
            height_cm=height_cm if height_cm is not None else config.DEFAULT_HEIGHT_CM,
            max_hr=max_hr if max_hr is not None else config.DEFAULT_MAX_HR,
            resting_hr=resting_hr if resting_hr is not None else config.DEFAULT_RESTING_HR,
        )

"""Personal-best records and the detector's decision output."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from erg_engine.models.effort import EffortResult
from erg_engine.models.enums import PBCategory


@dataclass(frozen=True)
class ScoredWorkout:
    """A workout after effort scoring, ready for personal-best detection."""

    workout_id: str
    user_id: str
    distance_metres: float
    time_seconds: float
    achieved_at: datetime
    effort: EffortResult | None = None
    is_personal_best: bool = False


@dataclass(frozen=True)
class PersonalBestRecord:
    """The athlete's fastest time for one canonical distance.

    Created on the first workout in a category, replaced only by a strictly
    faster time, never deleted by the pipeline.
    """

    user_id: str
    category: PBCategory
    time_seconds: float
    achieved_at: datetime
    workout_id: str


@dataclass(frozen=True)
class PersonalBestDecision:
    """Whether a workout becomes the new personal best for its category.

    ``record`` is the row to upsert when ``is_new_best`` is True.
    ``category`` is None when the workout distance is not a canonical one.
    """

    category: PBCategory | None
    is_new_best: bool
    record: PersonalBestRecord | None = None
    previous: PersonalBestRecord | None = None

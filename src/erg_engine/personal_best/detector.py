"""Personal-best detection: category resolution and the replace decision."""

from __future__ import annotations

from erg_engine.models.enums import PB_DISTANCE_TOLERANCE, PBCategory
from erg_engine.models.personal_best import (
    PersonalBestDecision,
    PersonalBestRecord,
    ScoredWorkout,
)
from erg_engine.personal_best.store import PersonalBestStore


def resolve_category(distance_metres: float) -> PBCategory | None:
    """Map a distance to its canonical PB category, strictly within 1% relative tolerance.

    2005m resolves to 2000m; 2020m (exactly 1% off) and 6100m resolve to nothing.
    """
    for category in PBCategory:
        if abs(distance_metres - category.value) / category.value < PB_DISTANCE_TOLERANCE:
            return category
    return None


class PersonalBestDetector:
    """Decides whether a scored workout replaces the athlete's best time.

    ``decide`` is pure. ``submit`` composes the decision with the store's
    atomic conditional update, so the stored best after any sequence of
    (possibly concurrent) submissions is the minimum submitted time.
    """

    def decide(
        self,
        workout: ScoredWorkout,
        current: PersonalBestRecord | None,
    ) -> PersonalBestDecision:
        """Replace when there is no current record or the new time is strictly faster.

        Equal times do not replace; the older record of a tie is kept.
        """
        category = resolve_category(workout.distance_metres)
        if category is None or workout.time_seconds <= 0:
            return PersonalBestDecision(category=category, is_new_best=False, previous=current)

        if current is not None and workout.time_seconds >= current.time_seconds:
            return PersonalBestDecision(category=category, is_new_best=False, previous=current)

        record = PersonalBestRecord(
            user_id=workout.user_id,
            category=category,
            time_seconds=workout.time_seconds,
            achieved_at=workout.achieved_at,
            workout_id=workout.workout_id,
        )
        return PersonalBestDecision(
            category=category, is_new_best=True, record=record, previous=current
        )

    def submit(self, workout: ScoredWorkout, store: PersonalBestStore) -> PersonalBestDecision:
        """Decide against the stored best and commit through the store's CAS.

        If another writer stored a faster or equal time between the read and
        the commit, the conditional update refuses the write and the
        returned decision reports no new best.
        """
        category = resolve_category(workout.distance_metres)
        current = store.get(workout.user_id, category) if category is not None else None
        decision = self.decide(workout, current)
        if not decision.is_new_best or decision.record is None:
            return decision

        if store.replace_if_faster(decision.record):
            return decision

        return PersonalBestDecision(
            category=category,
            is_new_best=False,
            previous=store.get(workout.user_id, decision.record.category),
        )

"""Rebuild personal-best records from a full workout history."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from erg_engine.models.enums import PBCategory
from erg_engine.models.personal_best import PersonalBestRecord, ScoredWorkout
from erg_engine.personal_best.detector import resolve_category

_COLUMNS = ["user_id", "category", "time_seconds", "achieved_at", "position"]


def rebuild_personal_bests(workouts: Iterable[ScoredWorkout]) -> list[PersonalBestRecord]:
    """Recompute every (user, category) best from scratch.

    Used for backfills after an administrative workout deletion. Ties on
    time keep the earliest ``achieved_at``, then the earliest position in
    ``workouts``, matching what sequential chronological submission to the
    detector would have stored.

    Returns:
        Records ordered by user id, then category distance.
    """
    history = list(workouts)
    rows = []
    for position, workout in enumerate(history):
        category = resolve_category(workout.distance_metres)
        if category is None or workout.time_seconds <= 0:
            continue
        rows.append(
            (workout.user_id, int(category), workout.time_seconds, workout.achieved_at, position)
        )
    if not rows:
        return []

    frame = pd.DataFrame(rows, columns=_COLUMNS)
    best = (
        frame.sort_values(
            ["user_id", "category", "time_seconds", "achieved_at", "position"],
            kind="mergesort",
        )
        .drop_duplicates(subset=["user_id", "category"], keep="first")
    )

    records: list[PersonalBestRecord] = []
    for row in best.itertuples(index=False):
        workout = history[int(row.position)]
        records.append(
            PersonalBestRecord(
                user_id=workout.user_id,
                category=PBCategory(int(row.category)),
                time_seconds=workout.time_seconds,
                achieved_at=workout.achieved_at,
                workout_id=workout.workout_id,
            )
        )
    return records

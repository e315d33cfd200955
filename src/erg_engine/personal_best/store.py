"""Personal-best storage interface and an in-memory reference store."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from erg_engine.models.enums import PBCategory
from erg_engine.models.personal_best import PersonalBestRecord


class PersonalBestStore(ABC):
    """Storage collaborator for personal-best records.

    Implementations must make ``replace_if_faster`` a single atomic step
    (a conditional update or compare-and-swap), never a read followed by an
    unconditional write. Otherwise two concurrent submissions for the same
    (user, category) can leave a stored best that is not the fastest time.
    """

    @abstractmethod
    def get(self, user_id: str, category: PBCategory) -> PersonalBestRecord | None:
        """Return the current best for (user, category), if any."""
        ...

    @abstractmethod
    def replace_if_faster(self, record: PersonalBestRecord) -> bool:
        """Store ``record`` only if there is no current best or it is strictly faster.

        Returns True when the record was written.
        """
        ...

    @abstractmethod
    def all_for_user(self, user_id: str) -> list[PersonalBestRecord]:
        """Return every personal best for a user, ordered by distance."""
        ...


class InMemoryPersonalBestStore(PersonalBestStore):
    """Thread-safe dict-backed store. Used in tests and by the CLI."""

    def __init__(self) -> None:
        self._records: dict[tuple[str, PBCategory], PersonalBestRecord] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str, category: PBCategory) -> PersonalBestRecord | None:
        with self._lock:
            return self._records.get((user_id, category))

    def replace_if_faster(self, record: PersonalBestRecord) -> bool:
        key = (record.user_id, record.category)
        with self._lock:
            current = self._records.get(key)
            if current is not None and record.time_seconds >= current.time_seconds:
                return False
            self._records[key] = record
            return True

    def all_for_user(self, user_id: str) -> list[PersonalBestRecord]:
        with self._lock:
            records = [r for (uid, _), r in self._records.items() if uid == user_id]
        return sorted(records, key=lambda r: r.category)

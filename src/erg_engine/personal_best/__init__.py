"""Personal-best detection and storage."""

from erg_engine.personal_best.detector import PersonalBestDetector, resolve_category
from erg_engine.personal_best.history import rebuild_personal_bests
from erg_engine.personal_best.store import InMemoryPersonalBestStore, PersonalBestStore

__all__ = [
    "InMemoryPersonalBestStore",
    "PersonalBestDetector",
    "PersonalBestStore",
    "rebuild_personal_bests",
    "resolve_category",
]

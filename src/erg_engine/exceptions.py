"""Custom exception hierarchy for the erg engine."""

from __future__ import annotations

from typing import Any


class ErgEngineError(Exception):
    """Base exception for all erg_engine errors."""


class InputRangeError(ErgEngineError):
    """A workout field at the API boundary is missing, malformed or out of range."""

    def __init__(self, message: str, field: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class ValidationError(ErgEngineError):
    """A workout cannot be scored (e.g. it has no intervals)."""


class PersonalBestStoreError(ErgEngineError):
    """The personal-best store could not read or write a record."""

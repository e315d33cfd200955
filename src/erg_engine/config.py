"""Environment-variable-based configuration for callers of the erg engine.

The engine treats these as ordinary inputs; they only fill gaps in an
athlete profile when the caller has no physiological data.
"""

from __future__ import annotations

import os

DEFAULT_MAX_HR: int = int(os.environ.get("ERG_DEFAULT_MAX_HR", "190"))
DEFAULT_RESTING_HR: int = int(os.environ.get("ERG_DEFAULT_RESTING_HR", "50"))
DEFAULT_AGE_YEARS: int = int(os.environ.get("ERG_DEFAULT_AGE", "30"))
DEFAULT_WEIGHT_KG: float = float(os.environ.get("ERG_DEFAULT_WEIGHT_KG", "75"))
DEFAULT_HEIGHT_CM: float = float(os.environ.get("ERG_DEFAULT_HEIGHT_CM", "180"))
LOG_LEVEL: str = os.environ.get("ERG_LOG_LEVEL", "INFO").upper()

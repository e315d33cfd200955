"""Erg workout repair, effort scoring and personal-best detection."""

__version__ = "0.1.0"

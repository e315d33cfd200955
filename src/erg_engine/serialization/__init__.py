"""Serialization module — export engine results to the API's JSON shapes."""

from erg_engine.serialization.api import (
    decision_to_dict,
    effort_to_dict,
    heart_rate_analysis_to_dict,
    measurement_to_dict,
    personal_best_to_dict,
    to_json_string,
)

__all__ = [
    "decision_to_dict",
    "effort_to_dict",
    "heart_rate_analysis_to_dict",
    "measurement_to_dict",
    "personal_best_to_dict",
    "to_json_string",
]

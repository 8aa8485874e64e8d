"""Aggregate application use cases."""

from .activities import activate_activity, complete_activity, pause_activity
from .summaries import generate_summary

__all__ = [
    "activate_activity",
    "complete_activity",
    "generate_summary",
    "pause_activity",
]

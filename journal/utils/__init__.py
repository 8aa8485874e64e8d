"""Utility helpers for reusable functionality."""

from .datetime import (
    as_calendar_date,
    day_bounds,
    ensure_naive_datetime,
    get_app_timezone,
    now_in_app_naive_datetime,
    today_in_app_timezone,
)

__all__ = [
    "as_calendar_date",
    "day_bounds",
    "ensure_naive_datetime",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "today_in_app_timezone",
]

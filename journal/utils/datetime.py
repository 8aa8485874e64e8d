"""Helpers for working with the journal's naive local timestamps."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from journal.config import get_settings

_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo | None:
    """Return the configured application timezone.

    The timezone is resolved using the ``APP_TIMEZONE`` environment variable (via
    the ``Settings`` object). ``None`` means the host's local time is used, which
    is what a desktop journal normally wants.
    """

    settings = get_settings()
    tz_name = (settings.app_timezone or "").strip()
    if not tz_name:
        return None
    return _resolve_timezone(tz_name)


def now_in_app_naive_datetime() -> datetime:
    """Return the current wall-clock time without attaching ``tzinfo``.

    Every timestamp stored by the journal is timezone-naive so calendar-day
    arithmetic never depends on a DST boundary.
    """

    tz = get_app_timezone()
    if tz is None:
        return datetime.now()
    return datetime.now(tz=tz).replace(tzinfo=None)


def today_in_app_timezone() -> date:
    """Return the current calendar date."""

    return now_in_app_naive_datetime().date()


def ensure_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` expressed in the app timezone but without ``tzinfo``."""

    if value is None or value.tzinfo is None:
        return value
    tz = get_app_timezone()
    if tz is None:
        return value.astimezone().replace(tzinfo=None)
    return value.astimezone(tz).replace(tzinfo=None)


def as_calendar_date(value: date | datetime | None) -> date | None:
    """Drop the time-of-day part of ``value``."""

    if value is None:
        return None
    if isinstance(value, datetime):
        naive = ensure_naive_datetime(value)
        assert naive is not None
        return naive.date()
    return value


def day_bounds(start: date, end: date) -> tuple[datetime, datetime]:
    """Return the half-open ``[start 00:00, end + 1 day 00:00)`` interval."""

    lower = datetime.combine(start, datetime.min.time())
    upper = datetime.combine(end + timedelta(days=1), datetime.min.time())
    return lower, upper


def _resolve_timezone(tz_name: str) -> tzinfo:
    """Resolve ``tz_name`` into a ``timezone`` instance."""

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        match = _OFFSET_PATTERN.match(tz_name)
        if match:
            sign = -1 if match.group("sign") == "-" else 1
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes") or 0)
            offset = timedelta(hours=hours, minutes=minutes)
            return timezone(sign * offset)
    raise ValueError(f"Zona horaria no reconocida: {tz_name}")

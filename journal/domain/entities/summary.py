"""Domain entity representing a generated period report."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any


class SummaryType(str, Enum):
    """Periods a summary can cover."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    CUSTOM = "custom"


@dataclass
class Summary:
    """Rendered report over the events of a date range."""

    id: int | None
    title: str
    summary_type: SummaryType
    start_date: date
    end_date: date
    content: str
    statistics: dict[str, Any] = field(default_factory=dict)
    is_auto_generated: bool = False
    created_at: datetime | None = None


__all__ = ["Summary", "SummaryType"]

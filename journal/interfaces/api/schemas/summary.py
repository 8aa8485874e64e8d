"""Pydantic schemas for summary endpoints."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from journal.domain.entities import SummaryType


class SummaryGenerateRequest(BaseModel):
    """Summary type plus an optional range; the type's default range is used when omitted."""

    summary_type: SummaryType
    start_date: date | None = None
    end_date: date | None = None


class SummaryRangeRead(BaseModel):
    summary_type: SummaryType
    start_date: date
    end_date: date


class SummaryRead(BaseModel):
    id: int
    title: str
    summary_type: SummaryType
    start_date: date
    end_date: date
    content: str
    statistics: dict[str, Any] = Field(default_factory=dict)
    is_auto_generated: bool
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["SummaryGenerateRequest", "SummaryRangeRead", "SummaryRead"]

"""Pydantic schemas for activity and Gantt endpoints."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from journal.domain.entities import ActivityStatus
from .project import ContactRead


class ActivityCreate(BaseModel):
    """Payload required to create an activity."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    estimated_completion_date: date | None = None
    contact_ids: list[int] = Field(default_factory=list)


class ActivityUpdate(BaseModel):
    """Fields that can be edited; omitted fields keep their value."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    estimated_completion_date: date | None = None

    model_config = ConfigDict(extra="forbid")


class AssigneesRequest(BaseModel):
    contact_ids: list[int] = Field(..., min_length=1, description="Contactos a asignar")


class ActivityRead(BaseModel):
    """Representation of an activity delivered to the client."""

    id: int
    project_id: int
    name: str
    description: str | None = None
    estimated_completion_date: date | None = None
    status: ActivityStatus
    status_label: str
    activated_at: datetime | None = None
    paused_at: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    assignees: list[ContactRead] = Field(default_factory=list)


class GanttRead(BaseModel):
    """Gantt projection as a table: legend, header and one row per activity."""

    days: list[date]
    legend: list[str]
    header: list[str]
    rows: list[list[str]]


__all__ = [
    "ActivityCreate",
    "ActivityRead",
    "ActivityUpdate",
    "AssigneesRequest",
    "GanttRead",
]

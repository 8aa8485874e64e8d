"""Pydantic schemas for event endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .project import ContactRead


class EventCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    event_date: datetime
    description: str | None = None
    event_type: str | None = Field(default=None, max_length=50)
    project_id: int | None = Field(default=None, ge=1)
    contact_ids: list[int] = Field(default_factory=list)


class EventRead(BaseModel):
    id: int
    title: str
    event_date: datetime
    description: str | None = None
    event_type: str | None = None
    project_id: int | None = None
    project_name: str | None = None
    contacts: list[ContactRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


__all__ = ["EventCreate", "EventRead"]

"""Domain entity describing a dated interaction."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .contact import Contact


@dataclass
class Event:
    """A dated record linking an optional project and some contacts."""

    id: int | None
    title: str
    event_date: datetime
    description: str | None = None
    event_type: str | None = None
    project_id: int | None = None
    project_name: str | None = None
    contacts: list[Contact] = field(default_factory=list)
    created_at: datetime | None = None


__all__ = ["Event"]

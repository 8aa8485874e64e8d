"""Domain entity representing a person tracked by the journal."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Contact:
    """Someone who can be assigned to activities or linked to events."""

    id: int | None
    name: str
    title: str | None = None
    company: str | None = None
    email: str | None = None
    phone: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Contact"]

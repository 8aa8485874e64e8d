"""Domain entity describing a unit of work inside a project."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from .contact import Contact


class ActivityStatus(str, Enum):
    """Lifecycle states of an activity."""

    PENDING = "pending"
    INACTIVE = "inactive"
    IN_PROGRESS = "in_progress"
    PAUSED = "paused"
    COMPLETED = "completed"


@dataclass
class Activity:
    """Trackable work item with its own lifecycle and assigned contacts."""

    id: int | None
    project_id: int
    name: str
    description: str | None
    estimated_completion_date: date | None
    status: ActivityStatus
    activated_at: datetime | None = None
    paused_at: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    assignees: list[Contact] = field(default_factory=list)

    @property
    def assignee_names(self) -> list[str]:
        return [contact.name for contact in self.assignees]


__all__ = ["Activity", "ActivityStatus"]

"""Domain entity representing a project."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Project:
    """Container for activities and events."""

    id: int | None
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Project"]

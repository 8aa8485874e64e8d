"""Domain entities exposed by the application."""

from .activity import Activity, ActivityStatus
from .contact import Contact
from .event import Event
from .project import Project
from .summary import Summary, SummaryType

__all__ = [
    "Activity",
    "ActivityStatus",
    "Contact",
    "Event",
    "Project",
    "Summary",
    "SummaryType",
]

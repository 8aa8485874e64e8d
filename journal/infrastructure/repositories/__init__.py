"""Repository implementations for infrastructure layer."""

from .activity_repository import ActivityRepository
from .contact_repository import ContactRepository
from .event_repository import EventRepository
from .project_repository import ProjectRepository
from .summary_repository import SummaryRepository

__all__ = [
    "ActivityRepository",
    "ContactRepository",
    "EventRepository",
    "ProjectRepository",
    "SummaryRepository",
]

"""ORM models used by the application infrastructure."""

from .activity import ActivityModel, activity_contact_table
from .contact import ContactModel
from .event import EventModel, event_contact_table
from .project import ProjectModel
from .summary import SummaryModel

__all__ = [
    "ActivityModel",
    "activity_contact_table",
    "ContactModel",
    "EventModel",
    "event_contact_table",
    "ProjectModel",
    "SummaryModel",
]

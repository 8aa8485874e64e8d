from .activity import (
    ActivityCreate,
    ActivityRead,
    ActivityUpdate,
    AssigneesRequest,
    GanttRead,
)
from .event import EventCreate, EventRead
from .project import ContactCreate, ContactRead, ProjectCreate, ProjectRead
from .summary import SummaryGenerateRequest, SummaryRangeRead, SummaryRead

__all__ = [
    "ActivityCreate",
    "ActivityRead",
    "ActivityUpdate",
    "AssigneesRequest",
    "ContactCreate",
    "ContactRead",
    "EventCreate",
    "EventRead",
    "GanttRead",
    "ProjectCreate",
    "ProjectRead",
    "SummaryGenerateRequest",
    "SummaryRangeRead",
    "SummaryRead",
]

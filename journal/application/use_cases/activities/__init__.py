"""Use cases for managing project activities."""

from .assignees import assign_contacts, unassign_contact
from .create_activity import create_activity
from .delete_activity import delete_activity
from .gantt import build_project_gantt, export_project_gantt
from .get_activity import get_activity
from .list_activities import list_activities
from .transitions import activate_activity, complete_activity, pause_activity
from .update_activity import update_activity

__all__ = [
    "activate_activity",
    "assign_contacts",
    "build_project_gantt",
    "complete_activity",
    "create_activity",
    "delete_activity",
    "export_project_gantt",
    "get_activity",
    "list_activities",
    "pause_activity",
    "unassign_contact",
    "update_activity",
]

"""Use case for listing the activities of a project."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from journal.domain.entities import Activity
from journal.domain.lifecycle import validate_activity_state
from journal.infrastructure.repositories import ActivityRepository
from ..projects import get_project


def list_activities(session: Session, project_id: int) -> Sequence[Activity]:
    """Return the project's activities with their assignees, oldest first."""

    get_project(session, project_id)
    activities = ActivityRepository(session).list_for_project(project_id)
    return [validate_activity_state(activity) for activity in activities]

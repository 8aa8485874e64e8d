"""Use case for retrieving a single activity."""

from sqlalchemy.orm import Session

from journal.domain.entities import Activity
from journal.domain.errors import NotFound
from journal.domain.lifecycle import validate_activity_state
from journal.infrastructure.repositories import ActivityRepository


def get_activity(session: Session, activity_id: int) -> Activity:
    """Return the activity identified by ``activity_id`` or raise an error."""

    activity = ActivityRepository(session).get(activity_id)
    if activity is None:
        raise NotFound("Actividad no encontrada")
    return validate_activity_state(activity)

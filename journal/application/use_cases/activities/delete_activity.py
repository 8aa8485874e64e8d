"""Use case for deleting activities."""

import logging

from sqlalchemy.orm import Session

from journal.domain.lifecycle import ensure_deletable
from journal.infrastructure.repositories import ActivityRepository
from .get_activity import get_activity

logger = logging.getLogger(__name__)


def delete_activity(session: Session, activity_id: int) -> None:
    """Delete an activity that is not completed, together with its assignee links.

    The delete only applies if the status read here is still the stored one.
    """

    activity = get_activity(session, activity_id)
    ensure_deletable(activity)
    ActivityRepository(session).delete(activity_id, expected_status=activity.status)
    logger.info("Activity %s deleted from project %s", activity_id, activity.project_id)

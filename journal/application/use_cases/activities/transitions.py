"""Use cases applying lifecycle transitions to persisted activities."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from sqlalchemy.orm import Session

from journal.domain import lifecycle
from journal.domain.entities import Activity
from journal.domain.errors import Conflict
from journal.infrastructure.repositories import ActivityRepository
from journal.utils import now_in_app_naive_datetime
from .get_activity import get_activity

logger = logging.getLogger(__name__)

Transition = Callable[..., Activity]


def _apply_transition(
    session: Session,
    activity_id: int,
    transition: Transition,
    *,
    now: datetime | None,
) -> Activity:
    current = get_activity(session, activity_id)
    updated = transition(current, now=now or now_in_app_naive_datetime())
    timestamp_field = lifecycle.TIMESTAMP_FIELDS.get(updated.status)
    try:
        saved = ActivityRepository(session).update_status(
            activity_id,
            expected_status=current.status,
            new_status=updated.status,
            timestamp_field=timestamp_field,
            timestamp=getattr(updated, timestamp_field) if timestamp_field else None,
        )
    except Conflict:
        logger.warning(
            "Concurrent change detected on activity %s while applying %s",
            activity_id,
            transition.__name__,
        )
        raise
    logger.info(
        "Activity %s moved from %s to %s",
        activity_id,
        current.status.value,
        saved.status.value,
    )
    return saved


def activate_activity(
    session: Session, activity_id: int, *, now: datetime | None = None
) -> Activity:
    """Start or resume an inactive or paused activity."""

    return _apply_transition(session, activity_id, lifecycle.activate, now=now)


def pause_activity(
    session: Session, activity_id: int, *, now: datetime | None = None
) -> Activity:
    """Pause an activity in progress."""

    return _apply_transition(session, activity_id, lifecycle.pause, now=now)


def complete_activity(
    session: Session, activity_id: int, *, now: datetime | None = None
) -> Activity:
    """Complete an activity in progress."""

    return _apply_transition(session, activity_id, lifecycle.complete, now=now)

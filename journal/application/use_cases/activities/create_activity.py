"""Use case for creating activities."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from sqlalchemy.orm import Session

from journal.domain.entities import Activity
from journal.domain.lifecycle import initial_status
from journal.infrastructure.repositories import ActivityRepository
from ..projects import get_project

logger = logging.getLogger(__name__)


def create_activity(
    session: Session,
    *,
    project_id: int,
    name: str,
    description: str | None = None,
    estimated_completion_date: date | None = None,
    contact_ids: Sequence[int] = (),
) -> Activity:
    """Create an activity; it starts inactive when contacts are given, pending otherwise."""

    normalized_name = name.strip()
    if not normalized_name:
        raise ValueError("El nombre de la actividad no puede estar vacío")
    get_project(session, project_id)

    unique_contacts = list(dict.fromkeys(contact_ids))
    activity = Activity(
        id=None,
        project_id=project_id,
        name=normalized_name,
        description=description,
        estimated_completion_date=estimated_completion_date,
        status=initial_status(len(unique_contacts)),
    )
    saved = ActivityRepository(session).create(activity, contact_ids=unique_contacts)
    logger.info(
        "Activity %s created in project %s with status %s",
        saved.id,
        project_id,
        saved.status.value,
    )
    return saved

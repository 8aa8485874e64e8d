"""Use case for editing the descriptive fields of an activity."""

from __future__ import annotations

from datetime import date

from sqlalchemy.orm import Session

from journal.domain.entities import Activity
from journal.domain.lifecycle import ensure_editable
from journal.infrastructure.repositories import ActivityRepository
from .get_activity import get_activity

_UNSET = object()


def update_activity(
    session: Session,
    *,
    activity_id: int,
    name: str | None = None,
    description: str | None | object = _UNSET,
    estimated_completion_date: date | None | object = _UNSET,
) -> Activity:
    """Update name, description or estimated date. Status is never touched here."""

    current = get_activity(session, activity_id)
    ensure_editable(current)

    new_name = current.name
    if name is not None:
        new_name = name.strip()
        if not new_name:
            raise ValueError("El nombre de la actividad no puede estar vacío")

    return ActivityRepository(session).update_details(
        activity_id,
        expected_status=current.status,
        name=new_name,
        description=current.description if description is _UNSET else description,
        estimated_completion_date=(
            current.estimated_completion_date
            if estimated_completion_date is _UNSET
            else estimated_completion_date
        ),
    )

"""Use cases for linking contacts to activities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from journal.domain.entities import Activity
from journal.domain.lifecycle import after_assignment, ensure_editable
from journal.infrastructure.repositories import ActivityRepository
from .get_activity import get_activity


def assign_contacts(
    session: Session, *, activity_id: int, contact_ids: Sequence[int]
) -> Activity:
    """Assign contacts; the first assignment moves a pending activity to inactive."""

    if not contact_ids:
        raise ValueError("Debe indicar al menos un contacto")
    current = get_activity(session, activity_id)
    ensure_editable(current)

    known = {contact.id for contact in current.assignees}
    expected_count = len(known | set(contact_ids))
    promoted = after_assignment(current, expected_count)

    return ActivityRepository(session).assign_contacts(
        activity_id,
        contact_ids,
        expected_status=current.status,
        new_status=promoted.status,
    )


def unassign_contact(session: Session, *, activity_id: int, contact_id: int) -> Activity:
    """Remove one assignee. The activity keeps its status even with no assignees left."""

    current = get_activity(session, activity_id)
    ensure_editable(current)
    return ActivityRepository(session).unassign_contact(
        activity_id, contact_id, expected_status=current.status
    )

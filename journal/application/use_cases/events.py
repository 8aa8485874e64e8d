"""Use cases for recording and reading events."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime

from sqlalchemy.orm import Session

from journal.domain.entities import Event
from journal.domain.summary import ensure_valid_range
from journal.infrastructure.repositories import EventRepository
from .projects import get_project


def create_event(
    session: Session,
    *,
    title: str,
    event_date: datetime,
    description: str | None = None,
    event_type: str | None = None,
    project_id: int | None = None,
    contact_ids: Sequence[int] = (),
) -> Event:
    """Record an event, optionally linked to a project and contacts."""

    normalized_title = title.strip()
    if not normalized_title:
        raise ValueError("El título del evento no puede estar vacío")
    if project_id is not None:
        get_project(session, project_id)

    normalized_type = (event_type or "").strip() or None
    event = Event(
        id=None,
        title=normalized_title,
        event_date=event_date,
        description=description,
        event_type=normalized_type,
        project_id=project_id,
    )
    return EventRepository(session).create(event, contact_ids=contact_ids)


def list_events(session: Session, *, start_date: date, end_date: date) -> Sequence[Event]:
    """Return the events dated inside ``[start_date, end_date]``."""

    ensure_valid_range(start_date, end_date)
    return EventRepository(session).list_between(start_date, end_date)


__all__ = ["create_event", "list_events"]

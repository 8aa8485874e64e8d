"""Persistence helpers for event entities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date

from sqlalchemy.orm import Session

from journal.domain.entities import Event
from journal.domain.errors import NotFound
from journal.infrastructure.models import ContactModel, EventModel
from journal.infrastructure.repositories.contact_repository import ContactRepository
from journal.utils import day_bounds, ensure_naive_datetime


class EventRepository:
    """Provide read access and creation for :class:`Event` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_between(self, start_date: date, end_date: date) -> Sequence[Event]:
        """Return events whose ``event_date`` falls on a day in the inclusive range."""

        lower, upper = day_bounds(start_date, end_date)
        query = (
            self.session.query(EventModel)
            .filter(EventModel.event_date >= lower, EventModel.event_date < upper)
            .order_by(EventModel.event_date.asc(), EventModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, event: Event, *, contact_ids: Iterable[int] = ()) -> Event:
        model = EventModel(
            title=event.title,
            description=event.description,
            event_date=ensure_naive_datetime(event.event_date),
            event_type=event.event_type,
            project_id=event.project_id,
        )
        ids = list(dict.fromkeys(contact_ids))
        if ids:
            contacts = self.session.query(ContactModel).filter(ContactModel.id.in_(ids)).all()
            if len(contacts) != len(ids):
                raise NotFound("Uno o más contactos del evento no existen")
            model.contacts = contacts
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: EventModel) -> Event:
        return Event(
            id=model.id,
            title=model.title,
            event_date=model.event_date,
            description=model.description,
            event_type=model.event_type,
            project_id=model.project_id,
            project_name=model.project.name if model.project is not None else None,
            contacts=[ContactRepository._to_entity(contact) for contact in model.contacts],
            created_at=model.created_at,
        )


__all__ = ["EventRepository"]

"""Persistence helpers for contact entities."""

from __future__ import annotations

from sqlalchemy.orm import Session

from journal.domain.entities import Contact
from journal.infrastructure.models import ContactModel


class ContactRepository:
    """Provide CRUD operations for :class:`Contact` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, contact_id: int) -> Contact | None:
        model = self.session.get(ContactModel, contact_id)
        return self._to_entity(model) if model else None

    def create(self, contact: Contact) -> Contact:
        model = ContactModel(
            name=contact.name,
            title=contact.title,
            company=contact.company,
            email=contact.email,
            phone=contact.phone,
            notes=contact.notes,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ContactModel) -> Contact:
        return Contact(
            id=model.id,
            name=model.name,
            title=model.title,
            company=model.company,
            email=model.email,
            phone=model.phone,
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["ContactRepository"]

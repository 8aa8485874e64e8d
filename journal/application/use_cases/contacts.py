"""Use cases for managing contacts."""

from __future__ import annotations

from sqlalchemy.orm import Session

from journal.domain.entities import Contact
from journal.infrastructure.repositories import ContactRepository


def create_contact(
    session: Session,
    *,
    name: str,
    title: str | None = None,
    company: str | None = None,
    email: str | None = None,
    phone: str | None = None,
    notes: str | None = None,
) -> Contact:
    """Create a new contact."""

    normalized_name = name.strip()
    if not normalized_name:
        raise ValueError("El nombre del contacto no puede estar vacío")
    return ContactRepository(session).create(
        Contact(
            id=None,
            name=normalized_name,
            title=title,
            company=company,
            email=email,
            phone=phone,
            notes=notes,
        )
    )


__all__ = ["create_contact"]

"""Rutas para registrar contactos."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from journal.application.use_cases.contacts import create_contact as create_contact_uc
from journal.infrastructure.database import get_db
from journal.interfaces.api.routes_helpers import to_http_error
from journal.interfaces.api.schemas import ContactCreate, ContactRead

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.post("/", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
def create_contact(contact_in: ContactCreate, db: Session = Depends(get_db)) -> ContactRead:
    """Crea un nuevo contacto."""

    try:
        contact = create_contact_uc(db, **contact_in.model_dump())
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return ContactRead.model_validate(contact)


__all__ = ["router"]

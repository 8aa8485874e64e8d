"""Rutas para registrar y consultar eventos."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from journal.application.use_cases.events import (
    create_event as create_event_uc,
    list_events as list_events_uc,
)
from journal.infrastructure.database import get_db
from journal.interfaces.api.routes_helpers import to_http_error
from journal.interfaces.api.schemas import EventCreate, EventRead

router = APIRouter(prefix="/events", tags=["events"])


@router.post("/", response_model=EventRead, status_code=status.HTTP_201_CREATED)
def create_event(event_in: EventCreate, db: Session = Depends(get_db)) -> EventRead:
    """Registra un evento."""

    try:
        event = create_event_uc(db, **event_in.model_dump())
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return EventRead.model_validate(event)


@router.get("/", response_model=list[EventRead])
def list_events(
    start_date: date = Query(..., description="Primer día incluido"),
    end_date: date = Query(..., description="Último día incluido"),
    db: Session = Depends(get_db),
) -> list[EventRead]:
    """Devuelve los eventos registrados en el rango indicado."""

    try:
        events = list_events_uc(db, start_date=start_date, end_date=end_date)
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return [EventRead.model_validate(event) for event in events]


__all__ = ["router"]

"""Rutas para editar actividades y aplicar transiciones de estado."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from journal.application.use_cases.activities import (
    activate_activity as activate_activity_uc,
    assign_contacts as assign_contacts_uc,
    complete_activity as complete_activity_uc,
    delete_activity as delete_activity_uc,
    get_activity as get_activity_uc,
    pause_activity as pause_activity_uc,
    unassign_contact as unassign_contact_uc,
    update_activity as update_activity_uc,
)
from journal.domain.entities import Activity
from journal.infrastructure.database import get_db
from journal.interfaces.api.routes_helpers import to_http_error
from journal.interfaces.api.schemas import (
    ActivityRead,
    ActivityUpdate,
    AssigneesRequest,
    ContactRead,
)
from journal.utils.labels import activity_status_label

router = APIRouter(prefix="/activities", tags=["activities"])


def activity_to_read_model(activity: Activity) -> ActivityRead:
    return ActivityRead(
        id=activity.id,
        project_id=activity.project_id,
        name=activity.name,
        description=activity.description,
        estimated_completion_date=activity.estimated_completion_date,
        status=activity.status,
        status_label=activity_status_label(activity.status),
        activated_at=activity.activated_at,
        paused_at=activity.paused_at,
        completed_at=activity.completed_at,
        created_at=activity.created_at,
        updated_at=activity.updated_at,
        assignees=[ContactRead.model_validate(contact) for contact in activity.assignees],
    )


@router.get("/{activity_id}", response_model=ActivityRead)
def read_activity(activity_id: int, db: Session = Depends(get_db)) -> ActivityRead:
    """Obtiene una actividad por su identificador."""

    try:
        activity = get_activity_uc(db, activity_id)
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return activity_to_read_model(activity)


@router.patch("/{activity_id}", response_model=ActivityRead)
def update_activity(
    activity_id: int,
    activity_in: ActivityUpdate,
    db: Session = Depends(get_db),
) -> ActivityRead:
    """Actualiza nombre, descripción o fecha estimada de una actividad."""

    changes = activity_in.model_dump(exclude_unset=True)
    try:
        activity = update_activity_uc(db, activity_id=activity_id, **changes)
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return activity_to_read_model(activity)


@router.delete("/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_activity(activity_id: int, db: Session = Depends(get_db)) -> Response:
    """Elimina una actividad que no esté completada."""

    try:
        delete_activity_uc(db, activity_id)
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{activity_id}/activate", response_model=ActivityRead)
def activate_activity(activity_id: int, db: Session = Depends(get_db)) -> ActivityRead:
    """Activa o reanuda una actividad."""

    try:
        activity = activate_activity_uc(db, activity_id)
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return activity_to_read_model(activity)


@router.post("/{activity_id}/pause", response_model=ActivityRead)
def pause_activity(activity_id: int, db: Session = Depends(get_db)) -> ActivityRead:
    """Pausa una actividad en progreso."""

    try:
        activity = pause_activity_uc(db, activity_id)
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return activity_to_read_model(activity)


@router.post("/{activity_id}/complete", response_model=ActivityRead)
def complete_activity(activity_id: int, db: Session = Depends(get_db)) -> ActivityRead:
    """Marca como completada una actividad en progreso."""

    try:
        activity = complete_activity_uc(db, activity_id)
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return activity_to_read_model(activity)


@router.post("/{activity_id}/assignees", response_model=ActivityRead)
def assign_contacts(
    activity_id: int,
    payload: AssigneesRequest,
    db: Session = Depends(get_db),
) -> ActivityRead:
    """Asigna responsables a la actividad."""

    try:
        activity = assign_contacts_uc(
            db, activity_id=activity_id, contact_ids=payload.contact_ids
        )
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return activity_to_read_model(activity)


@router.delete("/{activity_id}/assignees/{contact_id}", response_model=ActivityRead)
def unassign_contact(
    activity_id: int,
    contact_id: int,
    db: Session = Depends(get_db),
) -> ActivityRead:
    """Quita un responsable de la actividad."""

    try:
        activity = unassign_contact_uc(db, activity_id=activity_id, contact_id=contact_id)
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return activity_to_read_model(activity)


__all__ = ["activity_to_read_model", "router"]

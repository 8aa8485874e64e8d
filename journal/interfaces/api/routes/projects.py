"""Rutas de proyectos, sus actividades y su diagrama de Gantt."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from journal.application.use_cases.activities import (
    build_project_gantt as build_project_gantt_uc,
    create_activity as create_activity_uc,
    export_project_gantt as export_project_gantt_uc,
    list_activities as list_activities_uc,
)
from journal.application.use_cases.projects import (
    create_project as create_project_uc,
    get_project as get_project_uc,
)
from journal.infrastructure.database import get_db
from journal.interfaces.api.routes.activities import activity_to_read_model
from journal.interfaces.api.routes_helpers import to_http_error
from journal.interfaces.api.schemas import (
    ActivityCreate,
    ActivityRead,
    GanttRead,
    ProjectCreate,
    ProjectRead,
)

router = APIRouter(prefix="/projects", tags=["projects"])
logger = logging.getLogger(__name__)

_EXCEL_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.post("/", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(project_in: ProjectCreate, db: Session = Depends(get_db)) -> ProjectRead:
    """Crea un nuevo proyecto."""

    try:
        project = create_project_uc(
            db, name=project_in.name, description=project_in.description
        )
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return ProjectRead.model_validate(project)


@router.get("/{project_id}", response_model=ProjectRead)
def read_project(project_id: int, db: Session = Depends(get_db)) -> ProjectRead:
    """Obtiene un proyecto por su identificador."""

    try:
        project = get_project_uc(db, project_id)
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return ProjectRead.model_validate(project)


@router.get("/{project_id}/activities", response_model=list[ActivityRead])
def list_project_activities(project_id: int, db: Session = Depends(get_db)) -> list[ActivityRead]:
    """Lista las actividades del proyecto con sus responsables."""

    try:
        activities = list_activities_uc(db, project_id)
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return [activity_to_read_model(activity) for activity in activities]


@router.post(
    "/{project_id}/activities",
    response_model=ActivityRead,
    status_code=status.HTTP_201_CREATED,
)
def create_project_activity(
    project_id: int,
    activity_in: ActivityCreate,
    db: Session = Depends(get_db),
) -> ActivityRead:
    """Crea una actividad dentro del proyecto."""

    try:
        activity = create_activity_uc(
            db,
            project_id=project_id,
            name=activity_in.name,
            description=activity_in.description,
            estimated_completion_date=activity_in.estimated_completion_date,
            contact_ids=activity_in.contact_ids,
        )
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return activity_to_read_model(activity)


@router.get("/{project_id}/gantt", response_model=GanttRead)
def read_project_gantt(project_id: int, db: Session = Depends(get_db)) -> GanttRead:
    """Devuelve la proyección de Gantt de las actividades del proyecto."""

    try:
        matrix = build_project_gantt_uc(db, project_id)
    except ValueError as exc:
        raise to_http_error(exc) from exc
    _, _, *rows = matrix.to_table()
    return GanttRead(days=list(matrix.days), legend=matrix.legend, header=matrix.header, rows=rows)


@router.get("/{project_id}/gantt/export")
def export_project_gantt(project_id: int, db: Session = Depends(get_db)) -> FileResponse:
    """Genera el archivo Excel con el diagrama de Gantt del proyecto."""

    try:
        path = export_project_gantt_uc(db, project_id)
    except ValueError as exc:
        raise to_http_error(exc) from exc
    except OSError as exc:
        logger.exception("Error al exportar el Gantt del proyecto %s: %s", project_id, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"code": "export_failed", "message": str(exc)},
        ) from exc
    return FileResponse(path, media_type=_EXCEL_MEDIA_TYPE, filename=path.name)


__all__ = ["router"]

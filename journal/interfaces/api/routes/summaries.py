"""Rutas para generar y consultar resúmenes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from journal.application.use_cases.summaries import (
    default_summary_range,
    delete_summary as delete_summary_uc,
    generate_summary as generate_summary_uc,
    get_summary as get_summary_uc,
    list_summaries as list_summaries_uc,
)
from journal.domain.entities import SummaryType
from journal.infrastructure.database import get_db
from journal.interfaces.api.routes_helpers import to_http_error
from journal.interfaces.api.schemas import (
    SummaryGenerateRequest,
    SummaryRangeRead,
    SummaryRead,
)
from journal.utils import today_in_app_timezone

router = APIRouter(prefix="/summaries", tags=["summaries"])


@router.post("/", response_model=SummaryRead, status_code=status.HTTP_201_CREATED)
def generate_summary(
    request: SummaryGenerateRequest, db: Session = Depends(get_db)
) -> SummaryRead:
    """Genera un resumen para el rango indicado o el rango por defecto del tipo."""

    try:
        start_date, end_date = request.start_date, request.end_date
        if start_date is None or end_date is None:
            default_start, default_end = default_summary_range(
                request.summary_type, today_in_app_timezone()
            )
            start_date = start_date or default_start
            end_date = end_date or default_end
        summary = generate_summary_uc(
            db,
            summary_type=request.summary_type,
            start_date=start_date,
            end_date=end_date,
        )
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return SummaryRead.model_validate(summary)


@router.get("/", response_model=list[SummaryRead])
def list_summaries(
    summary_type: SummaryType | None = Query(default=None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
) -> list[SummaryRead]:
    """Lista los resúmenes generados, del más reciente al más antiguo."""

    summaries = list_summaries_uc(db, summary_type=summary_type, skip=skip, limit=limit)
    return [SummaryRead.model_validate(summary) for summary in summaries]


@router.get("/default-range", response_model=SummaryRangeRead)
def read_default_range(summary_type: SummaryType = Query(...)) -> SummaryRangeRead:
    """Devuelve el rango de fechas sugerido para un tipo de resumen."""

    try:
        start_date, end_date = default_summary_range(summary_type, today_in_app_timezone())
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return SummaryRangeRead(summary_type=summary_type, start_date=start_date, end_date=end_date)


@router.get("/{summary_id}", response_model=SummaryRead)
def read_summary(summary_id: int, db: Session = Depends(get_db)) -> SummaryRead:
    """Obtiene un resumen por su identificador."""

    try:
        summary = get_summary_uc(db, summary_id)
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return SummaryRead.model_validate(summary)


@router.delete("/{summary_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_summary(summary_id: int, db: Session = Depends(get_db)) -> Response:
    """Elimina un resumen."""

    try:
        delete_summary_uc(db, summary_id)
    except ValueError as exc:
        raise to_http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]

"""Persistence layer for generated summaries."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy.orm import Session

from journal.domain.entities import Summary, SummaryType
from journal.domain.errors import NotFound
from journal.infrastructure.models import SummaryModel
from journal.utils import ensure_naive_datetime, now_in_app_naive_datetime


class SummaryRepository:
    """Store summaries. Records are only ever inserted or deleted."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        summary_type: SummaryType | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> Sequence[Summary]:
        query = self.session.query(SummaryModel)
        if summary_type is not None:
            query = query.filter(SummaryModel.summary_type == summary_type.value)
        query = query.order_by(SummaryModel.created_at.desc(), SummaryModel.id.desc())
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, summary_id: int) -> Summary | None:
        model = self.session.get(SummaryModel, summary_id)
        return self._to_entity(model) if model else None

    def create(self, summary: Summary) -> Summary:
        model = SummaryModel(
            title=summary.title,
            summary_type=summary.summary_type.value,
            start_date=summary.start_date,
            end_date=summary.end_date,
            content=summary.content,
            statistics=dict(summary.statistics),
            is_auto_generated=summary.is_auto_generated,
            created_at=(
                ensure_naive_datetime(summary.created_at) or now_in_app_naive_datetime()
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, summary_id: int) -> None:
        model = self.session.get(SummaryModel, summary_id)
        if model is None:
            raise NotFound("Resumen no encontrado")
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _to_entity(model: SummaryModel) -> Summary:
        return Summary(
            id=model.id,
            title=model.title,
            summary_type=SummaryType(model.summary_type),
            start_date=model.start_date,
            end_date=model.end_date,
            content=model.content,
            statistics=dict(model.statistics or {}),
            is_auto_generated=bool(model.is_auto_generated),
            created_at=model.created_at,
        )


__all__ = ["SummaryRepository"]

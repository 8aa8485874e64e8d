"""Use case for retrieving a single summary."""

from sqlalchemy.orm import Session

from journal.domain.entities import Summary
from journal.domain.errors import NotFound
from journal.infrastructure.repositories import SummaryRepository


def get_summary(session: Session, summary_id: int) -> Summary:
    """Return the summary identified by ``summary_id`` or raise an error."""

    summary = SummaryRepository(session).get(summary_id)
    if summary is None:
        raise NotFound("Resumen no encontrado")
    return summary

"""Use case for listing stored summaries."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from journal.domain.entities import Summary, SummaryType
from journal.infrastructure.repositories import SummaryRepository


def list_summaries(
    session: Session,
    *,
    summary_type: SummaryType | None = None,
    skip: int = 0,
    limit: int | None = None,
) -> Sequence[Summary]:
    """Return stored summaries, newest first."""

    return SummaryRepository(session).list(summary_type=summary_type, skip=skip, limit=limit)

"""Use case for deleting summaries."""

import logging

from sqlalchemy.orm import Session

from journal.infrastructure.repositories import SummaryRepository

logger = logging.getLogger(__name__)


def delete_summary(session: Session, summary_id: int) -> None:
    """Delete the specified summary."""

    SummaryRepository(session).delete(summary_id)
    logger.info("Summary %s deleted", summary_id)

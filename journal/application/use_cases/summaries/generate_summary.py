"""Use case for generating a summary over a date range."""

from __future__ import annotations

import logging
from datetime import date, datetime

from sqlalchemy.orm import Session

from journal.domain.entities import Summary, SummaryType
from journal.domain.summary import build_summary, ensure_valid_range
from journal.infrastructure.repositories import EventRepository, SummaryRepository
from journal.utils import now_in_app_naive_datetime

logger = logging.getLogger(__name__)


def generate_summary(
    session: Session,
    *,
    summary_type: SummaryType,
    start_date: date,
    end_date: date,
    now: datetime | None = None,
) -> Summary:
    """Aggregate the range's events into a new, user-requested summary.

    Every call stores a new record, even for a range summarized before.
    """

    ensure_valid_range(start_date, end_date)
    events = EventRepository(session).list_between(start_date, end_date)
    summary = build_summary(
        summary_type,
        start_date,
        end_date,
        events,
        created_at=now or now_in_app_naive_datetime(),
        is_auto_generated=False,
    )
    saved = SummaryRepository(session).create(summary)
    logger.info(
        "Summary %s (%s) generated for %s..%s with %d events",
        saved.id,
        summary_type.value,
        start_date,
        end_date,
        saved.statistics.get("total_events", 0),
    )
    return saved

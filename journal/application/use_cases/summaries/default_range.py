"""Default date ranges offered for each summary type."""

from __future__ import annotations

from datetime import date, timedelta

from journal.domain.entities import SummaryType


def default_summary_range(summary_type: SummaryType, today: date) -> tuple[date, date]:
    """Return the period a summary of ``summary_type`` covers by default.

    Daily covers yesterday, weekly the seven days ending yesterday, monthly the
    previous calendar month and yearly the previous calendar year. Custom
    summaries have no default and need an explicit range.
    """

    yesterday = today - timedelta(days=1)
    if summary_type is SummaryType.DAILY:
        return yesterday, yesterday
    if summary_type is SummaryType.WEEKLY:
        return today - timedelta(days=7), yesterday
    if summary_type is SummaryType.MONTHLY:
        last_month_end = today.replace(day=1) - timedelta(days=1)
        return last_month_end.replace(day=1), last_month_end
    if summary_type is SummaryType.YEARLY:
        year = today.year - 1
        return date(year, 1, 1), date(year, 12, 31)
    raise ValueError("Los resúmenes personalizados requieren un rango de fechas explícito")


__all__ = ["default_summary_range"]

"""Day-by-day occupancy grid for a project's activities."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Final

from journal.domain.entities import Activity, ActivityStatus
from journal.domain.errors import InvariantViolation
from journal.utils.datetime import as_calendar_date
from journal.utils.labels import ACTIVITY_STATUS_LABELS

PADDING_DAYS: Final[int] = 7
EMPTY_CELL: Final[str] = ""
MISSING_VALUE: Final[str] = "-"

MARKERS: Final[dict[ActivityStatus, str]] = {
    ActivityStatus.PENDING: "■",
    ActivityStatus.INACTIVE: "■",
    ActivityStatus.IN_PROGRESS: "●",
    ActivityStatus.PAUSED: "◆",
    ActivityStatus.COMPLETED: "★",
}

LEGEND: Final[tuple[str, ...]] = (
    "Leyenda:",
    "■ Pendiente/Sin activar",
    "● En progreso",
    "◆ En pausa",
    "★ Completada",
)

FIXED_HEADERS: Final[tuple[str, ...]] = (
    "Actividad",
    "Estado",
    "Responsables",
    "Creada",
    "Fecha estimada",
    "Activada",
    "Completada",
)


@dataclass(frozen=True)
class GanttRow:
    """Projection of one activity onto the day columns."""

    activity_id: int | None
    name: str
    status: ActivityStatus
    assignees: tuple[str, ...]
    created: date
    estimated: date | None
    activated: date | None
    completed: date | None
    start: date
    end: date
    cells: tuple[str, ...]

    def to_cells(self, status_labels: Mapping[ActivityStatus, str]) -> list[str]:
        return [
            self.name,
            status_labels.get(self.status, self.status.value),
            ", ".join(self.assignees) or MISSING_VALUE,
            _format_date(self.created),
            _format_date(self.estimated),
            _format_date(self.activated),
            _format_date(self.completed),
            *self.cells,
        ]


@dataclass(frozen=True)
class GanttMatrix:
    """Legend, header and one row per activity over a dense day range."""

    days: tuple[date, ...]
    rows: tuple[GanttRow, ...]

    @property
    def legend(self) -> list[str]:
        return list(LEGEND)

    @property
    def header(self) -> list[str]:
        return [*FIXED_HEADERS, *(f"{day.month}/{day.day}" for day in self.days)]

    def to_table(
        self, status_labels: Mapping[ActivityStatus, str] | None = None
    ) -> list[list[str]]:
        """Return the legend row, the header row and the data rows."""

        labels = ACTIVITY_STATUS_LABELS if status_labels is None else status_labels
        return [self.legend, self.header, *(row.to_cells(labels) for row in self.rows)]


def project_gantt(activities: Iterable[Activity], *, today: date) -> GanttMatrix:
    """Project ``activities`` onto a padded, inclusive range of calendar days.

    The range spans every creation, estimated and completion date, plus the end
    of each occupancy interval, widened by :data:`PADDING_DAYS` on both sides.
    ``today`` closes the interval of activities that have neither a completion
    nor an estimated date. An empty input yields a matrix without days or rows.
    An activity without ``created_at`` raises :class:`InvariantViolation`.
    """

    items = list(activities)
    if not items:
        return GanttMatrix(days=(), rows=())

    spans = [_activity_span(activity, today) for activity in items]
    anchor_dates: list[date] = []
    for activity, (start, end) in zip(items, spans):
        # The interval end covers the "today" fallback of open activities.
        anchor_dates.extend((start, end))
        estimated = as_calendar_date(activity.estimated_completion_date)
        completed = as_calendar_date(activity.completed_at)
        if estimated is not None:
            anchor_dates.append(estimated)
        if completed is not None:
            anchor_dates.append(completed)

    first_day = min(anchor_dates) - timedelta(days=PADDING_DAYS)
    last_day = max(anchor_dates) + timedelta(days=PADDING_DAYS)
    days = tuple(
        first_day + timedelta(days=offset)
        for offset in range((last_day - first_day).days + 1)
    )

    rows = tuple(
        _build_row(activity, start, end, days)
        for activity, (start, end) in zip(items, spans)
    )
    return GanttMatrix(days=days, rows=rows)


def _activity_span(activity: Activity, today: date) -> tuple[date, date]:
    start = as_calendar_date(activity.created_at)
    if start is None:
        raise InvariantViolation(f"La actividad {activity.id} no tiene fecha de creación")
    end = (
        as_calendar_date(activity.completed_at)
        or as_calendar_date(activity.estimated_completion_date)
        or today
    )
    return start, end


def _build_row(
    activity: Activity, start: date, end: date, days: tuple[date, ...]
) -> GanttRow:
    marker = MARKERS[activity.status]
    cells = tuple(marker if start <= day <= end else EMPTY_CELL for day in days)
    return GanttRow(
        activity_id=activity.id,
        name=activity.name,
        status=activity.status,
        assignees=tuple(activity.assignee_names),
        created=start,
        estimated=as_calendar_date(activity.estimated_completion_date),
        activated=as_calendar_date(activity.activated_at),
        completed=as_calendar_date(activity.completed_at),
        start=start,
        end=end,
        cells=cells,
    )


def _format_date(value: date | None) -> str:
    return value.isoformat() if value is not None else MISSING_VALUE


__all__ = [
    "EMPTY_CELL",
    "FIXED_HEADERS",
    "GanttMatrix",
    "GanttRow",
    "LEGEND",
    "MARKERS",
    "PADDING_DAYS",
    "project_gantt",
]

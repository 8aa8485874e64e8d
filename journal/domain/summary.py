"""Aggregation of events into period summaries."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable
from datetime import date, datetime
from typing import Any, Final

from journal.domain.entities import Event, Summary, SummaryType
from journal.domain.errors import InvalidRange
from journal.utils.datetime import as_calendar_date
from journal.utils.labels import summary_type_label

UNTYPED_EVENT: Final[str] = "sin tipo"
NO_PROJECT: Final[str] = "Sin proyecto"


def ensure_valid_range(start_date: date, end_date: date) -> None:
    if start_date > end_date:
        raise InvalidRange(
            f"La fecha inicial {start_date.isoformat()} es posterior a la fecha final "
            f"{end_date.isoformat()}"
        )


def build_summary(
    summary_type: SummaryType,
    start_date: date,
    end_date: date,
    events: Iterable[Event],
    *,
    created_at: datetime | None = None,
    is_auto_generated: bool = False,
) -> Summary:
    """Aggregate ``events`` falling inside ``[start_date, end_date]``.

    Events outside the range are ignored, so callers may hand over a wider
    snapshot. The rendered content only depends on the events, which makes two
    generations over the same data produce identical text.
    """

    ensure_valid_range(start_date, end_date)
    selected = sorted(
        (
            event
            for event in events
            if start_date <= as_calendar_date(event.event_date) <= end_date
        ),
        key=lambda event: (event.event_date, event.id or 0),
    )

    statistics = compute_statistics(selected)
    label = summary_type_label(summary_type)
    title = (
        f"Resumen {label} del {start_date.isoformat()} al {end_date.isoformat()}"
    )
    return Summary(
        id=None,
        title=title,
        summary_type=summary_type,
        start_date=start_date,
        end_date=end_date,
        content=render_content(title, selected, statistics),
        statistics=statistics,
        is_auto_generated=is_auto_generated,
        created_at=created_at,
    )


def compute_statistics(events: Iterable[Event]) -> dict[str, Any]:
    """Return event counts overall, per type, and distinct projects/contacts."""

    items = list(events)
    by_type = Counter(event.event_type or UNTYPED_EVENT for event in items)
    projects = {event.project_id for event in items if event.project_id is not None}
    contacts = {
        contact.id if contact.id is not None else contact.name
        for event in items
        for contact in event.contacts
    }
    return {
        "total_events": len(items),
        "events_by_type": dict(sorted(by_type.items())),
        "projects_touched": len(projects),
        "contacts_touched": len(contacts),
    }


def render_content(title: str, events: list[Event], statistics: dict[str, Any]) -> str:
    lines = [f"# {title}", ""]

    if not events:
        lines.append("No se registraron eventos en este periodo.")
    else:
        lines.extend(["## Eventos por día", ""])
        by_day: dict[date, list[Event]] = defaultdict(list)
        for event in events:
            by_day[as_calendar_date(event.event_date)].append(event)
        for day in sorted(by_day):
            lines.append(f"### {day.isoformat()}")
            lines.extend(_render_event(event) for event in by_day[day])
            lines.append("")

        lines.extend(["## Eventos por proyecto", ""])
        by_project = Counter(event.project_name or NO_PROJECT for event in events)
        for project_name, count in sorted(by_project.items()):
            lines.append(f"- {project_name}: {count}")

    lines.extend(
        [
            "",
            "## Estadísticas",
            "",
            f"- Total de eventos: {statistics['total_events']}",
            f"- Proyectos involucrados: {statistics['projects_touched']}",
            f"- Contactos involucrados: {statistics['contacts_touched']}",
        ]
    )
    if statistics["events_by_type"]:
        lines.append("- Eventos por tipo:")
        for event_type, count in statistics["events_by_type"].items():
            lines.append(f"  - {event_type}: {count}")
    return "\n".join(lines) + "\n"


def _render_event(event: Event) -> str:
    details: list[str] = []
    if event.project_name:
        details.append(f"Proyecto: {event.project_name}")
    if event.contacts:
        names = ", ".join(sorted(contact.name for contact in event.contacts))
        details.append(f"Contactos: {names}")
    tag = f"[{event.event_type}] " if event.event_type else ""
    suffix = f" ({'; '.join(details)})" if details else ""
    return f"- {event.event_date:%H:%M} {tag}{event.title}{suffix}"


__all__ = [
    "NO_PROJECT",
    "UNTYPED_EVENT",
    "build_summary",
    "compute_statistics",
    "ensure_valid_range",
    "render_content",
]

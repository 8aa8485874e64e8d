from datetime import date, datetime

import pytest

from journal.application.use_cases.summaries import default_summary_range
from journal.domain.entities import Contact, Event, SummaryType
from journal.domain.errors import InvalidRange
from journal.domain.summary import UNTYPED_EVENT, build_summary

ANA = Contact(id=1, name="Ana")
LUIS = Contact(id=2, name="Luis")


def _events() -> list[Event]:
    return [
        Event(
            id=1,
            title="Reunión de arranque",
            event_date=datetime(2024, 1, 2, 10, 0),
            event_type="reunión",
            project_id=7,
            project_name="Portal",
            contacts=[ANA, LUIS],
        ),
        Event(
            id=2,
            title="Llamada de seguimiento",
            event_date=datetime(2024, 1, 3, 15, 30),
            event_type="llamada",
            project_id=7,
            project_name="Portal",
            contacts=[ANA],
        ),
        Event(
            id=3,
            title="Nota suelta",
            event_date=datetime(2024, 1, 3, 9, 0),
        ),
        Event(
            id=4,
            title="Fuera de rango",
            event_date=datetime(2024, 1, 9, 9, 0),
            event_type="reunión",
            project_id=8,
            project_name="Otro",
        ),
    ]


def test_start_after_end_is_rejected():
    with pytest.raises(InvalidRange):
        build_summary(SummaryType.CUSTOM, date(2024, 2, 1), date(2024, 1, 1), [])


def test_statistics_count_events_types_projects_and_contacts():
    summary = build_summary(SummaryType.WEEKLY, date(2024, 1, 1), date(2024, 1, 7), _events())

    assert summary.statistics == {
        "total_events": 3,
        "events_by_type": {"llamada": 1, "reunión": 1, UNTYPED_EVENT: 1},
        "projects_touched": 1,
        "contacts_touched": 2,
    }
    assert summary.is_auto_generated is False
    assert summary.id is None


def test_content_groups_events_by_day_and_project():
    summary = build_summary(SummaryType.WEEKLY, date(2024, 1, 1), date(2024, 1, 7), _events())

    content = summary.content
    assert content.index("### 2024-01-02") < content.index("### 2024-01-03")
    assert "- 10:00 [reunión] Reunión de arranque (Proyecto: Portal; Contactos: Ana, Luis)" in content
    assert "- 09:00 Nota suelta" in content
    assert "- Portal: 2" in content
    assert "- Sin proyecto: 1" in content
    assert "Fuera de rango" not in content
    assert content.index("Nota suelta") < content.index("Llamada de seguimiento")


def test_same_input_renders_identical_reports():
    first = build_summary(SummaryType.DAILY, date(2024, 1, 3), date(2024, 1, 3), _events(), created_at=datetime(2024, 1, 4, 8))
    second = build_summary(SummaryType.DAILY, date(2024, 1, 3), date(2024, 1, 3), list(reversed(_events())), created_at=datetime(2024, 1, 4, 9))

    assert first.content == second.content
    assert first.statistics == second.statistics
    assert first.title == "Resumen diario del 2024-01-03 al 2024-01-03"


def test_empty_period_is_reported():
    summary = build_summary(SummaryType.MONTHLY, date(2023, 12, 1), date(2023, 12, 31), _events())

    assert "No se registraron eventos en este periodo." in summary.content
    assert summary.statistics["total_events"] == 0
    assert summary.statistics["events_by_type"] == {}


@pytest.mark.parametrize(
    ("summary_type", "today", "expected"),
    [
        (SummaryType.DAILY, date(2024, 3, 1), (date(2024, 2, 29), date(2024, 2, 29))),
        (SummaryType.WEEKLY, date(2024, 3, 4), (date(2024, 2, 26), date(2024, 3, 3))),
        (SummaryType.MONTHLY, date(2024, 3, 15), (date(2024, 2, 1), date(2024, 2, 29))),
        (SummaryType.MONTHLY, date(2024, 1, 1), (date(2023, 12, 1), date(2023, 12, 31))),
        (SummaryType.YEARLY, date(2024, 6, 30), (date(2023, 1, 1), date(2023, 12, 31))),
    ],
)
def test_default_ranges(summary_type, today, expected):
    assert default_summary_range(summary_type, today) == expected


def test_custom_summaries_have_no_default_range():
    with pytest.raises(ValueError):
        default_summary_range(SummaryType.CUSTOM, date(2024, 3, 1))

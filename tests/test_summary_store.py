from datetime import date, datetime

import pytest

from journal.application.use_cases.contacts import create_contact
from journal.application.use_cases.events import create_event, list_events
from journal.application.use_cases.projects import create_project
from journal.application.use_cases.summaries import (
    delete_summary,
    generate_summary,
    get_summary,
    list_summaries,
)
from journal.domain.entities import SummaryType
from journal.domain.errors import InvalidRange, NotFound


@pytest.fixture()
def events(session):
    project = create_project(session, name="Portal")
    ana = create_contact(session, name="Ana")
    return [
        create_event(
            session,
            title="Reunión de arranque",
            event_date=datetime(2024, 1, 1, 0, 0),
            event_type="reunión",
            project_id=project.id,
            contact_ids=[ana.id],
        ),
        create_event(
            session,
            title="Cierre del día",
            event_date=datetime(2024, 1, 7, 23, 30),
            event_type="nota",
        ),
        create_event(
            session,
            title="Semana siguiente",
            event_date=datetime(2024, 1, 8, 0, 0),
        ),
    ]


def test_events_are_read_by_inclusive_day_range(session, events):
    found = list_events(session, start_date=date(2024, 1, 1), end_date=date(2024, 1, 7))

    assert [event.title for event in found] == ["Reunión de arranque", "Cierre del día"]
    assert found[0].project_name == "Portal"
    assert [contact.name for contact in found[0].contacts] == ["Ana"]


def test_generating_twice_creates_two_equal_reports(session, events):
    first = generate_summary(
        session,
        summary_type=SummaryType.WEEKLY,
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 7),
        now=datetime(2024, 1, 8, 9, 0),
    )
    second = generate_summary(
        session,
        summary_type=SummaryType.WEEKLY,
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 7),
        now=datetime(2024, 1, 8, 9, 5),
    )

    assert first.id != second.id
    assert first.created_at != second.created_at
    assert first.content == second.content
    assert first.statistics == second.statistics
    assert first.statistics["total_events"] == 2
    assert first.statistics["projects_touched"] == 1
    assert first.is_auto_generated is False
    assert [summary.id for summary in list_summaries(session)] == [second.id, first.id]


def test_inverted_range_is_rejected(session):
    with pytest.raises(InvalidRange):
        generate_summary(
            session,
            summary_type=SummaryType.CUSTOM,
            start_date=date(2024, 2, 1),
            end_date=date(2024, 1, 1),
        )
    assert list_summaries(session) == []


def test_summaries_can_be_read_filtered_and_deleted(session, events):
    daily = generate_summary(
        session,
        summary_type=SummaryType.DAILY,
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 1),
    )
    generate_summary(
        session,
        summary_type=SummaryType.CUSTOM,
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
    )

    assert get_summary(session, daily.id).content == daily.content
    assert [s.id for s in list_summaries(session, summary_type=SummaryType.DAILY)] == [daily.id]

    delete_summary(session, daily.id)

    with pytest.raises(NotFound):
        get_summary(session, daily.id)
    with pytest.raises(NotFound):
        delete_summary(session, daily.id)
    assert len(list_summaries(session)) == 1

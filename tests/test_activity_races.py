"""Two writers racing on the same activity through the use cases.

Each test lets a second session change the activity right after the first
one has read it, so the first write runs against a stale status.
"""

import importlib
import logging

import pytest
from sqlalchemy import func, select

from journal.application.use_cases.activities import (
    activate_activity,
    assign_contacts,
    complete_activity,
    create_activity,
    delete_activity,
    get_activity,
    pause_activity,
    update_activity,
)
from journal.application.use_cases.contacts import create_contact
from journal.application.use_cases.projects import create_project
from journal.domain.entities import ActivityStatus
from journal.domain.errors import Conflict, NotFound
from journal.infrastructure.models import activity_contact_table

_ACTIVITIES = "journal.application.use_cases.activities."


def _interleave(monkeypatch, module_name, concurrent_write):
    """Run ``concurrent_write(activity_id)`` right after ``module_name`` reads the activity."""

    module = importlib.import_module(_ACTIVITIES + module_name)
    read_activity = module.get_activity
    pending = [concurrent_write]

    def read_then_race(session, activity_id):
        snapshot = read_activity(session, activity_id)
        if pending:
            pending.pop()(activity_id)
        return snapshot

    monkeypatch.setattr(module, "get_activity", read_then_race)


@pytest.fixture()
def other(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def contacts(session):
    return [create_contact(session, name=name) for name in ("Ana", "Luis")]


@pytest.fixture()
def running(session, contacts, clock):
    project = create_project(session, name="Portal")
    activity = create_activity(
        session, project_id=project.id, name="Entrega", contact_ids=[contacts[0].id]
    )
    return activate_activity(session, activity.id, now=clock())


def _link_count(session, activity_id):
    return session.execute(
        select(func.count())
        .select_from(activity_contact_table)
        .where(activity_contact_table.c.activity_id == activity_id)
    ).scalar_one()


def test_delete_loses_against_concurrent_completion(
    monkeypatch, session, other, running, clock
):
    _interleave(
        monkeypatch,
        "delete_activity",
        lambda activity_id: complete_activity(other, activity_id, now=clock()),
    )

    with pytest.raises(Conflict):
        delete_activity(session, running.id)

    stored = get_activity(other, running.id)
    assert stored.status is ActivityStatus.COMPLETED
    assert _link_count(other, running.id) == 1


def test_completion_loses_against_concurrent_pause(
    monkeypatch, session, other, running, clock, caplog
):
    _interleave(
        monkeypatch,
        "transitions",
        lambda activity_id: pause_activity(other, activity_id, now=clock()),
    )

    with caplog.at_level(logging.WARNING):
        with pytest.raises(Conflict):
            complete_activity(session, running.id, now=clock())

    stored = get_activity(other, running.id)
    assert stored.status is ActivityStatus.PAUSED
    assert stored.completed_at is None
    assert "Concurrent change detected" in caplog.text


def test_edit_loses_against_concurrent_completion(
    monkeypatch, session, other, running, clock
):
    _interleave(
        monkeypatch,
        "update_activity",
        lambda activity_id: complete_activity(other, activity_id, now=clock()),
    )

    with pytest.raises(Conflict):
        update_activity(session, activity_id=running.id, name="Renombrada")

    assert get_activity(other, running.id).name == "Entrega"


def test_assignment_loses_against_concurrent_assignment(
    monkeypatch, session, other, contacts
):
    project = create_project(session, name="Portal")
    activity = create_activity(session, project_id=project.id, name="Revisión")
    _interleave(
        monkeypatch,
        "assignees",
        lambda activity_id: assign_contacts(
            other, activity_id=activity_id, contact_ids=[contacts[1].id]
        ),
    )

    with pytest.raises(Conflict):
        assign_contacts(session, activity_id=activity.id, contact_ids=[contacts[0].id])

    stored = get_activity(other, activity.id)
    assert stored.status is ActivityStatus.INACTIVE
    assert [contact.name for contact in stored.assignees] == ["Luis"]


def test_edit_of_concurrently_deleted_activity_reports_not_found(
    monkeypatch, session, other, running
):
    _interleave(
        monkeypatch,
        "update_activity",
        lambda activity_id: delete_activity(other, activity_id),
    )

    with pytest.raises(NotFound):
        update_activity(session, activity_id=running.id, name="Renombrada")

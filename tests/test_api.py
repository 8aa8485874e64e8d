"""Integration tests for the HTTP API."""

from __future__ import annotations

import importlib
from datetime import datetime

import pytest
from sqlalchemy import update

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from journal.config import reset_settings_cache
from journal.infrastructure.database import get_db
from journal.infrastructure.models import ActivityModel
from journal.main import create_app


@pytest.fixture()
def client(session_factory):
    """Return a test client whose requests use the throwaway database."""

    def _override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app = create_app()
    app.dependency_overrides[get_db] = _override_get_db
    return TestClient(app)


def _create_project_with_activity(client: TestClient, **activity_fields):
    project = client.post("/projects/", json={"name": "Portal"}).json()
    response = client.post(
        f"/projects/{project['id']}/activities",
        json={"name": "Diseño", **activity_fields},
    )
    assert response.status_code == 201
    return project, response.json()


def test_activity_flow(client: TestClient) -> None:
    contact = client.post("/contacts/", json={"name": "Ana"}).json()
    project, activity = _create_project_with_activity(client)
    assert activity["status"] == "pending"
    assert activity["status_label"] == "Pendiente de asignar"

    assigned = client.post(
        f"/activities/{activity['id']}/assignees", json={"contact_ids": [contact["id"]]}
    )
    assert assigned.status_code == 200
    assert assigned.json()["status"] == "inactive"

    activated = client.post(f"/activities/{activity['id']}/activate").json()
    assert activated["status"] == "in_progress"
    assert activated["activated_at"] is not None

    completed = client.post(f"/activities/{activity['id']}/complete").json()
    assert completed["status"] == "completed"

    listed = client.get(f"/projects/{project['id']}/activities").json()
    assert [item["status"] for item in listed] == ["completed"]
    assert listed[0]["assignees"][0]["name"] == "Ana"


def test_illegal_transition_is_tagged(client: TestClient) -> None:
    _, activity = _create_project_with_activity(client)

    response = client.post(f"/activities/{activity['id']}/activate")

    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "invalid_transition"
    assert client.get(f"/activities/{activity['id']}").json()["status"] == "pending"


def test_missing_resources_return_404(client: TestClient) -> None:
    assert client.get("/projects/999").status_code == 404
    assert client.post("/activities/999/pause").json()["detail"]["code"] == "not_found"
    assert client.delete("/summaries/999").status_code == 404


def test_patch_rejects_unknown_fields(client: TestClient) -> None:
    _, activity = _create_project_with_activity(client)

    response = client.patch(f"/activities/{activity['id']}", json={"status": "completed"})

    assert response.status_code == 422


def test_gantt_table_and_export(client: TestClient, tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("EXPORT_DIRECTORY", str(tmp_path))
    reset_settings_cache()
    project, _ = _create_project_with_activity(client)

    gantt = client.get(f"/projects/{project['id']}/gantt").json()
    assert gantt["legend"][0] == "Leyenda:"
    assert gantt["header"][:2] == ["Actividad", "Estado"]
    assert len(gantt["header"]) == 7 + len(gantt["days"])
    assert gantt["rows"][0][:2] == ["Diseño", "Pendiente de asignar"]

    try:
        exported = client.get(f"/projects/{project['id']}/gantt/export")
    finally:
        reset_settings_cache()
    assert exported.status_code == 200
    assert exported.content[:2] == b"PK"
    assert [path.name for path in tmp_path.iterdir()][0].startswith("Portal_gantt_")


def test_export_without_activities_is_rejected(client: TestClient) -> None:
    project = client.post("/projects/", json={"name": "Vacío"}).json()

    response = client.get(f"/projects/{project['id']}/gantt/export")

    assert response.status_code == 400


def test_summary_endpoints(client: TestClient) -> None:
    client.post(
        "/events/",
        json={"title": "Reunión", "event_date": "2024-01-02T10:00:00", "event_type": "reunión"},
    )

    invalid = client.post(
        "/summaries/",
        json={"summary_type": "custom", "start_date": "2024-02-01", "end_date": "2024-01-01"},
    )
    assert invalid.status_code == 422
    assert invalid.json()["detail"]["code"] == "invalid_range"

    created = client.post(
        "/summaries/",
        json={"summary_type": "weekly", "start_date": "2024-01-01", "end_date": "2024-01-07"},
    )
    assert created.status_code == 201
    summary = created.json()
    assert summary["statistics"]["total_events"] == 1
    assert summary["is_auto_generated"] is False

    assert client.get(f"/summaries/{summary['id']}").json()["content"] == summary["content"]
    assert client.get("/summaries/default-range", params={"summary_type": "daily"}).status_code == 200
    assert client.get("/summaries/default-range", params={"summary_type": "custom"}).status_code == 400
    assert client.delete(f"/summaries/{summary['id']}").status_code == 204
    assert client.get("/summaries/").json() == []


def test_concurrent_change_is_reported_as_conflict(
    client: TestClient, session_factory, monkeypatch
) -> None:
    contact = client.post("/contacts/", json={"name": "Ana"}).json()
    _, activity = _create_project_with_activity(client, contact_ids=[contact["id"]])
    client.post(f"/activities/{activity['id']}/activate")

    transitions = importlib.import_module("journal.application.use_cases.activities.transitions")
    read_activity = transitions.get_activity

    def read_then_pause_elsewhere(session, activity_id):
        snapshot = read_activity(session, activity_id)
        other = session_factory()
        try:
            other.execute(
                update(ActivityModel)
                .where(ActivityModel.id == activity_id)
                .values(status="paused", paused_at=datetime(2024, 1, 10, 9, 30))
            )
            other.commit()
        finally:
            other.close()
        return snapshot

    monkeypatch.setattr(transitions, "get_activity", read_then_pause_elsewhere)

    response = client.post(f"/activities/{activity['id']}/complete")

    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "conflict"
    assert client.get(f"/activities/{activity['id']}").json()["status"] == "paused"

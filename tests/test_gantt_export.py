from datetime import date, datetime

import pytest
from openpyxl import load_workbook

from journal.application.use_cases.activities import create_activity, export_project_gantt
from journal.application.use_cases.projects import create_project
from journal.domain.entities import Activity, ActivityStatus
from journal.domain.gantt import LEGEND, project_gantt
from journal.infrastructure.gantt_files import (
    GANTT_SHEET_TITLE,
    build_gantt_filename,
    write_gantt_workbook,
)


def test_filename_uses_project_name_and_iso_date():
    assert build_gantt_filename("Portal clientes/2024", date(2024, 1, 15)) == (
        "Portal_clientes_2024_gantt_2024-01-15.xlsx"
    )
    assert build_gantt_filename("  ", date(2024, 1, 15)) == "proyecto_gantt_2024-01-15.xlsx"


def test_workbook_layout(tmp_path):
    activity = Activity(
        id=1,
        project_id=1,
        name="Diseño",
        description=None,
        estimated_completion_date=None,
        status=ActivityStatus.INACTIVE,
        created_at=datetime(2024, 1, 10, 9, 0),
    )
    matrix = project_gantt([activity], today=date(2024, 1, 12))

    path = write_gantt_workbook(matrix, tmp_path / "out" / "gantt.xlsx")

    worksheet = load_workbook(path).active
    rows = [list(row) for row in worksheet.iter_rows(values_only=True)]
    assert worksheet.title == GANTT_SHEET_TITLE
    assert rows[0][: len(LEGEND)] == list(LEGEND)
    assert all(value is None for value in rows[1])
    assert rows[2][:2] == ["Actividad", "Estado"]
    assert rows[3][:3] == ["Diseño", "Sin activar", "-"]
    assert rows[3].count("■") == 3
    assert len(rows) == 4


def test_export_use_case_writes_into_directory(session, tmp_path):
    project = create_project(session, name="Portal")
    create_activity(session, project_id=project.id, name="Diseño")

    path = export_project_gantt(
        session, project.id, today=date(2024, 1, 15), directory=tmp_path
    )

    assert path == tmp_path / "Portal_gantt_2024-01-15.xlsx"
    assert path.exists()


def test_export_rejects_project_without_activities(session, tmp_path):
    project = create_project(session, name="Vacío")

    with pytest.raises(ValueError):
        export_project_gantt(session, project.id, directory=tmp_path)

    assert list(tmp_path.iterdir()) == []

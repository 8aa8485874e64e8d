"""Use cases projecting a project's activities onto a Gantt grid."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from sqlalchemy.orm import Session

from journal.config import get_settings
from journal.domain.gantt import GanttMatrix, project_gantt
from journal.infrastructure.gantt_files import build_gantt_filename, write_gantt_workbook
from journal.utils import today_in_app_timezone
from journal.utils.labels import ACTIVITY_STATUS_LABELS
from ..projects import get_project
from .list_activities import list_activities

logger = logging.getLogger(__name__)


def build_project_gantt(
    session: Session, project_id: int, *, today: date | None = None
) -> GanttMatrix:
    """Return the Gantt matrix of every activity in the project."""

    activities = list_activities(session, project_id)
    return project_gantt(activities, today=today or today_in_app_timezone())


def export_project_gantt(
    session: Session,
    project_id: int,
    *,
    today: date | None = None,
    directory: Path | None = None,
) -> Path:
    """Write the project's Gantt workbook and return its path.

    Projects without activities are rejected; there is nothing to chart.
    """

    project = get_project(session, project_id)
    run_date = today or today_in_app_timezone()
    matrix = build_project_gantt(session, project_id, today=run_date)
    if not matrix.rows:
        raise ValueError("El proyecto no tiene actividades para exportar")

    target_directory = directory if directory is not None else get_settings().export_directory
    destination = target_directory / build_gantt_filename(project.name, run_date)
    logger.info("Exporting Gantt chart of project %s to %s", project_id, destination)
    return write_gantt_workbook(matrix, destination, status_labels=ACTIVITY_STATUS_LABELS)

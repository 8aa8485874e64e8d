"""Use cases for managing projects."""

from __future__ import annotations

from sqlalchemy.orm import Session

from journal.domain.entities import Project
from journal.domain.errors import NotFound
from journal.infrastructure.repositories import ProjectRepository


def create_project(session: Session, *, name: str, description: str | None = None) -> Project:
    """Create a new project."""

    normalized_name = name.strip()
    if not normalized_name:
        raise ValueError("El nombre del proyecto no puede estar vacío")
    return ProjectRepository(session).create(
        Project(id=None, name=normalized_name, description=description)
    )


def get_project(session: Session, project_id: int) -> Project:
    """Return the project identified by ``project_id`` or raise an error."""

    project = ProjectRepository(session).get(project_id)
    if project is None:
        raise NotFound("Proyecto no encontrado")
    return project


__all__ = ["create_project", "get_project"]

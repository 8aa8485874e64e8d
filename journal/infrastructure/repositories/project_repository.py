"""Persistence helpers for project entities."""

from __future__ import annotations

from sqlalchemy.orm import Session

from journal.domain.entities import Project
from journal.infrastructure.models import ProjectModel


class ProjectRepository:
    """Provide CRUD operations for :class:`Project` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, project_id: int) -> Project | None:
        model = self.session.get(ProjectModel, project_id)
        return self._to_entity(model) if model else None

    def create(self, project: Project) -> Project:
        model = ProjectModel(name=project.name, description=project.description)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ProjectModel) -> Project:
        return Project(
            id=model.id,
            name=model.name,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["ProjectRepository"]

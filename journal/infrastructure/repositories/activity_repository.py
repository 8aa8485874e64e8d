"""Persistence layer for project activities and their assignees."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Sequence

from sqlalchemy import delete, insert
from sqlalchemy.orm import Session

from journal.domain.entities import Activity, ActivityStatus
from journal.domain.errors import Conflict, InvariantViolation, NotFound
from journal.infrastructure.models import ActivityModel, ContactModel, activity_contact_table
from journal.infrastructure.repositories.contact_repository import ContactRepository
from journal.utils import ensure_naive_datetime, now_in_app_naive_datetime

_TIMESTAMP_COLUMNS = {
    "activated_at": ActivityModel.activated_at,
    "paused_at": ActivityModel.paused_at,
    "completed_at": ActivityModel.completed_at,
}


class ActivityRepository:
    """Provide CRUD-style operations for :class:`Activity` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_project(self, project_id: int) -> Sequence[Activity]:
        query = (
            self.session.query(ActivityModel)
            .filter(ActivityModel.project_id == project_id)
            .order_by(ActivityModel.created_at.asc(), ActivityModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, activity_id: int) -> Activity | None:
        model = self.session.get(ActivityModel, activity_id)
        return self._to_entity(model) if model else None

    def create(self, activity: Activity, *, contact_ids: Iterable[int] = ()) -> Activity:
        model = ActivityModel(
            project_id=activity.project_id,
            name=activity.name,
            description=activity.description,
            estimated_completion_date=activity.estimated_completion_date,
            status=activity.status.value,
            activated_at=ensure_naive_datetime(activity.activated_at),
            paused_at=ensure_naive_datetime(activity.paused_at),
            completed_at=ensure_naive_datetime(activity.completed_at),
        )
        if activity.created_at is not None:
            model.created_at = ensure_naive_datetime(activity.created_at)
            model.updated_at = model.created_at
        model.assignees = self._load_contacts(contact_ids)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_details(
        self,
        activity_id: int,
        *,
        expected_status: ActivityStatus,
        name: str,
        description: str | None,
        estimated_completion_date: date | None,
    ) -> Activity:
        """Edit the descriptive fields only if the activity still holds ``expected_status``."""

        self._guarded_update(
            activity_id,
            expected_status,
            {
                ActivityModel.name: name,
                ActivityModel.description: description,
                ActivityModel.estimated_completion_date: estimated_completion_date,
                ActivityModel.updated_at: now_in_app_naive_datetime(),
            },
        )
        self.session.commit()
        return self._get_fresh(activity_id)

    def assign_contacts(
        self,
        activity_id: int,
        contact_ids: Iterable[int],
        *,
        expected_status: ActivityStatus,
        new_status: ActivityStatus | None = None,
    ) -> Activity:
        """Link contacts to the activity, ignoring ones already linked.

        The links are only written if the row still holds ``expected_status``;
        ``new_status`` is applied in the same transaction.
        """

        model = self._require(activity_id)
        existing = {contact.id for contact in model.assignees}
        new_ids = [contact_id for contact_id in dict.fromkeys(contact_ids) if contact_id not in existing]
        contacts = self._load_contacts(new_ids)
        now = now_in_app_naive_datetime()
        self._guarded_update(
            activity_id,
            expected_status,
            {
                ActivityModel.status: (new_status or expected_status).value,
                ActivityModel.updated_at: now,
            },
        )
        if contacts:
            self.session.execute(
                insert(activity_contact_table),
                [
                    {"activity_id": activity_id, "contact_id": contact.id, "assigned_at": now}
                    for contact in contacts
                ],
            )
        self.session.commit()
        return self._get_fresh(activity_id)

    def unassign_contact(
        self, activity_id: int, contact_id: int, *, expected_status: ActivityStatus
    ) -> Activity:
        self._guarded_update(
            activity_id,
            expected_status,
            {ActivityModel.updated_at: now_in_app_naive_datetime()},
        )
        result = self.session.execute(
            activity_contact_table.delete().where(
                activity_contact_table.c.activity_id == activity_id,
                activity_contact_table.c.contact_id == contact_id,
            )
        )
        if result.rowcount == 0:
            self.session.rollback()
            raise NotFound("El contacto no está asignado a la actividad")
        self.session.commit()
        return self._get_fresh(activity_id)

    def update_status(
        self,
        activity_id: int,
        *,
        expected_status: ActivityStatus,
        new_status: ActivityStatus,
        timestamp_field: str | None,
        timestamp: datetime | None,
    ) -> Activity:
        """Move the activity to ``new_status`` only if it still holds ``expected_status``.

        Raises :class:`Conflict` when another writer changed the status first and
        :class:`NotFound` when the activity no longer exists.
        """

        values: dict = {
            ActivityModel.status: new_status.value,
            ActivityModel.updated_at: now_in_app_naive_datetime(),
        }
        if timestamp_field is not None:
            column = _TIMESTAMP_COLUMNS.get(timestamp_field)
            if column is None:
                raise ValueError(f"Campo de marca de tiempo desconocido: {timestamp_field}")
            values[column] = ensure_naive_datetime(timestamp)

        self._guarded_update(activity_id, expected_status, values)
        self.session.commit()
        return self._get_fresh(activity_id)

    def delete(self, activity_id: int, *, expected_status: ActivityStatus) -> None:
        """Delete the activity and its assignee links if it still holds ``expected_status``."""

        self.session.execute(
            activity_contact_table.delete().where(
                activity_contact_table.c.activity_id == activity_id
            )
        )
        result = self.session.execute(
            delete(ActivityModel)
            .where(
                ActivityModel.id == activity_id,
                ActivityModel.status == expected_status.value,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            self._raise_stale(activity_id)
        self.session.commit()
        self.session.expire_all()

    def _guarded_update(
        self, activity_id: int, expected_status: ActivityStatus, values: dict
    ) -> None:
        updated = (
            self.session.query(ActivityModel)
            .filter(
                ActivityModel.id == activity_id,
                ActivityModel.status == expected_status.value,
            )
            .update(values, synchronize_session=False)
        )
        if updated == 0:
            self._raise_stale(activity_id)

    def _raise_stale(self, activity_id: int) -> None:
        self.session.rollback()
        if self.session.get(ActivityModel, activity_id) is None:
            raise NotFound("Actividad no encontrada")
        raise Conflict(
            "La actividad fue modificada por otra operación; actualiza la lista e inténtalo de nuevo"
        )

    def _require(self, activity_id: int) -> ActivityModel:
        model = self.session.get(ActivityModel, activity_id)
        if model is None:
            raise NotFound("Actividad no encontrada")
        return model

    def _get_fresh(self, activity_id: int) -> Activity:
        self.session.expire_all()
        activity = self.get(activity_id)
        if activity is None:
            raise NotFound("Actividad no encontrada")
        return activity

    def _load_contacts(self, contact_ids: Iterable[int]) -> list[ContactModel]:
        ids = list(dict.fromkeys(contact_ids))
        if not ids:
            return []
        models = self.session.query(ContactModel).filter(ContactModel.id.in_(ids)).all()
        found = {model.id for model in models}
        missing = [contact_id for contact_id in ids if contact_id not in found]
        if missing:
            raise NotFound(
                f"Contactos no encontrados: {', '.join(str(contact_id) for contact_id in missing)}"
            )
        return models

    @staticmethod
    def _to_entity(model: ActivityModel) -> Activity:
        try:
            status = ActivityStatus(model.status)
        except ValueError as exc:
            raise InvariantViolation(
                f"La actividad {model.id} tiene un estado desconocido: {model.status!r}"
            ) from exc
        return Activity(
            id=model.id,
            project_id=model.project_id,
            name=model.name,
            description=model.description,
            estimated_completion_date=model.estimated_completion_date,
            status=status,
            activated_at=model.activated_at,
            paused_at=model.paused_at,
            completed_at=model.completed_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
            assignees=[ContactRepository._to_entity(contact) for contact in model.assignees],
        )


__all__ = ["ActivityRepository"]

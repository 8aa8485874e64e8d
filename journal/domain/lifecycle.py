"""Activity lifecycle state machine.

Every function here is pure: it receives an activity snapshot and the current
time and returns a new :class:`Activity` value. Persisting the result safely is
the store's job (see ``ActivityRepository.update_status``).
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Final

from journal.domain.entities import Activity, ActivityStatus
from journal.domain.errors import InvalidTransition, InvariantViolation

TIMESTAMP_FIELDS: Final[dict[ActivityStatus, str]] = {
    ActivityStatus.IN_PROGRESS: "activated_at",
    ActivityStatus.PAUSED: "paused_at",
    ActivityStatus.COMPLETED: "completed_at",
}

_ACTIVATABLE: Final[frozenset[ActivityStatus]] = frozenset(
    {ActivityStatus.INACTIVE, ActivityStatus.PAUSED}
)
_UNASSIGNED_STATES: Final[frozenset[ActivityStatus]] = frozenset(
    {ActivityStatus.PENDING, ActivityStatus.INACTIVE}
)


def initial_status(assignee_count: int) -> ActivityStatus:
    """Return the status of a new activity with ``assignee_count`` contacts."""

    return ActivityStatus.INACTIVE if assignee_count > 0 else ActivityStatus.PENDING


def after_assignment(activity: Activity, assignee_count: int) -> Activity:
    """Promote a pending activity once it has at least one assignee.

    Removing assignees never demotes an activity back to pending.
    """

    if activity.status is ActivityStatus.PENDING and assignee_count > 0:
        return replace(activity, status=ActivityStatus.INACTIVE)
    return activity


def activate(activity: Activity, *, now: datetime) -> Activity:
    """Start (or resume) work on ``activity``."""

    if activity.status not in _ACTIVATABLE:
        raise InvalidTransition(
            f"No se puede activar una actividad en estado '{activity.status.value}'"
        )
    return replace(
        activity,
        status=ActivityStatus.IN_PROGRESS,
        activated_at=_strictly_after(activity.activated_at, now),
    )


def pause(activity: Activity, *, now: datetime) -> Activity:
    """Pause an activity that is in progress."""

    _require_in_progress(activity, "pausar")
    return replace(activity, status=ActivityStatus.PAUSED, paused_at=now)


def complete(activity: Activity, *, now: datetime) -> Activity:
    """Finish an activity that is in progress. Completion is terminal."""

    _require_in_progress(activity, "completar")
    return replace(activity, status=ActivityStatus.COMPLETED, completed_at=now)


def ensure_deletable(activity: Activity) -> None:
    if activity.status is ActivityStatus.COMPLETED:
        raise InvalidTransition("No se puede eliminar una actividad completada")


def ensure_editable(activity: Activity) -> None:
    if activity.status is ActivityStatus.COMPLETED:
        raise InvalidTransition("No se puede modificar una actividad completada")


def validate_activity_state(activity: Activity) -> Activity:
    """Check that status and lifecycle timestamps agree.

    Raises :class:`InvariantViolation` when they do not; such a record can only
    come from corrupted storage.
    """

    status = activity.status
    if not isinstance(status, ActivityStatus):
        raise InvariantViolation(f"Estado desconocido para la actividad {activity.id}: {status!r}")

    problems: list[str] = []
    if (activity.completed_at is not None) != (status is ActivityStatus.COMPLETED):
        problems.append("completed_at")
    if status in _UNASSIGNED_STATES:
        if activity.activated_at is not None:
            problems.append("activated_at")
        if activity.paused_at is not None:
            problems.append("paused_at")
    else:
        if activity.activated_at is None:
            problems.append("activated_at")
        if status is ActivityStatus.PAUSED and activity.paused_at is None:
            problems.append("paused_at")

    if problems:
        raise InvariantViolation(
            f"La actividad {activity.id} en estado '{status.value}' tiene "
            f"marcas de tiempo inconsistentes: {', '.join(problems)}"
        )
    return activity


def _require_in_progress(activity: Activity, verb: str) -> None:
    if activity.status is not ActivityStatus.IN_PROGRESS:
        raise InvalidTransition(
            f"Solo se puede {verb} una actividad en progreso "
            f"(estado actual: '{activity.status.value}')"
        )


def _strictly_after(previous: datetime | None, now: datetime) -> datetime:
    # Reactivation must move activated_at forward even with a coarse clock.
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


__all__ = [
    "TIMESTAMP_FIELDS",
    "activate",
    "after_assignment",
    "complete",
    "ensure_deletable",
    "ensure_editable",
    "initial_status",
    "pause",
    "validate_activity_state",
]

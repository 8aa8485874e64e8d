"""Display labels shown to users.

These tables only translate identifiers into text; no business rule reads
them.
"""

from __future__ import annotations

from typing import Final

from journal.domain.entities import ActivityStatus, SummaryType

ACTIVITY_STATUS_LABELS: Final[dict[ActivityStatus, str]] = {
    ActivityStatus.PENDING: "Pendiente de asignar",
    ActivityStatus.INACTIVE: "Sin activar",
    ActivityStatus.IN_PROGRESS: "En progreso",
    ActivityStatus.PAUSED: "En pausa",
    ActivityStatus.COMPLETED: "Completada",
}

SUMMARY_TYPE_LABELS: Final[dict[SummaryType, str]] = {
    SummaryType.DAILY: "diario",
    SummaryType.WEEKLY: "semanal",
    SummaryType.MONTHLY: "mensual",
    SummaryType.YEARLY: "anual",
    SummaryType.CUSTOM: "personalizado",
}


def activity_status_label(status: ActivityStatus) -> str:
    return ACTIVITY_STATUS_LABELS.get(status, status.value)


def summary_type_label(summary_type: SummaryType) -> str:
    return SUMMARY_TYPE_LABELS.get(summary_type, summary_type.value)


__all__ = [
    "ACTIVITY_STATUS_LABELS",
    "SUMMARY_TYPE_LABELS",
    "activity_status_label",
    "summary_type_label",
]

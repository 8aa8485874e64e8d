"""Utility helpers for writing Gantt projections to Excel workbooks."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from datetime import date
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from journal.domain.entities import ActivityStatus
from journal.domain.gantt import FIXED_HEADERS, GanttMatrix

logger = logging.getLogger(__name__)

GANTT_SHEET_TITLE = "Diagrama de Gantt"
_FIXED_COLUMN_WIDTHS = (25, 14, 20, 12, 14, 12, 12)
_DAY_COLUMN_WIDTH = 5
_LEGEND_ROW = 1
_HEADER_ROW = 3


def _sanitize_filename(name: str) -> str:
    """Return ``name`` transformed into a filesystem-safe slug."""

    cleaned = re.sub(r"[^\w-]+", "_", name.strip())
    cleaned = cleaned.strip("_")
    return cleaned or "proyecto"


def build_gantt_filename(project_name: str, on: date) -> str:
    """Return ``{project_name}_gantt_{iso_date}.xlsx`` with a safe project name."""

    return f"{_sanitize_filename(project_name)}_gantt_{on.isoformat()}.xlsx"


def _create_workbook(
    matrix: GanttMatrix, status_labels: Mapping[ActivityStatus, str] | None
) -> Workbook:
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = GANTT_SHEET_TITLE

    legend, header, *data_rows = matrix.to_table(status_labels)
    worksheet.append(legend)
    worksheet.append([])
    worksheet.append(header)
    for row in data_rows:
        worksheet.append(row)

    legend_font = Font(bold=True)
    worksheet.cell(row=_LEGEND_ROW, column=1).font = legend_font

    header_fill = PatternFill(fill_type="solid", fgColor="4F81BD")
    header_font = Font(color="FFFFFFFF", bold=True)
    header_alignment = Alignment(horizontal="center", vertical="center")
    for cell in worksheet[_HEADER_ROW]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = header_alignment

    marker_alignment = Alignment(horizontal="center")
    first_day_column = len(FIXED_HEADERS) + 1
    for row in worksheet.iter_rows(
        min_row=_HEADER_ROW + 1, min_col=first_day_column, max_col=len(header)
    ):
        for cell in row:
            cell.alignment = marker_alignment

    for index, width in enumerate(_FIXED_COLUMN_WIDTHS, start=1):
        worksheet.column_dimensions[get_column_letter(index)].width = width
    for index in range(first_day_column, len(header) + 1):
        worksheet.column_dimensions[get_column_letter(index)].width = _DAY_COLUMN_WIDTH

    worksheet.freeze_panes = worksheet.cell(row=_HEADER_ROW + 1, column=2)
    return workbook


def write_gantt_workbook(
    matrix: GanttMatrix,
    destination: Path,
    *,
    status_labels: Mapping[ActivityStatus, str] | None = None,
) -> Path:
    """Serialize ``matrix`` to ``destination`` and return the written path.

    Filesystem errors propagate to the caller unchanged.
    """

    destination.parent.mkdir(parents=True, exist_ok=True)
    workbook = _create_workbook(matrix, status_labels)
    workbook.save(destination)
    logger.info(
        "Gantt workbook written to %s (%d activities, %d days)",
        destination,
        len(matrix.rows),
        len(matrix.days),
    )
    return destination


__all__ = ["GANTT_SHEET_TITLE", "build_gantt_filename", "write_gantt_workbook"]

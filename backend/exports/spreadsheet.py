"""Excel workbook of a lost income projection (openpyxl)."""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Sequence

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from backend.config import CURRENCY_FORMAT, REPORT_TITLE, SPREADSHEET_FILENAME
from backend.core.presentation import (
    SPREADSHEET_COLUMNS,
    SUMMARY_TITLE,
    TOTAL_LOSS_LABEL,
    summarize_assumptions,
)
from backend.exports.base import ExportArtifact, ExportError
from backend.schemas.lucro_cesante import AssumptionSet, ProjectedYear

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
SHEET_TITLE = "Resultados"

COLUMN_WIDTHS = [25, 25, 15, 20, 15, 20, 18, 18, 20]

# columns C..I hold money
FIRST_MONEY_COLUMN = 3


def build_workbook(rows: Sequence[ProjectedYear], assumptions: AssumptionSet, total: float) -> Workbook:
    """
    Lay out the sheet top to bottom:

      title, blank, summary header, one row per assumption, blank,
      column header, one row per year, blank, total loss.

    Every money cell is a number with CURRENCY_FORMAT so formulas keep working.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    ws.cell(row=1, column=1, value=REPORT_TITLE)
    ws.cell(row=3, column=1, value=SUMMARY_TITLE)

    r = 4
    for item in summarize_assumptions(assumptions):
        ws.cell(row=r, column=1, value=item.label)
        cell = ws.cell(row=r, column=2, value=item.value)
        if item.is_currency:
            cell.number_format = CURRENCY_FORMAT
        r += 1

    r += 1  # blank
    for c, (header, _) in enumerate(SPREADSHEET_COLUMNS, start=1):
        ws.cell(row=r, column=c, value=header)

    for row in rows:
        r += 1
        for c, (_, field_name) in enumerate(SPREADSHEET_COLUMNS, start=1):
            cell = ws.cell(row=r, column=c, value=getattr(row, field_name))
            if c >= FIRST_MONEY_COLUMN:
                cell.number_format = CURRENCY_FORMAT

    r += 2
    ws.cell(row=r, column=1, value=TOTAL_LOSS_LABEL)
    total_cell = ws.cell(row=r, column=len(SPREADSHEET_COLUMNS), value=total)
    total_cell.number_format = CURRENCY_FORMAT

    for idx, width in enumerate(COLUMN_WIDTHS, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = width

    return wb


def export_spreadsheet(rows: Sequence[ProjectedYear], assumptions: AssumptionSet, total: float) -> ExportArtifact:
    try:
        out = BytesIO()
        build_workbook(rows, assumptions, total).save(out)
    except Exception as exc:
        logger.exception("Excel export failed")
        raise ExportError(f"No se pudo generar el archivo Excel: {exc}") from exc

    content = out.getvalue()
    logger.info("Excel export produced %d bytes for %d rows", len(content), len(rows))
    return ExportArtifact(filename=SPREADSHEET_FILENAME, media_type=XLSX_MEDIA_TYPE, content=content)

"""PDF report of a lost income projection (reportlab)."""

from __future__ import annotations

import logging
from io import BytesIO
from typing import List, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Flowable, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from backend.config import DOCUMENT_FILENAME, REPORT_TITLE
from backend.core.presentation import (
    SUMMARY_TITLE,
    TABLE_COLUMNS,
    TOTAL_LOSS_LABEL,
    format_currency,
    summarize_assumptions,
    table_rows,
)
from backend.exports.base import ExportArtifact, ExportError
from backend.schemas.lucro_cesante import AssumptionSet, ProjectedYear

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"

HEADER_FILL = colors.Color(22 / 255, 160 / 255, 133 / 255)
DEDUCTION_RED = colors.HexColor("#e74c3c")

styles = getSampleStyleSheet()


def _assumptions_table(assumptions: AssumptionSet) -> Table:
    data = [[item.label, item.display] for item in summarize_assumptions(assumptions)]
    tbl = Table(data, hAlign="LEFT")
    tbl.setStyle(TableStyle([
        ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 2),
    ]))
    return tbl


def _results_table(rows: Sequence[ProjectedYear]) -> Table:
    body = table_rows(rows)
    # header row repeats on every page
    tbl = Table([TABLE_COLUMNS] + body, repeatRows=1)
    tbl.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), HEADER_FILL),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("FONTSIZE", (0, 0), (-1, -1), 8),
        ("ALIGN", (2, 1), (-1, -1), "RIGHT"),
        ("TEXTCOLOR", (3, 1), (3, -1), DEDUCTION_RED),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 6),
    ]))
    return tbl


def _total_line(total: float) -> Table:
    tbl = Table([[TOTAL_LOSS_LABEL, format_currency(total)]], colWidths=[330, 193])
    tbl.setStyle(TableStyle([
        ("FONTNAME", (0, 0), (-1, -1), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 14),
        ("ALIGN", (1, 0), (1, 0), "RIGHT"),
    ]))
    return tbl


def build_story(rows: Sequence[ProjectedYear], assumptions: AssumptionSet, total: float) -> List[Flowable]:
    """Title, assumptions, yearly table and the bold total line, in page order."""
    return [
        Paragraph(REPORT_TITLE, styles["Title"]),
        Spacer(1, 6),
        Paragraph(SUMMARY_TITLE, styles["Heading2"]),
        _assumptions_table(assumptions),
        Spacer(1, 12),
        _results_table(rows),
        Spacer(1, 18),
        _total_line(total),
    ]


def build_document(rows: Sequence[ProjectedYear], assumptions: AssumptionSet, total: float) -> bytes:
    buf = BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=36,
        rightMargin=36,
        topMargin=36,
        bottomMargin=36,
        title=REPORT_TITLE,
    )
    doc.build(build_story(rows, assumptions, total))
    return buf.getvalue()


def export_document(rows: Sequence[ProjectedYear], assumptions: AssumptionSet, total: float) -> ExportArtifact:
    """Paginated PDF with the assumptions, the yearly table and the total loss."""
    try:
        content = build_document(rows, assumptions, total)
    except Exception as exc:
        logger.exception("PDF export failed")
        raise ExportError(f"No se pudo generar el PDF: {exc}") from exc

    logger.info("PDF export produced %d bytes for %d rows", len(content), len(rows))
    return ExportArtifact(filename=DOCUMENT_FILENAME, media_type=PDF_MEDIA_TYPE, content=content)

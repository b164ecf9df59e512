from __future__ import annotations

import re
from io import BytesIO

import pytest
from openpyxl import load_workbook
from reportlab.platypus import Paragraph, Table

from backend.config import CURRENCY_FORMAT
from backend.core.calculator import calculate
from backend.core.lucro_cesante import AgeOrderingError, project_lost_income
from backend.exports import ExportError, ExportSink, export_document, export_spreadsheet, sink_for
from backend.exports import document as document_module
from backend.schemas.lucro_cesante import AmountAdjustment, ExportOption, PercentageAdjustment


def exported_sheet(assumptions):
    result = project_lost_income(assumptions)
    artifact = export_spreadsheet(result.rows, assumptions, result.totalDiscountedLoss)
    return result, artifact, load_workbook(BytesIO(artifact.content)).active


def test_spreadsheet_layout(flat_assumptions):
    result, artifact, ws = exported_sheet(flat_assumptions)

    assert artifact.filename == "calculo_lucro_cesante.xlsx"
    assert ws.title == "Resultados"
    assert ws["A1"].value == "Reporte de Cálculo de Pérdida de Ingresos"
    assert ws["A2"].value is None
    assert ws["A3"].value == "Resumen de Suposiciones"

    # 7 assumption rows: 4..10, blank 11, header 12, data 13..14, blank 15, total 16
    assert ws["A4"].value == "Salario Anual:"
    assert ws["B4"].value == 50000
    assert ws["B4"].number_format == CURRENCY_FORMAT
    assert ws["A10"].value == "Consumo Propio:"
    assert ws["A11"].value is None

    header = [cell.value for cell in ws[12]]
    assert header == [
        "Año",
        "Edad",
        "Ingreso",
        "Beneficios Adicionales",
        "Bono",
        "Ingreso Bruto Total",
        "Consumo Propio",
        "Ingreso Neto",
        "Ingreso Descontado",
    ]

    assert ws["A13"].value == 2024
    assert ws["B14"].value == 36
    assert ws["A15"].value is None
    assert ws["A16"].value == "Pérdida Total de Ingresos:"
    assert ws["I16"].value == result.totalDiscountedLoss
    assert ws["I16"].number_format == CURRENCY_FORMAT


def test_spreadsheet_money_cells_are_numeric(flat_assumptions):
    assumptions = flat_assumptions.with_changes(
        fringeBenefits=PercentageAdjustment(value=10),
        bonus=AmountAdjustment(value=1000),
        discountStartYear=2024,
        discountRate=5,
    )
    result, _, ws = exported_sheet(assumptions)

    # 9 assumption rows (fringe and bonus shown) -> header at 14, data from 15
    assert ws["A14"].value == "Año"
    for offset, row in enumerate(result.rows):
        cells = ws[15 + offset]
        for cell in cells[2:9]:
            assert isinstance(cell.value, (int, float))
            assert cell.number_format == CURRENCY_FORMAT
        assert cells[8].value == row.discountedIncome
        assert cells[3].value == row.fringeBenefits


def test_document_is_a_pdf(flat_assumptions):
    result = project_lost_income(flat_assumptions)
    artifact = export_document(result.rows, flat_assumptions, result.totalDiscountedLoss)

    assert artifact.filename == "calculo_lucro_cesante.pdf"
    assert artifact.media_type == "application/pdf"
    assert artifact.content.startswith(b"%PDF")


def test_long_document_spans_pages(flat_assumptions):
    assumptions = flat_assumptions.with_changes(eventAge=18, retirementAge=100)
    result = project_lost_income(assumptions)

    artifact = export_document(result.rows, assumptions, result.totalDiscountedLoss)

    # the page tree carries the largest /Count; outlines report 0
    counts = [int(n) for n in re.findall(rb"/Count (\d+)", artifact.content)]
    assert max(counts) >= 2


def test_document_failure_becomes_export_error(flat_assumptions, monkeypatch):
    def broken(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(document_module, "build_document", broken)
    result = project_lost_income(flat_assumptions)

    with pytest.raises(ExportError):
        export_document(result.rows, flat_assumptions, result.totalDiscountedLoss)


def test_sink_registry():
    assert sink_for(ExportOption.DOCUMENT) is export_document
    assert sink_for("Excel") is export_spreadsheet
    with pytest.raises(ValueError):
        sink_for(ExportOption.NONE)


def test_calculate_exports_selected_format(flat_assumptions):
    calculation = calculate(flat_assumptions.with_changes(exportOption=ExportOption.SPREADSHEET))

    assert calculation.result.totalDiscountedLoss == 100000
    assert calculation.artifact is not None
    ws = load_workbook(BytesIO(calculation.artifact.content)).active
    assert ws["I16"].value == 100000


def test_calculate_without_export(flat_assumptions):
    calculation = calculate(flat_assumptions)

    assert calculation.artifact is None
    assert len(calculation.result.rows) == 2


def test_calculate_does_not_export_rejected_assumptions(flat_assumptions, monkeypatch):
    calls = []
    monkeypatch.setattr(document_module, "build_document", lambda *a: calls.append(a) or b"")

    with pytest.raises(AgeOrderingError):
        calculate(flat_assumptions.with_changes(retirementAge=30, exportOption="PDF"))

    assert calls == []


def document_story(assumptions):
    result = project_lost_income(assumptions)
    story = document_module.build_story(result.rows, assumptions, result.totalDiscountedLoss)
    paragraphs = [flowable.text for flowable in story if isinstance(flowable, Paragraph)]
    tables = [flowable for flowable in story if isinstance(flowable, Table)]
    return paragraphs, tables


def test_document_story_layout(flat_assumptions):
    assumptions = flat_assumptions.with_changes(personalConsumptionPercentage=10)
    paragraphs, tables = document_story(assumptions)

    assert paragraphs == ["Reporte de Cálculo de Pérdida de Ingresos", "Resumen de Suposiciones"]
    assert len(tables) == 3
    summary, results, total = tables

    labels = [row[0] for row in summary._cellvalues]
    assert labels[0] == "Salario Anual:"
    assert "Consumo Propio:" in labels
    assert summary._cellvalues[0][1] == "$50,000.00"

    assert results._cellvalues[0] == [
        "Año",
        "Edad",
        "Ingreso Bruto",
        "Consumo Propio",
        "Ingreso Neto",
        "Ingreso Descontado",
    ]
    assert results._cellvalues[1] == ["2024", "35", "$50,000.00", "($5,000.00)", "$45,000.00", "$45,000.00"]
    assert results._cellStyles[1][3].textColor == document_module.DEDUCTION_RED

    assert total._cellvalues == [["Pérdida Total de Ingresos:", "$90,000.00"]]
    assert total._cellStyles[0][0].fontname == "Helvetica-Bold"
    assert total._cellStyles[0][1].fontname == "Helvetica-Bold"


def test_document_summary_lists_optional_lines(flat_assumptions):
    assumptions = flat_assumptions.with_changes(bonus=AmountAdjustment(value=5000))
    _, tables = document_story(assumptions)

    summary = dict((label, value) for label, value in tables[0]._cellvalues)
    assert summary["Bono:"] == "Monto, $5,000.00"
    assert "Beneficios Adicionales:" not in summary


def test_sinks_follow_the_sink_interface():
    assert isinstance(export_document, ExportSink)
    assert isinstance(export_spreadsheet, ExportSink)

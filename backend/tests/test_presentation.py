from __future__ import annotations

from backend.core.lucro_cesante import project_lost_income
from backend.core.presentation import (
    format_currency,
    format_percent,
    results_payload,
    summarize_assumptions,
    table_rows,
)
from backend.schemas.lucro_cesante import AmountAdjustment, PercentageAdjustment


def test_format_currency():
    assert format_currency(50000) == "$50,000.00"
    assert format_currency(1234.567) == "$1,234.57"
    assert format_currency(0) == "$0.00"
    assert format_currency(-700) == "-$700.00"


def test_format_percent_drops_trailing_zero():
    assert format_percent(3.0) == "3%"
    assert format_percent(33.33) == "33.33%"


def test_summary_skips_unused_fringe_and_bonus(flat_assumptions):
    labels = [item.label for item in summarize_assumptions(flat_assumptions)]

    assert labels == [
        "Salario Anual:",
        "Edad del Evento:",
        "Edad de Jubilación:",
        "Incremento Anual:",
        "Tasa de Descuento:",
        "Año Inicio Descuento:",
        "Consumo Propio:",
    ]


def test_summary_describes_each_adjustment(flat_assumptions):
    assumptions = flat_assumptions.with_changes(
        increment=PercentageAdjustment(value=3),
        fringeBenefits=PercentageAdjustment(value=10),
        bonus=AmountAdjustment(value=5000),
    )
    items = {item.label: item for item in summarize_assumptions(assumptions)}

    assert items["Salario Anual:"].value == 50000
    assert items["Salario Anual:"].is_currency
    assert items["Salario Anual:"].display == "$50,000.00"
    assert items["Edad del Evento:"].display == "35 años"
    assert items["Incremento Anual:"].display == "Porcentaje, 3%"
    assert items["Beneficios Adicionales:"].display == "Porcentaje, 10%"
    assert items["Bono:"].display == "Monto, $5,000.00"
    assert items["Año Inicio Descuento:"].value == 2030
    assert items["Consumo Propio:"].display == "0%"


def test_table_rows_parenthesize_consumption(flat_assumptions):
    assumptions = flat_assumptions.with_changes(personalConsumptionPercentage=10)
    rows = table_rows(project_lost_income(assumptions).rows)

    assert rows[0] == ["2024", "35", "$50,000.00", "($5,000.00)", "$45,000.00", "$45,000.00"]


def test_results_payload_keeps_raw_numbers(flat_assumptions):
    result = project_lost_income(flat_assumptions)
    payload = results_payload(flat_assumptions, result)

    assert payload["totalDiscountedLoss"] == 100000
    assert payload["totalDiscountedLossDisplay"] == "$100,000.00"
    assert payload["yearsOfLoss"] == 2
    assert payload["rows"][1]["year"] == 2025
    assert payload["rows"][1]["discountedIncome"] == 50000
    assert payload["summary"][0] == {"label": "Salario Anual:", "display": "$50,000.00"}

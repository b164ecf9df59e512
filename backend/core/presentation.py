"""Formatting helpers shared by the API payload, the CLI table and the exports."""

from __future__ import annotations

from typing import Any, Dict, List, NamedTuple, Sequence, Union

from backend.schemas.lucro_cesante import (
    AssumptionSet,
    CalculationType,
    ProjectedYear,
    ProjectionResult,
)

SUMMARY_TITLE = "Resumen de Suposiciones"
TOTAL_LOSS_LABEL = "Pérdida Total de Ingresos:"

# Columns of the condensed table (screen and PDF)
TABLE_COLUMNS = [
    "Año",
    "Edad",
    "Ingreso Bruto",
    "Consumo Propio",
    "Ingreso Neto",
    "Ingreso Descontado",
]

# Columns of the full spreadsheet table, in ProjectedYear field order
SPREADSHEET_COLUMNS = [
    ("Año", "year"),
    ("Edad", "age"),
    ("Ingreso", "income"),
    ("Beneficios Adicionales", "fringeBenefits"),
    ("Bono", "bonus"),
    ("Ingreso Bruto Total", "totalAnnualIncome"),
    ("Consumo Propio", "personalConsumption"),
    ("Ingreso Neto", "netAnnualIncome"),
    ("Ingreso Descontado", "discountedIncome"),
]


def format_currency(value: float) -> str:
    """USD with thousands separators and two decimals, e.g. -$1,234.50."""
    if value < 0:
        return f"-${abs(value):,.2f}"
    return f"${value:,.2f}"


def _plain_number(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_percent(value: float) -> str:
    return f"{_plain_number(value)}%"


def format_years(age: int) -> str:
    return f"{age} años"


class SummaryItem(NamedTuple):
    label: str
    value: Union[str, int, float]
    is_currency: bool = False

    @property
    def display(self) -> str:
        if self.is_currency:
            return format_currency(float(self.value))
        return str(self.value)


def _describe_adjustment(kind: str, value: float) -> str:
    if kind == CalculationType.PERCENTAGE:
        return f"{kind}, {format_percent(value)}"
    return f"{kind}, {format_currency(value)}"


def summarize_assumptions(assumptions: AssumptionSet) -> List[SummaryItem]:
    """Labelled assumption rows, in the order every report shows them."""
    items = [
        SummaryItem("Salario Anual:", float(assumptions.annualWage), is_currency=True),
        SummaryItem("Edad del Evento:", format_years(assumptions.eventAge)),
        SummaryItem("Edad de Jubilación:", format_years(assumptions.retirementAge)),
        SummaryItem(
            "Incremento Anual:",
            _describe_adjustment(assumptions.increment.kind, assumptions.increment.value),
        ),
    ]

    # optional lines are left out entirely when not in use
    fringe = assumptions.fringeBenefits
    if fringe.kind != CalculationType.NONE:
        items.append(
            SummaryItem("Beneficios Adicionales:", _describe_adjustment(fringe.kind, fringe.value))
        )

    bonus = assumptions.bonus
    if bonus.kind != CalculationType.NONE:
        items.append(SummaryItem("Bono:", _describe_adjustment(bonus.kind, bonus.value)))

    items.extend(
        [
            SummaryItem("Tasa de Descuento:", format_percent(assumptions.discountRate)),
            SummaryItem("Año Inicio Descuento:", assumptions.discountStartYear),
            SummaryItem("Consumo Propio:", format_percent(assumptions.personalConsumptionPercentage)),
        ]
    )
    return items


def table_rows(rows: Sequence[ProjectedYear]) -> List[List[str]]:
    """Rows of the condensed table, consumption shown as a deduction."""
    return [
        [
            str(row.year),
            str(row.age),
            format_currency(row.totalAnnualIncome),
            f"({format_currency(row.personalConsumption)})",
            format_currency(row.netAnnualIncome),
            format_currency(row.discountedIncome),
        ]
        for row in rows
    ]


def results_payload(assumptions: AssumptionSet, result: ProjectionResult) -> Dict[str, Any]:
    """JSON-ready response for the results panel."""
    return {
        "summary": [
            {"label": item.label, "display": item.display} for item in summarize_assumptions(assumptions)
        ],
        "rows": [row.model_dump() for row in result.rows],
        "yearsOfLoss": result.yearsOfLoss,
        "totalDiscountedLoss": result.totalDiscountedLoss,
        "totalDiscountedLossDisplay": format_currency(result.totalDiscountedLoss),
    }


__all__ = [
    "SUMMARY_TITLE",
    "TOTAL_LOSS_LABEL",
    "TABLE_COLUMNS",
    "SPREADSHEET_COLUMNS",
    "format_currency",
    "format_percent",
    "format_years",
    "SummaryItem",
    "summarize_assumptions",
    "table_rows",
    "results_payload",
]

#!/usr/bin/env python
"""
Lucro cesante calculator, command-line front end.

Builds the assumptions from the options (defaults match the web form),
prints the summary, the yearly table and the total loss, and writes the
PDF or Excel file when --export asks for one.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from backend.core.calculator import Calculation, export_result
from backend.core.lucro_cesante import CalculationError, project_lost_income
from backend.core.presentation import (
    SUMMARY_TITLE,
    TABLE_COLUMNS,
    TOTAL_LOSS_LABEL,
    format_currency,
    summarize_assumptions,
    table_rows,
)
from backend.exports import ExportError
from backend.logging_config import setup_logging
from backend.schemas.lucro_cesante import (
    AssumptionSet,
    CalculationType,
    ExportOption,
    default_assumptions,
)

logger = logging.getLogger(__name__)

KIND_CHOICES = [kind.value for kind in CalculationType]
INCREMENT_CHOICES = [CalculationType.PERCENTAGE.value, CalculationType.AMOUNT.value]
EXPORT_CHOICES = [option.value for option in ExportOption]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser(defaults: Optional[AssumptionSet] = None) -> argparse.ArgumentParser:
    d = defaults or default_assumptions()
    parser = argparse.ArgumentParser(
        prog="lucro-cesante",
        description="Estime la pérdida de ingresos (lucro cesante) año por año.",
    )
    parser.add_argument("--annual-wage", type=float, default=d.annualWage, help="Salario anual")
    parser.add_argument("--event-year", type=int, default=d.eventYear, help="Año del evento")
    parser.add_argument("--event-age", type=int, default=d.eventAge, help="Edad del evento")
    parser.add_argument("--retirement-age", type=int, default=d.retirementAge, help="Edad de jubilación")

    parser.add_argument("--increment-type", choices=INCREMENT_CHOICES, default=d.increment.kind)
    parser.add_argument("--increment-value", type=float, default=d.increment.value)
    parser.add_argument("--fringe-type", choices=KIND_CHOICES, default=d.fringeBenefits.kind)
    parser.add_argument("--fringe-value", type=float, default=d.fringeBenefits.value)
    parser.add_argument("--bonus-type", choices=KIND_CHOICES, default=d.bonus.kind)
    parser.add_argument("--bonus-value", type=float, default=d.bonus.value)

    parser.add_argument("--discount-rate", type=float, default=d.discountRate, help="Tasa de descuento (%%)")
    parser.add_argument("--discount-start-year", type=int, default=d.discountStartYear)
    parser.add_argument(
        "--personal-consumption",
        type=float,
        default=d.personalConsumptionPercentage,
        help="Consumo propio (%% del ingreso bruto)",
    )

    parser.add_argument("--export", choices=EXPORT_CHOICES, default=ExportOption.NONE.value)
    parser.add_argument("--output-dir", type=Path, default=Path("."), help="Carpeta para el archivo exportado")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")
    return parser


def assumptions_from_args(args: argparse.Namespace) -> AssumptionSet:
    return AssumptionSet.model_validate(
        {
            "annualWage": args.annual_wage,
            "eventYear": args.event_year,
            "eventAge": args.event_age,
            "retirementAge": args.retirement_age,
            "increment": {"kind": args.increment_type, "value": args.increment_value},
            "fringeBenefits": {"kind": args.fringe_type, "value": args.fringe_value},
            "bonus": {"kind": args.bonus_type, "value": args.bonus_value},
            "discountRate": args.discount_rate,
            "discountStartYear": args.discount_start_year,
            "personalConsumptionPercentage": args.personal_consumption,
            "exportOption": args.export,
        }
    )


def render(calculation: Calculation, console: Console) -> None:
    summary = Table.grid(padding=(0, 2))
    summary.add_column(style="bold")
    summary.add_column()
    for item in summarize_assumptions(calculation.assumptions):
        summary.add_row(item.label, item.display)
    console.print(Panel(summary, title=SUMMARY_TITLE, expand=False))

    table = Table(title="Resultados del Cálculo", box=box.SIMPLE_HEAVY)
    for idx, column in enumerate(TABLE_COLUMNS):
        table.add_column(column, justify="left" if idx < 2 else "right")
    for cells in table_rows(calculation.result.rows):
        table.add_row(cells[0], cells[1], cells[2], f"[red]{cells[3]}[/red]", cells[4], f"[bold]{cells[5]}[/bold]")
    console.print(table)

    console.print(f"[bold]{TOTAL_LOSS_LABEL}[/bold] {format_currency(calculation.result.totalDiscountedLoss)}")


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    console = console or Console()

    assumptions = assumptions_from_args(args)
    try:
        result = project_lost_income(assumptions)
    except CalculationError as exc:
        print(exc.message, file=sys.stderr)
        return 2

    # results are shown whether or not the export works
    render(Calculation(assumptions=assumptions, result=result), console)

    if assumptions.exportOption != ExportOption.NONE:
        try:
            artifact = export_result(assumptions, result)
        except ExportError as exc:
            print(str(exc), file=sys.stderr)
            return 1

        args.output_dir.mkdir(parents=True, exist_ok=True)
        path = args.output_dir / artifact.filename
        path.write_bytes(artifact.content)
        logger.info("Wrote %s", path)
        console.print(f"Archivo exportado: {path}", markup=False, highlight=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())

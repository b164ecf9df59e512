"""App-wide configuration and fixed constants for the lucro cesante calculator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

# Accepted range for the year of the event (inclusive on both ends)
MIN_EVENT_YEAR = 1900
MAX_EVENT_YEAR = 2200

# Excel number format applied to every money cell
CURRENCY_FORMAT = "$#,##0.00"

REPORT_TITLE = "Reporte de Cálculo de Pérdida de Ingresos"
DOCUMENT_FILENAME = "calculo_lucro_cesante.pdf"
SPREADSHEET_FILENAME = "calculo_lucro_cesante.xlsx"


@dataclass(frozen=True)
class AppConfig:
    cors_origins: Tuple[str, ...] = field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        )
    )
    log_level: str = "INFO"
    debug: bool = False
    port: int = 5000

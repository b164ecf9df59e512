"""Export sinks: turn a computed projection into a downloadable file."""

from __future__ import annotations

from typing import Dict

from backend.exports.base import ExportArtifact, ExportError, ExportSink
from backend.exports.document import export_document
from backend.exports.spreadsheet import export_spreadsheet
from backend.schemas.lucro_cesante import ExportOption

SINKS: Dict[ExportOption, ExportSink] = {
    ExportOption.DOCUMENT: export_document,
    ExportOption.SPREADSHEET: export_spreadsheet,
}


def sink_for(option: ExportOption) -> ExportSink:
    try:
        return SINKS[ExportOption(option)]
    except KeyError:
        raise ValueError(f"No export sink for option {option!r}") from None


__all__ = [
    "ExportError",
    "ExportArtifact",
    "ExportSink",
    "SINKS",
    "sink_for",
    "export_document",
    "export_spreadsheet",
]

"""Types shared by every export sink."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable

from backend.schemas.lucro_cesante import AssumptionSet, ProjectedYear


class ExportError(RuntimeError):
    """The file could not be produced."""


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    media_type: str
    content: bytes


@runtime_checkable
class ExportSink(Protocol):
    def __call__(
        self, rows: Sequence[ProjectedYear], assumptions: AssumptionSet, total: float
    ) -> ExportArtifact: ...

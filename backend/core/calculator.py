"""Run one calculation: projection first, then the export the user asked for."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from backend.core.lucro_cesante import project_lost_income
from backend.exports import ExportArtifact, sink_for
from backend.schemas.lucro_cesante import AssumptionSet, ExportOption, ProjectionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Calculation:
    assumptions: AssumptionSet
    result: ProjectionResult
    artifact: Optional[ExportArtifact] = None


def export_result(assumptions: AssumptionSet, result: ProjectionResult) -> ExportArtifact:
    """Hand the rows and total of this exact result to the sink for assumptions.exportOption."""
    sink = sink_for(assumptions.exportOption)
    return sink(result.rows, assumptions, result.totalDiscountedLoss)


def calculate(assumptions: AssumptionSet) -> Calculation:
    """
    Project the lost income and, if an export target is selected, build the file.

    CalculationError from the projection propagates and nothing is exported.
    """
    result = project_lost_income(assumptions)

    artifact = None
    if assumptions.exportOption != ExportOption.NONE:
        artifact = export_result(assumptions, result)
        logger.info("Exported %s (%s)", artifact.filename, assumptions.exportOption.value)

    return Calculation(assumptions=assumptions, result=result, artifact=artifact)

"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from io import BytesIO
from typing import Any, Dict

from flask import Blueprint, jsonify, request, send_file
from pydantic import ValidationError

from backend.core.calculator import calculate
from backend.core.lucro_cesante import CalculationError, project_lost_income
from backend.core.presentation import results_payload
from backend.exports import ExportError
from backend.schemas.lucro_cesante import AssumptionSet, ExportOption, default_assumptions

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(CalculationError)
def _handle_calculation_error(exc: CalculationError):
    logger.info("Calculation rejected: %s", exc.kind.value)
    return jsonify({"error": exc.message, "kind": exc.kind.value}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ExportError)
def _handle_export_error(exc: ExportError):
    return jsonify({"error": str(exc)}), HTTPStatus.INTERNAL_SERVER_ERROR


def _assumptions_from_request() -> AssumptionSet:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return AssumptionSet.model_validate(raw_payload)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify({"message": "pong"})


@api_bp.get("/lucro-cesante/defaults")
def defaults() -> Any:
    """Initial values for the input form."""
    return jsonify(default_assumptions().model_dump(mode="json"))


@api_bp.post("/calc/lucro-cesante")
def lucro_cesante() -> Any:
    """Year-by-year lost income table plus the total discounted loss."""
    assumptions = _assumptions_from_request()
    result = project_lost_income(assumptions)
    return jsonify(results_payload(assumptions, result))


@api_bp.post("/calc/lucro-cesante/export")
def lucro_cesante_export() -> Any:
    """Recalculate and return the PDF or Excel file chosen in exportOption."""
    assumptions = _assumptions_from_request()
    if assumptions.exportOption == ExportOption.NONE:
        return (
            jsonify({"error": "Seleccione un formato de exportación (PDF o Excel)."}),
            HTTPStatus.BAD_REQUEST,
        )

    artifact = calculate(assumptions).artifact
    return send_file(
        BytesIO(artifact.content),
        mimetype=artifact.media_type,
        as_attachment=True,
        download_name=artifact.filename,
    )

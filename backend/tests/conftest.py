from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from backend.app import create_app
from backend.schemas.lucro_cesante import (
    AmountAdjustment,
    AssumptionSet,
    NoAdjustment,
)


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app()
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def flat_assumptions() -> AssumptionSet:
    """Two years of a flat 50k wage, nothing added or taken off, no discount before 2030."""
    return AssumptionSet(
        annualWage=50000,
        eventYear=2024,
        eventAge=35,
        retirementAge=37,
        increment=AmountAdjustment(value=0),
        fringeBenefits=NoAdjustment(),
        bonus=NoAdjustment(),
        discountRate=0,
        discountStartYear=2030,
        personalConsumptionPercentage=0,
    )

"""Year-by-year lost income (lucro cesante) projection."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List

from backend.config import MAX_EVENT_YEAR, MIN_EVENT_YEAR
from backend.schemas.lucro_cesante import AssumptionSet, ProjectedYear, ProjectionResult

logger = logging.getLogger(__name__)


class CalculationErrorKind(str, Enum):
    AGE_ORDERING = "age_ordering"
    YEAR_OUT_OF_RANGE = "year_out_of_range"


class CalculationError(ValueError):
    """Assumptions rejected before any row is produced."""

    kind: CalculationErrorKind
    message: str = ""

    def __init__(self, message: str = ""):
        self.message = message or self.message
        super().__init__(self.message)


class AgeOrderingError(CalculationError):
    kind = CalculationErrorKind.AGE_ORDERING
    message = "La edad del evento debe ser menor que la edad de jubilación."


class YearOutOfRangeError(CalculationError):
    kind = CalculationErrorKind.YEAR_OUT_OF_RANGE
    message = "Por favor ingrese un año del evento válido."


def validate_assumptions(assumptions: AssumptionSet) -> None:
    if assumptions.eventAge >= assumptions.retirementAge:
        raise AgeOrderingError()
    if assumptions.eventYear < MIN_EVENT_YEAR or assumptions.eventYear > MAX_EVENT_YEAR:
        raise YearOutOfRangeError()


def discount(net_income: float, year: int, rate: float, start_year: int) -> float:
    """
    Bring net_income back to present value.

    Years before start_year are left as they are. The start year itself is
    discounted once (exponent 1), the next one twice, and so on.
    """
    if year < start_year:
        return net_income
    periods = year - start_year + 1
    return net_income / ((1 + rate / 100) ** periods)


def project_lost_income(assumptions: AssumptionSet) -> ProjectionResult:
    """
    Build the lost income table from the event age up to (not including) retirement.

    Per year:
      1) income: the annual wage in the first year, afterwards last year's
         income grown by the increment (compounds).
      2) fringe benefits and bonus, each from its own adjustment on income.
      3) total = income + fringe + bonus; personal consumption is taken off
         as a percentage of the total.
      4) the net figure is discounted from discountStartYear onwards.

    The total loss is the running sum of the discounted column, in row order.
    """
    validate_assumptions(assumptions)

    years_of_loss = assumptions.retirementAge - assumptions.eventAge
    logger.debug(
        "Projecting %d years of lost income starting %d (age %d)",
        years_of_loss,
        assumptions.eventYear,
        assumptions.eventAge,
    )

    rows: List[ProjectedYear] = []
    total_loss = 0.0
    income = float(assumptions.annualWage)

    for i in range(years_of_loss):
        year = assumptions.eventYear + i
        age = assumptions.eventAge + i

        if i > 0:
            income = assumptions.increment.grow(income)

        fringe = assumptions.fringeBenefits.amount_on(income)
        bonus = assumptions.bonus.amount_on(income)

        total_income = income + fringe + bonus
        consumption = total_income * (assumptions.personalConsumptionPercentage / 100)
        net_income = total_income - consumption

        discounted = discount(
            net_income,
            year,
            assumptions.discountRate,
            assumptions.discountStartYear,
        )
        total_loss += discounted

        rows.append(
            ProjectedYear(
                year=year,
                age=age,
                income=income,
                fringeBenefits=fringe,
                bonus=bonus,
                totalAnnualIncome=total_income,
                personalConsumption=consumption,
                netAnnualIncome=net_income,
                discountedIncome=discounted,
            )
        )

    return ProjectionResult(rows=tuple(rows), totalDiscountedLoss=total_loss)


__all__ = [
    "CalculationErrorKind",
    "CalculationError",
    "AgeOrderingError",
    "YearOutOfRangeError",
    "validate_assumptions",
    "discount",
    "project_lost_income",
]

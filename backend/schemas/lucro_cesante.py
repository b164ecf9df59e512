"""Data contracts for lost-income (lucro cesante) projections."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class CalculationType(str, Enum):
    PERCENTAGE = "Porcentaje"
    AMOUNT = "Monto"
    NONE = "Ninguno"


class ExportOption(str, Enum):
    NONE = "Ninguno"
    DOCUMENT = "PDF"
    SPREADSHEET = "Excel"


class PercentageAdjustment(BaseModel):
    """Adjustment expressed as a percentage of the year's income."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["Porcentaje"] = "Porcentaje"
    value: float

    def grow(self, income: float) -> float:
        return income * (1 + self.value / 100)

    def amount_on(self, income: float) -> float:
        return income * (self.value / 100)


class AmountAdjustment(BaseModel):
    """Adjustment expressed as a fixed amount per year."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["Monto"] = "Monto"
    value: float

    def grow(self, income: float) -> float:
        return income + self.value

    def amount_on(self, income: float) -> float:
        return self.value


class NoAdjustment(BaseModel):
    # value is kept so the form does not forget what the user typed
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["Ninguno"] = "Ninguno"
    value: float = 0.0

    def amount_on(self, income: float) -> float:
        return 0.0


Increment = Annotated[
    Union[PercentageAdjustment, AmountAdjustment],
    Field(discriminator="kind"),
]

Adjustment = Annotated[
    Union[PercentageAdjustment, AmountAdjustment, NoAdjustment],
    Field(discriminator="kind"),
]


class AssumptionSet(BaseModel):
    """
    Immutable snapshot of every input the projection needs.

    Only the age ordering and the event year range are checked, and that
    happens in the projection engine, so a half-edited form can still be
    represented here.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    annualWage: float
    eventYear: int
    eventAge: int
    retirementAge: int

    increment: Increment
    fringeBenefits: Adjustment = Field(default_factory=lambda: NoAdjustment(value=10))
    bonus: Adjustment = Field(default_factory=lambda: NoAdjustment(value=5000))

    discountRate: float
    discountStartYear: int
    personalConsumptionPercentage: float

    exportOption: ExportOption = ExportOption.NONE

    def with_changes(self, **updates: Any) -> "AssumptionSet":
        """Return a new, re-validated snapshot with the given fields replaced."""
        data = self.model_dump()
        data.update(updates)
        return AssumptionSet.model_validate(data)


class ProjectedYear(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    age: int
    income: float
    fringeBenefits: float
    bonus: float
    totalAnnualIncome: float
    personalConsumption: float
    netAnnualIncome: float
    discountedIncome: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: Tuple[ProjectedYear, ...]
    totalDiscountedLoss: float

    @property
    def yearsOfLoss(self) -> int:
        return len(self.rows)


def default_assumptions(today: Optional[date] = None) -> AssumptionSet:
    """Initial state of the input form."""
    year = (today or date.today()).year
    return AssumptionSet(
        annualWage=50000,
        eventYear=year,
        eventAge=35,
        retirementAge=65,
        increment=PercentageAdjustment(value=3),
        fringeBenefits=NoAdjustment(value=10),
        bonus=NoAdjustment(value=5000),
        discountRate=3,
        discountStartYear=year + 5,
        personalConsumptionPercentage=33.33,
        exportOption=ExportOption.NONE,
    )


__all__ = [
    "CalculationType",
    "ExportOption",
    "PercentageAdjustment",
    "AmountAdjustment",
    "NoAdjustment",
    "Increment",
    "Adjustment",
    "AssumptionSet",
    "ProjectedYear",
    "ProjectionResult",
    "default_assumptions",
]

"""Request bodies for the HTTP endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from versneller.models.building import BuildingDescriptor
from versneller.models.measure import Measure
from versneller.models.results import Scenario


class CalculationRequest(BaseModel):
    """A residence plus the measures selected for it."""

    name: str
    residence_id: str
    type_id: str
    building: BuildingDescriptor
    measures: list[Measure]
    estimated_labor_hours: float | None = Field(default=None, ge=0)


class CompareRequest(BaseModel):
    """Two or three previously calculated scenarios."""

    profiles: list[Scenario]


class BudgetRequest(BaseModel):
    """A calculated scenario and the number of residences it covers."""

    scenario: Scenario
    number_of_units: int = Field(default=0, ge=0)

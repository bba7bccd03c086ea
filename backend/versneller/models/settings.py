"""Global financial settings applied once per scenario."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """Financial multipliers for the scenario aggregation pipeline.

    Percentages and the labor rate must be non-negative. The corner-house
    correction is a fixed amount added to corner units and may be negative
    to express a discount.
    """

    model_config = ConfigDict(frozen=True)

    hourly_labor_cost: float = Field(default=51.0, ge=0)
    profit_percentage: float = Field(default=0.0, ge=0)
    vat_percentage: float = Field(default=21.0, ge=0)
    inflation_percentage: float = Field(default=1.0, ge=0)
    corner_house_correction: float = 0.0


class BudgetSettings(BaseModel):
    """Surcharge percentages and fixed additions for the detailed budget.

    Every percentage is taken over the direct costs plus the two custom
    values, never over a running subtotal.
    """

    model_config = ConfigDict(frozen=True)

    custom_value_1: float = Field(default=0.0, ge=0)
    custom_value_2: float = Field(default=0.0, ge=0)
    abk_materieel: float = Field(default=5.0, ge=0)
    afkoop: float = Field(default=2.0, ge=0)
    kosten_planuitwerking: float = Field(default=3.0, ge=0)
    nazorg_service: float = Field(default=1.5, ge=0)
    car_pi_dic_verzekering: float = Field(default=1.0, ge=0)
    bankgarantie: float = Field(default=0.5, ge=0)
    algemene_kosten: float = Field(default=8.0, ge=0)
    risico: float = Field(default=2.0, ge=0)
    winst: float = Field(default=5.0, ge=0)
    planvoorbereiding: float = Field(default=3.0, ge=0)
    huurdersbegeleiding: float = Field(default=2.0, ge=0)

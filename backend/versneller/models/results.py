"""Computed output models: per-measure results, scenarios and comparisons."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from versneller.models.enums import ComponentType


class ComponentCost(BaseModel):
    """Monetary contribution of one price component."""

    model_config = ConfigDict(frozen=True)

    component_name: str
    component_type: ComponentType
    amount: float
    quantity: float | None = None
    unit: str | None = None
    unit_price: float | None = None
    percentage: float | None = None
    reference: str | None = None


class ComputedMeasureResult(BaseModel):
    """Heat demand and cost of one measure for one building."""

    model_config = ConfigDict(frozen=True)

    measure_id: str
    name: str
    group: str | None = None
    heat_demand_value: float = 0.0
    cost_value: float = 0.0
    cost_breakdown: list[ComponentCost] = Field(default_factory=list)
    additional_cost: float = 0.0
    labor_hours: float = 0.0
    maintenance_cost_per_year: float = 0.0


class ScenarioTotals(BaseModel):
    """Scenario totals with every intermediate step of the cost pipeline.

    Each ``after_*`` value is the running cost once that step was applied,
    so the trace reads top to bottom in pipeline order.
    """

    model_config = ConfigDict(frozen=True)

    raw_cost: float
    labor_hours: float
    labor_cost: float
    after_labor: float
    after_profit: float
    after_corner_correction: float
    after_inflation: float
    total_budget: float
    total_heat_demand: float
    total_maintenance_cost_per_year: float = 0.0


class Scenario(BaseModel):
    """A saved selection of measures for one residence plus its totals.

    Scenarios are snapshots: a different measure set produces a new
    scenario rather than an update of this one.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    residence_id: str
    type_id: str
    measures: list[ComputedMeasureResult]
    total_budget: float
    total_heat_demand: float
    total_maintenance_cost_per_year: float = 0.0
    totals: ScenarioTotals | None = None
    saved_at: datetime = Field(default_factory=datetime.now)

    @property
    def measure_ids(self) -> set[str]:
        return {m.measure_id for m in self.measures}

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with display-ready strings."""
        from versneller.formatting import format_currency, format_heat_demand

        return {
            "name": self.name,
            "residence_id": self.residence_id,
            "type_id": self.type_id,
            "num_measures": len(self.measures),
            "total_budget_formatted": format_currency(self.total_budget),
            "total_heat_demand_formatted": format_heat_demand(self.total_heat_demand),
            "maintenance_per_year_formatted": format_currency(
                self.total_maintenance_cost_per_year
            ),
            "measures": [
                {
                    "name": m.name,
                    "group": m.group,
                    "cost_formatted": format_currency(m.cost_value),
                }
                for m in self.measures
            ],
            "saved_at_formatted": self.saved_at.strftime("%Y-%m-%d %H:%M"),
        }


class ScenarioComparison(BaseModel):
    """Signed deltas (``b - a``) and measure set differences of two scenarios."""

    model_config = ConfigDict(frozen=True)

    budget_delta: float
    heat_demand_delta: float
    maintenance_delta: float = 0.0
    measures_only_in_a: list[str]
    measures_only_in_b: list[str]
    measures_in_both: list[str]


class ProfileColumn(BaseModel):
    """One profile's column in a side-by-side comparison."""

    model_config = ConfigDict(frozen=True)

    name: str
    total_budget: float
    total_heat_demand: float
    total_maintenance_cost_per_year: float
    measures_by_group: dict[str, list[str]]
    delta_to_first: ScenarioComparison


class ProfileComparison(BaseModel):
    """Side-by-side comparison of up to three profiles grouped by measure group."""

    model_config = ConfigDict(frozen=True)

    groups: list[str]
    profiles: list[ProfileColumn]


class BudgetBreakdown(BaseModel):
    """Detailed budget from direct costs to the final amount including VAT."""

    model_config = ConfigDict(frozen=True)

    direct_costs: float
    custom_value_1_amount: float
    custom_value_2_amount: float
    subtotal_direct_and_custom: float
    abk_materieel_amount: float
    subtotal_after_abk: float
    afkoop_amount: float
    subtotal_direct_abk_afkoop: float
    planuitwerking_amount: float
    subtotal_after_planuitwerking: float
    nazorg_service_amount: float
    car_pi_dic_amount: float
    bankgarantie_amount: float
    algemene_kosten_amount: float
    risico_amount: float
    winst_amount: float
    subtotal_bouwkosten: float
    planvoorbereiding_amount: float
    huurdersbegeleiding_amount: float
    subtotal_after_bijkomende_kosten: float
    total_excl_vat: float
    vat: float
    final_amount: float
    price_per_unit_incl_vat: float
    price_per_unit_excl_vat: float

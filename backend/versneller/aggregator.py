"""Scenario aggregation: from per-measure results to scenario totals.

The financial pipeline runs in a fixed order, and the order matters:

1. **Raw cost**: sum of the selected measures' costs.
2. **Labor**: add labor hours times the hourly labor cost.
3. **Profit**: multiply by ``1 + profit%``.
4. **Corner-house correction**: add the fixed correction, corner units only.
5. **Inflation**: multiply by ``1 + inflation%``.
6. **VAT**: multiply by ``1 + VAT%`` on the fully adjusted cost.

Heat demand is the plain sum over the measures and is never adjusted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from versneller.models.results import ScenarioTotals

if TYPE_CHECKING:
    from collections.abc import Sequence

    from versneller.models.building import BuildingDescriptor
    from versneller.models.results import ComputedMeasureResult
    from versneller.models.settings import Settings


def aggregate(
    selected_measures: Sequence[ComputedMeasureResult],
    settings: Settings,
    building: BuildingDescriptor,
    estimated_labor_hours: float | None = None,
) -> ScenarioTotals:
    """Combine measure results into scenario totals.

    Args:
        selected_measures: Computed results of the measures in the scenario.
        settings: Validated financial settings.
        building: The residence; only its corner-unit flag is read.
        estimated_labor_hours: Labor hours for the whole scenario. Defaults
            to the sum of the measures' own labor hours.
    """
    raw_cost = sum(m.cost_value for m in selected_measures)
    if estimated_labor_hours is None:
        labor_hours = sum(m.labor_hours for m in selected_measures)
    else:
        labor_hours = estimated_labor_hours
    labor_cost = labor_hours * settings.hourly_labor_cost

    after_labor = raw_cost + labor_cost
    after_profit = after_labor * (1 + settings.profit_percentage / 100.0)
    after_corner = after_profit
    if building.is_corner_unit:
        after_corner += settings.corner_house_correction
    after_inflation = after_corner * (1 + settings.inflation_percentage / 100.0)
    total_budget = after_inflation * (1 + settings.vat_percentage / 100.0)

    return ScenarioTotals(
        raw_cost=raw_cost,
        labor_hours=labor_hours,
        labor_cost=labor_cost,
        after_labor=after_labor,
        after_profit=after_profit,
        after_corner_correction=after_corner,
        after_inflation=after_inflation,
        total_budget=total_budget,
        total_heat_demand=sum(m.heat_demand_value for m in selected_measures),
        total_maintenance_cost_per_year=sum(
            m.maintenance_cost_per_year for m in selected_measures
        ),
    )

"""Retrofit calculation engine.

The RetrofitEngine turns a residence description and a selection of
measures into a scenario snapshot:

1. **Measure calculation**: per measure, look up the heat demand for the
   residence's typology and construction period and price every component
   (fixed quantity times unit rate, or a percentage of an earlier
   component), plus flat-cost additional components.
2. **Aggregation**: add labor, profit, corner-house correction, inflation
   and VAT in that order to reach the total budget; sum the heat demand.
3. **Snapshot**: wrap results and totals in an immutable ``Scenario``.

Scenarios can then be broken down into a detailed budget or compared.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from versneller.aggregator import aggregate
from versneller.budget import budget_breakdown
from versneller.comparison import compare, compare_profiles
from versneller.components import calculate_measure
from versneller.models.results import Scenario
from versneller.models.settings import BudgetSettings, Settings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from versneller.data.catalog import PriceCatalog
    from versneller.models.building import BuildingDescriptor
    from versneller.models.measure import Measure
    from versneller.models.results import (
        BudgetBreakdown,
        ComputedMeasureResult,
        ProfileComparison,
        ScenarioComparison,
    )

ENGINE_VERSION = "0.1.0"


class RetrofitEngine:
    """Calculation engine bound to a price catalog and financial settings.

    Args:
        catalog: Unit rates and additional component costs.
        settings: Financial settings for the aggregation pipeline.
        budget_settings: Surcharges for the detailed budget breakdown.

    Example::

        from versneller import create_default_engine

        engine = create_default_engine()
        scenario = engine.calculate_scenario(
            "Basis renovatie", "woning-1", "type-1", building, measures
        )
    """

    def __init__(
        self,
        catalog: PriceCatalog,
        settings: Settings | None = None,
        budget_settings: BudgetSettings | None = None,
    ) -> None:
        self._catalog = catalog
        self._settings = settings or Settings()
        self._budget_settings = budget_settings or BudgetSettings()

    @property
    def catalog(self) -> PriceCatalog:
        return self._catalog

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def budget_settings(self) -> BudgetSettings:
        return self._budget_settings

    def calculate_measure(
        self, measure: Measure, building: BuildingDescriptor
    ) -> ComputedMeasureResult:
        return calculate_measure(measure, building, self._catalog)

    def calculate_scenario(
        self,
        name: str,
        residence_id: str,
        type_id: str,
        building: BuildingDescriptor,
        measures: Sequence[Measure],
        estimated_labor_hours: float | None = None,
    ) -> Scenario:
        """Calculate every measure and aggregate them into a scenario.

        Raises:
            ComponentResolutionError: If a measure has a broken price
                component reference.
            FormulaError: If a quantity formula cannot be evaluated.
            PriceCatalogError: If a unit or additional component is unknown.
        """
        results = [self.calculate_measure(m, building) for m in measures]
        totals = aggregate(
            results,
            self._settings,
            building,
            estimated_labor_hours=estimated_labor_hours,
        )
        return Scenario(
            name=name,
            residence_id=residence_id,
            type_id=type_id,
            measures=results,
            total_budget=totals.total_budget,
            total_heat_demand=totals.total_heat_demand,
            total_maintenance_cost_per_year=totals.total_maintenance_cost_per_year,
            totals=totals,
        )

    def budget(self, scenario: Scenario, number_of_units: int = 0) -> BudgetBreakdown:
        """Detailed budget over the scenario's direct measure costs."""
        direct_costs = sum(m.cost_value for m in scenario.measures)
        return budget_breakdown(
            direct_costs,
            self._budget_settings,
            self._settings.vat_percentage,
            number_of_units=number_of_units,
        )

    def compare(self, a: Scenario, b: Scenario) -> ScenarioComparison:
        return compare(a, b)

    def compare_profiles(self, profiles: Sequence[Scenario]) -> ProfileComparison:
        return compare_profiles(profiles)

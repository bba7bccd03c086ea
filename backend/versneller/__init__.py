"""Versneller retrofit cost and heat-demand engine.

Usage::

    from versneller import create_default_engine, BuildingDescriptor

    engine = create_default_engine()
    scenario = engine.calculate_scenario(
        "Basis renovatie", "woning-1", "type-1", building, measures
    )
"""

from versneller.aggregator import aggregate
from versneller.budget import budget_breakdown
from versneller.comparison import compare, compare_profiles
from versneller.components import calculate_measure, evaluate_components
from versneller.data.catalog import PriceCatalog
from versneller.data.rates import AdditionalComponent, UnitRate
from versneller.engine import RetrofitEngine
from versneller.exceptions import (
    ComparisonError,
    ComponentResolutionError,
    FormulaError,
    PriceCatalogError,
    VersnellerError,
)
from versneller.factory import create_default_engine
from versneller.heat_demand import get_heat_demand_value
from versneller.models.building import BuildingDescriptor
from versneller.models.enums import ComponentType, Typology
from versneller.models.measure import (
    FixedComponent,
    FormulaToken,
    HeatDemandTable,
    Measure,
    PercentageComponent,
    PeriodValue,
)
from versneller.models.results import (
    BudgetBreakdown,
    ComponentCost,
    ComputedMeasureResult,
    ProfileComparison,
    Scenario,
    ScenarioComparison,
    ScenarioTotals,
)
from versneller.models.settings import BudgetSettings, Settings
from versneller.typology import resolve_typology

__all__ = [
    "AdditionalComponent",
    "BudgetBreakdown",
    "BudgetSettings",
    "BuildingDescriptor",
    "ComparisonError",
    "ComponentCost",
    "ComponentResolutionError",
    "ComponentType",
    "ComputedMeasureResult",
    "FixedComponent",
    "FormulaError",
    "FormulaToken",
    "HeatDemandTable",
    "Measure",
    "PercentageComponent",
    "PeriodValue",
    "PriceCatalog",
    "PriceCatalogError",
    "ProfileComparison",
    "RetrofitEngine",
    "Scenario",
    "ScenarioComparison",
    "ScenarioTotals",
    "Settings",
    "Typology",
    "UnitRate",
    "VersnellerError",
    "aggregate",
    "budget_breakdown",
    "calculate_measure",
    "compare",
    "compare_profiles",
    "create_default_engine",
    "evaluate_components",
    "get_heat_demand_value",
    "resolve_typology",
]

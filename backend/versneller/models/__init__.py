"""Domain models for the Versneller retrofit engine."""

from versneller.models.building import BuildingDescriptor
from versneller.models.enums import ComponentType, TokenType, Typology
from versneller.models.measure import (
    FixedComponent,
    FormulaToken,
    HeatDemandTable,
    Measure,
    PercentageComponent,
    PeriodValue,
    PriceComponent,
)
from versneller.models.results import (
    BudgetBreakdown,
    ComponentCost,
    ComputedMeasureResult,
    ProfileColumn,
    ProfileComparison,
    Scenario,
    ScenarioComparison,
    ScenarioTotals,
)
from versneller.models.settings import BudgetSettings, Settings

__all__ = [
    "BudgetBreakdown",
    "BudgetSettings",
    "BuildingDescriptor",
    "ComponentCost",
    "ComponentType",
    "ComputedMeasureResult",
    "FixedComponent",
    "FormulaToken",
    "HeatDemandTable",
    "Measure",
    "PercentageComponent",
    "PeriodValue",
    "PriceComponent",
    "ProfileColumn",
    "ProfileComparison",
    "Scenario",
    "ScenarioComparison",
    "ScenarioTotals",
    "Settings",
    "TokenType",
    "Typology",
]

"""Price component evaluation for a single measure.

Components are evaluated in declaration order in two passes:

1. **Reference check**: every percentage component must refer to a
   component declared before it. Unknown, self and forward references
   raise ``ComponentResolutionError`` before any amount is computed.
2. **Evaluation**: fixed components price ``quantity * unit price``;
   percentage components take their share of the referenced amount.

The measure cost is the sum of the component amounts plus the flat cost of
every additional component.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from versneller.exceptions import ComponentResolutionError
from versneller.formula import evaluate_formula
from versneller.heat_demand import get_heat_demand_value
from versneller.models.enums import ComponentType
from versneller.models.measure import FixedComponent, PercentageComponent
from versneller.models.results import ComponentCost, ComputedMeasureResult
from versneller.typology import typology_for_building

if TYPE_CHECKING:
    from versneller.data.catalog import PriceCatalog
    from versneller.models.building import BuildingDescriptor
    from versneller.models.enums import Typology
    from versneller.models.measure import Measure


def check_component_references(measure: Measure) -> None:
    """Verify that percentage components only refer to earlier components.

    Raises:
        ComponentResolutionError: On an unknown, self or forward reference.
    """
    positions = {name: i for i, name in enumerate(measure.measure_prices)}
    for i, (name, component) in enumerate(measure.measure_prices.items()):
        if not isinstance(component, PercentageComponent):
            continue
        target = positions.get(component.of)
        if target is None:
            raise ComponentResolutionError(
                measure.name, name, component.of, "does not exist"
            )
        if target == i:
            raise ComponentResolutionError(
                measure.name, name, component.of, "is the component itself"
            )
        if target > i:
            raise ComponentResolutionError(
                measure.name, name, component.of, "is declared after it"
            )


def evaluate_components(
    measure: Measure,
    building: BuildingDescriptor,
    catalog: PriceCatalog,
) -> list[ComponentCost]:
    """Compute every price component of a measure in declaration order.

    Raises:
        ComponentResolutionError: If a percentage reference is broken.
        FormulaError: If a quantity formula cannot be evaluated.
        PriceCatalogError: If a unit has no catalog rate.
    """
    check_component_references(measure)

    typology = typology_for_building(building)
    variables = building.formula_variables()
    amounts: dict[str, float] = {}
    costs: list[ComponentCost] = []

    for name, component in measure.measure_prices.items():
        if isinstance(component, FixedComponent):
            cost = _evaluate_fixed(name, component, variables, catalog, typology)
        else:
            cost = ComponentCost(
                component_name=name,
                component_type=ComponentType.PERCENTAGE,
                amount=component.percentage / 100.0 * amounts[component.of],
                unit=component.unit,
                percentage=component.percentage,
                reference=component.of,
            )
        amounts[name] = cost.amount
        costs.append(cost)

    return costs


def _evaluate_fixed(
    name: str,
    component: FixedComponent,
    variables: dict[str, float],
    catalog: PriceCatalog,
    typology: Typology,
) -> ComponentCost:
    if component.formula is not None:
        quantity = evaluate_formula(component.formula, variables)
    else:
        quantity = component.quantity or 0.0

    if component.unit_price is not None:
        unit_price = component.unit_price
    else:
        unit_price = catalog.unit_price(component.unit, typology)

    return ComponentCost(
        component_name=name,
        component_type=ComponentType.FIXED,
        amount=quantity * unit_price,
        quantity=quantity,
        unit=component.unit,
        unit_price=unit_price,
    )


def calculate_measure(
    measure: Measure,
    building: BuildingDescriptor,
    catalog: PriceCatalog,
) -> ComputedMeasureResult:
    """Compute heat demand, cost and cost breakdown of one measure.

    Heat demand is looked up with the building's resolved typology
    (flags first, then the type label) rather than the raw label.
    """
    breakdown = evaluate_components(measure, building, catalog)
    additional_cost = sum(
        catalog.additional_cost(component_id)
        for component_id in measure.additional_components
    )
    heat_demand = get_heat_demand_value(
        measure,
        typology_for_building(building).value,
        building.build_period,
    )

    return ComputedMeasureResult(
        measure_id=measure.id,
        name=measure.name,
        group=measure.group,
        heat_demand_value=heat_demand,
        cost_value=sum(c.amount for c in breakdown) + additional_cost,
        cost_breakdown=breakdown,
        additional_cost=additional_cost,
        labor_hours=measure.labor_hours,
        maintenance_cost_per_year=measure.maintenance_cost_per_year,
    )

"""Heat-demand lookup per measure, typology and construction period."""

from __future__ import annotations

from typing import TYPE_CHECKING

from versneller.typology import resolve_typology

if TYPE_CHECKING:
    from versneller.models.measure import Measure

DEFAULT_HEAT_DEMAND = 0.0


def get_heat_demand_value(
    measure: Measure,
    building_type: str | None,
    build_period: str,
) -> float:
    """Return the heat-demand value of a measure for a building.

    Missing data is not an error: a measure without a heat-demand table, a
    typology without entries, or a period without a match all yield
    ``DEFAULT_HEAT_DEMAND``. Periods match by exact string equality.
    """
    if measure.heat_demand is None:
        return DEFAULT_HEAT_DEMAND

    values = measure.heat_demand.for_typology(resolve_typology(building_type))
    if not values:
        return DEFAULT_HEAT_DEMAND

    for entry in values:
        if entry.period == build_period:
            return entry.value
    return DEFAULT_HEAT_DEMAND

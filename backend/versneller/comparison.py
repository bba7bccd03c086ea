"""Scenario and profile comparison."""

from __future__ import annotations

from typing import TYPE_CHECKING

from versneller.exceptions import ComparisonError
from versneller.models.results import (
    ProfileColumn,
    ProfileComparison,
    ScenarioComparison,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from versneller.models.results import Scenario

MAX_PROFILES = 3
UNGROUPED = "Overig"


def compare(a: Scenario, b: Scenario) -> ScenarioComparison:
    """Compare two scenarios; deltas are signed as ``b - a``."""
    ids_a = a.measure_ids
    ids_b = b.measure_ids
    return ScenarioComparison(
        budget_delta=b.total_budget - a.total_budget,
        heat_demand_delta=b.total_heat_demand - a.total_heat_demand,
        maintenance_delta=(
            b.total_maintenance_cost_per_year - a.total_maintenance_cost_per_year
        ),
        measures_only_in_a=sorted(ids_a - ids_b),
        measures_only_in_b=sorted(ids_b - ids_a),
        measures_in_both=sorted(ids_a & ids_b),
    )


def measure_groups(profiles: Sequence[Scenario]) -> list[str]:
    """Sorted measure groups across profiles; ungrouped measures go to ``Overig``."""
    return sorted({m.group or UNGROUPED for p in profiles for m in p.measures})


def compare_profiles(profiles: Sequence[Scenario]) -> ProfileComparison:
    """Lay out up to three profiles side by side, grouped by measure group.

    Each column carries its delta against the first profile.

    Raises:
        ComparisonError: If fewer than two or more than three profiles are given.
    """
    if len(profiles) < 2:
        msg = "At least two profiles are needed for a comparison"
        raise ComparisonError(msg)
    if len(profiles) > MAX_PROFILES:
        msg = f"At most {MAX_PROFILES} profiles can be compared, got {len(profiles)}"
        raise ComparisonError(msg)

    groups = measure_groups(profiles)
    first = profiles[0]
    columns: list[ProfileColumn] = []
    for profile in profiles:
        by_group: dict[str, list[str]] = {group: [] for group in groups}
        for measure in profile.measures:
            by_group[measure.group or UNGROUPED].append(measure.name)
        columns.append(
            ProfileColumn(
                name=profile.name,
                total_budget=profile.total_budget,
                total_heat_demand=profile.total_heat_demand,
                total_maintenance_cost_per_year=profile.total_maintenance_cost_per_year,
                measures_by_group=by_group,
                delta_to_first=compare(first, profile),
            )
        )
    return ProfileComparison(groups=groups, profiles=columns)

"""Tests for price component evaluation and per-measure results."""

from __future__ import annotations

import pytest

from versneller.components import (
    calculate_measure,
    check_component_references,
    evaluate_components,
)
from versneller.data.catalog import PriceCatalog
from versneller.exceptions import (
    ComponentResolutionError,
    FormulaError,
    PriceCatalogError,
)
from versneller.models.building import BuildingDescriptor
from versneller.models.enums import ComponentType
from versneller.models.measure import (
    FixedComponent,
    FormulaToken,
    HeatDemandTable,
    Measure,
    PercentageComponent,
    PeriodValue,
)

# ---------------------------------------------------------------------------
# Helper builders
# ---------------------------------------------------------------------------


def _roof_measure(**overrides: object) -> Measure:
    defaults: dict[str, object] = {
        "id": "dak",
        "name": "Dakisolatie",
        "group": "Dak",
        "heat_demand": HeatDemandTable(
            grondgebonden=[PeriodValue(period="1965-1974", value=34.0)],
        ),
        "measure_prices": {
            "geisoleerde_dakplaat": FixedComponent(
                formula=[FormulaToken(type="variable", value="Dakoppervlak")],
                unit="m2",
            ),
            "extra_oppervlakte": PercentageComponent(
                percentage=10.0, of="geisoleerde_dakplaat"
            ),
        },
    }
    defaults.update(overrides)
    return Measure(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Fixed components
# ---------------------------------------------------------------------------


class TestFixedComponents:
    def test_literal_quantity_times_catalog_rate(
        self, catalog: PriceCatalog, building: BuildingDescriptor
    ) -> None:
        measure = _roof_measure(
            measure_prices={"kit": FixedComponent(quantity=12, unit="meters")}
        )
        [cost] = evaluate_components(measure, building, catalog)
        assert cost.component_name == "kit"
        assert cost.component_type == ComponentType.FIXED
        assert cost.quantity == 12
        assert cost.unit_price == 10.0
        assert cost.amount == pytest.approx(120.0)

    def test_formula_quantity(
        self, catalog: PriceCatalog, building: BuildingDescriptor
    ) -> None:
        costs = evaluate_components(_roof_measure(), building, catalog)
        assert costs[0].quantity == pytest.approx(60.0)
        assert costs[0].amount == pytest.approx(6_000.0)

    def test_component_unit_price_overrides_catalog(
        self, catalog: PriceCatalog, building: BuildingDescriptor
    ) -> None:
        measure = _roof_measure(
            measure_prices={
                "kit": FixedComponent(quantity=10, unit="meters", unit_price=7.5)
            }
        )
        [cost] = evaluate_components(measure, building, catalog)
        assert cost.amount == pytest.approx(75.0)

    def test_typology_specific_rate(self, catalog: PriceCatalog) -> None:
        flat = BuildingDescriptor(
            portiekflat=True, build_period="1965-1974", variables={"dakOppervlak": 60.0}
        )
        costs = evaluate_components(_roof_measure(), flat, catalog)
        assert costs[0].unit_price == 80.0
        assert costs[0].amount == pytest.approx(4_800.0)

    def test_typology_without_specific_rate_uses_base(
        self, catalog: PriceCatalog
    ) -> None:
        flat = BuildingDescriptor(galerieflat=True, variables={"dakOppervlak": 60.0})
        costs = evaluate_components(_roof_measure(), flat, catalog)
        assert costs[0].unit_price == 100.0

    def test_unknown_unit_raises(
        self, catalog: PriceCatalog, building: BuildingDescriptor
    ) -> None:
        measure = _roof_measure(
            measure_prices={"x": FixedComponent(quantity=1, unit="liters")}
        )
        with pytest.raises(PriceCatalogError, match="liters"):
            evaluate_components(measure, building, catalog)

    def test_formula_error_propagates(
        self, catalog: PriceCatalog, building: BuildingDescriptor
    ) -> None:
        measure = _roof_measure(
            measure_prices={
                "x": FixedComponent(
                    formula=[FormulaToken(type="variable", value="GevelOppervlak")],
                    unit="m2",
                )
            }
        )
        with pytest.raises(FormulaError):
            evaluate_components(measure, building, catalog)


# ---------------------------------------------------------------------------
# Percentage components
# ---------------------------------------------------------------------------


class TestPercentageComponents:
    def test_percentage_of_earlier_component(
        self, catalog: PriceCatalog, building: BuildingDescriptor
    ) -> None:
        costs = evaluate_components(_roof_measure(), building, catalog)
        assert [c.component_name for c in costs] == [
            "geisoleerde_dakplaat",
            "extra_oppervlakte",
        ]
        extra = costs[1]
        assert extra.component_type == ComponentType.PERCENTAGE
        assert extra.reference == "geisoleerde_dakplaat"
        assert extra.amount == pytest.approx(600.0)

    def test_chained_percentages(
        self, catalog: PriceCatalog, building: BuildingDescriptor
    ) -> None:
        measure = _roof_measure(
            measure_prices={
                "unit": FixedComponent(quantity=4, unit="pieces"),
                "montage": PercentageComponent(percentage=50.0, of="unit"),
                "afwerking": PercentageComponent(percentage=10.0, of="montage"),
            }
        )
        amounts = [c.amount for c in evaluate_components(measure, building, catalog)]
        assert amounts == pytest.approx([1_000.0, 500.0, 50.0])

    def test_forward_reference_raises(
        self, catalog: PriceCatalog, building: BuildingDescriptor
    ) -> None:
        measure = _roof_measure(
            measure_prices={
                "extra_oppervlakte": PercentageComponent(
                    percentage=10.0, of="geisoleerde_dakplaat"
                ),
                "geisoleerde_dakplaat": FixedComponent(quantity=60, unit="m2"),
            }
        )
        with pytest.raises(ComponentResolutionError, match="declared after"):
            evaluate_components(measure, building, catalog)

    def test_unknown_reference_raises(
        self, catalog: PriceCatalog, building: BuildingDescriptor
    ) -> None:
        measure = _roof_measure(
            measure_prices={
                "extra": PercentageComponent(percentage=10.0, of="bestaat_niet"),
            }
        )
        with pytest.raises(ComponentResolutionError, match="does not exist") as info:
            evaluate_components(measure, building, catalog)
        assert info.value.component == "extra"
        assert info.value.reference == "bestaat_niet"

    def test_self_reference_raises(self) -> None:
        measure = _roof_measure(
            measure_prices={"x": PercentageComponent(percentage=10.0, of="x")}
        )
        with pytest.raises(ComponentResolutionError, match="itself"):
            check_component_references(measure)

    def test_reference_check_runs_before_pricing(
        self, building: BuildingDescriptor
    ) -> None:
        """A broken reference is reported even when pricing would also fail."""
        empty_catalog = PriceCatalog([])
        measure = _roof_measure(
            measure_prices={
                "a": FixedComponent(quantity=1, unit="m2"),
                "b": PercentageComponent(percentage=5.0, of="c"),
            }
        )
        with pytest.raises(ComponentResolutionError):
            evaluate_components(measure, building, empty_catalog)


# ---------------------------------------------------------------------------
# Measure results
# ---------------------------------------------------------------------------


class TestCalculateMeasure:
    def test_cost_and_heat_demand(
        self, catalog: PriceCatalog, building: BuildingDescriptor
    ) -> None:
        result = calculate_measure(_roof_measure(), building, catalog)
        assert result.measure_id == "dak"
        assert result.group == "Dak"
        assert result.heat_demand_value == 34.0
        assert result.cost_value == pytest.approx(6_600.0)
        assert len(result.cost_breakdown) == 2

    def test_additional_components_are_added(
        self, catalog: PriceCatalog, building: BuildingDescriptor
    ) -> None:
        measure = _roof_measure(additional_components=["steiger", "container"])
        result = calculate_measure(measure, building, catalog)
        assert result.additional_cost == pytest.approx(1_400.0)
        assert result.cost_value == pytest.approx(8_000.0)

    def test_unknown_additional_component_raises(
        self, catalog: PriceCatalog, building: BuildingDescriptor
    ) -> None:
        measure = _roof_measure(additional_components=["hoogwerker"])
        with pytest.raises(PriceCatalogError, match="hoogwerker"):
            calculate_measure(measure, building, catalog)

    def test_measure_without_prices(
        self, catalog: PriceCatalog, building: BuildingDescriptor
    ) -> None:
        measure = Measure(id="advies", name="Energieadvies")
        result = calculate_measure(measure, building, catalog)
        assert result.cost_value == 0
        assert result.heat_demand_value == 0
        assert result.cost_breakdown == []

    def test_labor_and_maintenance_carried(
        self, catalog: PriceCatalog, building: BuildingDescriptor
    ) -> None:
        measure = _roof_measure(labor_hours=8.0, maintenance_cost_per_year=25.0)
        result = calculate_measure(measure, building, catalog)
        assert result.labor_hours == 8.0
        assert result.maintenance_cost_per_year == 25.0

    def test_heat_demand_uses_building_flags(self, catalog: PriceCatalog) -> None:
        measure = _roof_measure(
            heat_demand=HeatDemandTable(
                portiek=[PeriodValue(period="1965-1974", value=19.0)],
            ),
        )
        flat = BuildingDescriptor(
            portiekflat=True,
            type_label="Flat",
            build_period="1965-1974",
            variables={"dakOppervlak": 60.0},
        )
        result = calculate_measure(measure, flat, catalog)
        assert result.heat_demand_value == 19.0

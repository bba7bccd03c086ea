"""Tests for the price catalog lookups."""

from __future__ import annotations

import pytest

from versneller.data.catalog import PriceCatalog
from versneller.data.seed import SEED_ADDITIONAL_COMPONENTS, SEED_UNIT_RATES
from versneller.exceptions import PriceCatalogError
from versneller.models.enums import Typology


class TestUnitPrice:
    def test_base_price(self, catalog: PriceCatalog) -> None:
        assert catalog.unit_price("meters") == 10.0

    def test_unit_match_ignores_case_and_whitespace(self, catalog: PriceCatalog) -> None:
        assert catalog.unit_price(" M2 ") == 100.0

    def test_typology_price(self, catalog: PriceCatalog) -> None:
        assert catalog.unit_price("m2", Typology.PORTIEK) == 80.0

    def test_typology_without_override(self, catalog: PriceCatalog) -> None:
        assert catalog.unit_price("m2", Typology.GALLERIJ) == 100.0

    def test_unknown_unit(self, catalog: PriceCatalog) -> None:
        with pytest.raises(PriceCatalogError):
            catalog.unit_price("ton")

    def test_get_rate_returns_none_for_unknown(self, catalog: PriceCatalog) -> None:
        assert catalog.get_rate("ton") is None

    def test_units_listing(self, catalog: PriceCatalog) -> None:
        assert catalog.units == ["m2", "meters", "pieces"]


class TestAdditionalComponents:
    def test_known_component(self, catalog: PriceCatalog) -> None:
        assert catalog.additional_cost("steiger") == 1_000.0

    def test_unknown_component(self, catalog: PriceCatalog) -> None:
        with pytest.raises(PriceCatalogError, match="hoogwerker"):
            catalog.additional_cost("hoogwerker")


class TestSeedCatalog:
    def test_seed_units_unique(self) -> None:
        units = [rate.unit.lower() for rate in SEED_UNIT_RATES]
        assert len(units) == len(set(units))

    def test_seed_components_resolvable(self) -> None:
        catalog = PriceCatalog(SEED_UNIT_RATES, SEED_ADDITIONAL_COMPONENTS)
        for component in SEED_ADDITIONAL_COMPONENTS:
            assert catalog.additional_cost(component.id) == component.cost

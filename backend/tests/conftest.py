"""Shared fixtures for the Versneller test suite."""

from __future__ import annotations

import pytest

from versneller.data.catalog import PriceCatalog
from versneller.data.rates import AdditionalComponent, UnitRate
from versneller.models.building import BuildingDescriptor
from versneller.models.enums import Typology


@pytest.fixture()
def catalog() -> PriceCatalog:
    """Small catalog with round numbers for hand-checked amounts."""
    return PriceCatalog(
        [
            UnitRate(
                unit="m2",
                price=100.0,
                prices_per_type={Typology.PORTIEK: 80.0},
            ),
            UnitRate(unit="meters", price=10.0),
            UnitRate(unit="pieces", price=250.0),
        ],
        [
            AdditionalComponent(id="steiger", name="Steigerwerk", cost=1_000.0),
            AdditionalComponent(id="container", name="Afvalcontainer", cost=400.0),
        ],
    )


@pytest.fixture()
def building() -> BuildingDescriptor:
    """Ground-bound terraced house from the 1965-1974 period."""
    return BuildingDescriptor(
        grondgebonden=True,
        type_label="Eengezinswoning",
        build_period="1965-1974",
        width=5.0,
        depth=10.0,
        unit_count=1,
        variables={"dakOppervlak": 60.0, "kozijnOmtrekTotaal": 40.0},
    )

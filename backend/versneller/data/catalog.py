"""Price catalog for looking up unit rates and add-on costs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from versneller.exceptions import PriceCatalogError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from versneller.data.rates import AdditionalComponent, UnitRate
    from versneller.models.enums import Typology


class PriceCatalog:
    """In-memory catalog of unit rates and additional components.

    Units are matched case-insensitively. Lookups never default to zero:
    a missing entry means the price definition is broken.
    """

    def __init__(
        self,
        rates: Iterable[UnitRate],
        additional_components: Iterable[AdditionalComponent] = (),
    ) -> None:
        self._rates = {rate.unit.lower().strip(): rate for rate in rates}
        self._additional = {c.id: c for c in additional_components}

    @property
    def units(self) -> list[str]:
        return sorted(rate.unit for rate in self._rates.values())

    def get_rate(self, unit: str) -> UnitRate | None:
        return self._rates.get(unit.lower().strip())

    def unit_price(self, unit: str, typology: Typology | None = None) -> float:
        """Look up the price for one unit, per typology when available.

        Raises:
            PriceCatalogError: If the unit has no rate.
        """
        rate = self.get_rate(unit)
        if rate is None:
            msg = f"No unit rate found for unit '{unit}'"
            raise PriceCatalogError(msg)
        if typology is not None and typology in rate.prices_per_type:
            return rate.prices_per_type[typology]
        return rate.price

    def additional_cost(self, component_id: str) -> float:
        """Look up the flat cost of an additional component.

        Raises:
            PriceCatalogError: If the identifier is unknown.
        """
        component = self._additional.get(component_id)
        if component is None:
            msg = f"No additional component found with id '{component_id}'"
            raise PriceCatalogError(msg)
        return component.cost

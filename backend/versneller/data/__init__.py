"""Price catalog data for the Versneller engine."""

from versneller.data.catalog import PriceCatalog
from versneller.data.rates import AdditionalComponent, UnitRate

__all__ = [
    "AdditionalComponent",
    "PriceCatalog",
    "UnitRate",
]

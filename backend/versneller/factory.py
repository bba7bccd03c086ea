"""Factory functions for creating pre-configured RetrofitEngine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from versneller.data.catalog import PriceCatalog
from versneller.data.seed import SEED_ADDITIONAL_COMPONENTS, SEED_UNIT_RATES
from versneller.engine import RetrofitEngine

if TYPE_CHECKING:
    from versneller.models.settings import BudgetSettings, Settings


def create_default_catalog() -> PriceCatalog:
    """Create a PriceCatalog holding the built-in seed rates."""
    return PriceCatalog(SEED_UNIT_RATES, SEED_ADDITIONAL_COMPONENTS)


def create_default_engine(
    settings: Settings | None = None,
    budget_settings: BudgetSettings | None = None,
) -> RetrofitEngine:
    """Create a RetrofitEngine wired up with the seed price catalog.

    Without explicit settings the engine uses the default financial
    settings (labor 51/h, 21% VAT, 1% inflation).

    Returns:
        A RetrofitEngine ready to calculate scenarios.
    """
    return RetrofitEngine(
        create_default_catalog(),
        settings=settings,
        budget_settings=budget_settings,
    )

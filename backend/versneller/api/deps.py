"""Dependency wiring for FastAPI endpoints."""

from __future__ import annotations

import logging

from versneller.config import budget_settings_from_env, settings_from_env
from versneller.engine import RetrofitEngine
from versneller.factory import create_default_engine

logger = logging.getLogger(__name__)


def create_engine() -> RetrofitEngine:
    """Create a RetrofitEngine with settings from the environment.

    Reads ``VERSNELLER_*`` overrides for the financial settings and budget
    surcharges; anything not set keeps its default.
    """
    settings = settings_from_env()
    budget_settings = budget_settings_from_env()
    logger.info(
        "Engine configured: labor %.2f/h, VAT %.1f%%, inflation %.1f%%",
        settings.hourly_labor_cost,
        settings.vat_percentage,
        settings.inflation_percentage,
    )
    return create_default_engine(settings=settings, budget_settings=budget_settings)

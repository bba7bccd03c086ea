"""Settings loaded from the environment.

Every financial setting can be overridden with a ``VERSNELLER_`` prefixed
environment variable, e.g. ``VERSNELLER_VAT_PERCENTAGE=9``. Values that are
not set keep their defaults; values that fail validation raise.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any, TypeVar

from versneller.models.settings import BudgetSettings, Settings

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pydantic import BaseModel

logger = logging.getLogger(__name__)

ENV_PREFIX = "VERSNELLER_"

_ModelT = TypeVar("_ModelT", bound="BaseModel")


def _from_env(model: type[_ModelT], environ: Mapping[str, str] | None) -> _ModelT:
    env = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}
    for field_name in model.model_fields:
        raw = env.get(f"{ENV_PREFIX}{field_name.upper()}")
        if raw is None or raw.strip() == "":
            continue
        overrides[field_name] = raw.strip()
        logger.info("Setting %s overridden from environment: %s", field_name, raw)
    return model.model_validate(overrides)


def settings_from_env(environ: Mapping[str, str] | None = None) -> Settings:
    """Build financial settings from defaults plus environment overrides.

    Raises:
        pydantic.ValidationError: If an override is not a valid value.
    """
    return _from_env(Settings, environ)


def budget_settings_from_env(environ: Mapping[str, str] | None = None) -> BudgetSettings:
    """Build budget surcharges from defaults plus environment overrides."""
    return _from_env(BudgetSettings, environ)


def cors_origins_from_env(environ: Mapping[str, str] | None = None) -> list[str]:
    """Allowed CORS origins, comma separated in ``VERSNELLER_CORS_ORIGINS``."""
    env = os.environ if environ is None else environ
    raw = env.get(f"{ENV_PREFIX}CORS_ORIGINS", "http://localhost:3000")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]

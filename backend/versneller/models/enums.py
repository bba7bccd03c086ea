"""Enums for the Versneller domain models."""

from enum import StrEnum


class Typology(StrEnum):
    """Canonical building categories used as heat-demand and price keys."""

    GRONDGEBONDEN = "grondgebonden"
    PORTIEK = "portiek"
    GALLERIJ = "gallerij"


class ComponentType(StrEnum):
    """How a price component derives its amount."""

    FIXED = "fixed"
    PERCENTAGE = "percentage"


class TokenType(StrEnum):
    """Token kinds in a quantity formula."""

    VARIABLE = "variable"
    OPERATOR = "operator"

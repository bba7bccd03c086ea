"""Custom exception hierarchy for the Versneller engine."""

from __future__ import annotations


class VersnellerError(Exception):
    """Base exception for all Versneller errors."""


class ComponentResolutionError(VersnellerError):
    """Raised when a percentage price component cannot be resolved.

    Either the referenced component does not exist, or it is declared after
    the component that refers to it.
    """

    def __init__(self, measure: str, component: str, reference: str, reason: str) -> None:
        self.measure = measure
        self.component = component
        self.reference = reference
        super().__init__(
            f"Measure '{measure}': component '{component}' references "
            f"'{reference}' which {reason}"
        )


class FormulaError(VersnellerError):
    """Raised when a quantity formula cannot be evaluated."""


class PriceCatalogError(VersnellerError):
    """Raised when a unit rate or additional component is not in the catalog."""


class ComparisonError(VersnellerError):
    """Raised when a profile comparison is requested with an invalid selection."""

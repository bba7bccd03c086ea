"""Formatting helpers for calculation output.

Amounts are shown the way Dutch housing corporations read them: euro sign,
dot as thousands separator, comma for cents (e.g. '€ 12.437,89').
"""

from __future__ import annotations


def _swap_separators(text: str) -> str:
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency(amount: float) -> str:
    """Format an amount in euros with two decimals, nl-NL style."""
    return f"€ {_swap_separators(f'{amount:,.2f}')}"


def format_delta(amount: float) -> str:
    """Format a signed euro difference, always showing the sign."""
    sign = "+" if amount >= 0 else "-"
    return f"{sign}{format_currency(abs(amount))}"


def format_heat_demand(value: float) -> str:
    """Format a heat-demand reduction as 'XX,X kWh/m²'."""
    return f"{_swap_separators(f'{value:,.1f}')} kWh/m²"

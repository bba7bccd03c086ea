"""Schema for price catalog entries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from versneller.models.enums import Typology


class UnitRate(BaseModel):
    """Price per unit (m2, meter, piece, ...) for fixed price components.

    When ``prices_per_type`` has an entry for the building's typology, that
    price replaces ``price``.
    """

    model_config = ConfigDict(frozen=True)

    unit: str
    price: float = Field(ge=0)
    prices_per_type: dict[Typology, float] = Field(default_factory=dict)
    notes: str = ""


class AdditionalComponent(BaseModel):
    """A flat-cost add-on referenced by measures through its identifier."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    cost: float = Field(ge=0)

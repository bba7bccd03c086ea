"""Building domain models for the Versneller engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BuildingDescriptor(BaseModel):
    """Read-only description of the residence a calculation is made for.

    The three typology flags are meant to be mutually exclusive but are
    stored independently, exactly as the residence records carry them.
    ``variables`` holds residence-specific quantities (roof area, facade
    area, frame perimeter, ...) that quantity formulas refer to by name.
    """

    model_config = ConfigDict(frozen=True)

    grondgebonden: bool = False
    portiekflat: bool = False
    galerieflat: bool = False
    type_label: str = ""
    build_period: str = ""
    width: float = Field(default=0.0, ge=0)
    depth: float = Field(default=0.0, ge=0)
    unit_count: int = Field(default=1, ge=0)
    is_corner_unit: bool = False
    variables: dict[str, float] = Field(default_factory=dict)

    @property
    def floor_area(self) -> float:
        return self.width * self.depth

    def formula_variables(self) -> dict[str, float]:
        """Built-in dimension variables, overridden by explicit ``variables``."""
        values: dict[str, float] = {
            "breedte": self.width,
            "diepte": self.depth,
            "aantalWoningen": float(self.unit_count),
            "vloerOppervlak": self.floor_area,
        }
        values.update(self.variables)
        return values

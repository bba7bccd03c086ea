"""Retrofit measure models: heat-demand tables and price components."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from versneller.models.enums import TokenType, Typology


class PeriodValue(BaseModel):
    """Heat-demand value for one construction period."""

    model_config = ConfigDict(frozen=True)

    period: str
    value: float


class HeatDemandTable(BaseModel):
    """Heat-demand values per typology, each an ordered list of periods.

    Older records spell the ground-bound key ``grongebonden``; both
    spellings are accepted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    grondgebonden: list[PeriodValue] = Field(
        default_factory=list,
        validation_alias=AliasChoices("grondgebonden", "grongebonden"),
    )
    portiek: list[PeriodValue] = Field(default_factory=list)
    gallerij: list[PeriodValue] = Field(default_factory=list)

    @field_validator("grondgebonden", "portiek", "gallerij")
    @classmethod
    def periods_must_be_unique(cls, v: list[PeriodValue]) -> list[PeriodValue]:
        seen: set[str] = set()
        for entry in v:
            if entry.period in seen:
                msg = f"Duplicate heat-demand period '{entry.period}'"
                raise ValueError(msg)
            seen.add(entry.period)
        return v

    def for_typology(self, typology: Typology) -> list[PeriodValue]:
        return getattr(self, typology.value)


class FormulaToken(BaseModel):
    """A single step of a quantity formula: a variable name or an operator."""

    model_config = ConfigDict(frozen=True)

    type: TokenType
    value: str

    @model_validator(mode="after")
    def operator_must_be_known(self) -> FormulaToken:
        if self.type == TokenType.OPERATOR and self.value not in {"+", "-", "*", "/"}:
            msg = f"Unknown formula operator '{self.value}'"
            raise ValueError(msg)
        return self


class FixedComponent(BaseModel):
    """A price component priced as ``quantity * unit price``.

    The quantity is either a literal or a formula over building variables.
    The unit price comes from the price catalog by ``unit`` unless the
    component carries its own ``unit_price``.
    """

    model_config = ConfigDict(frozen=True)

    component_type: Literal["fixed"] = "fixed"
    quantity: float | None = Field(default=None, ge=0)
    formula: list[FormulaToken] | None = None
    unit: str
    unit_price: float | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def exactly_one_quantity_source(self) -> FixedComponent:
        if (self.quantity is None) == (self.formula is None):
            msg = "A fixed component needs exactly one of 'quantity' or 'formula'"
            raise ValueError(msg)
        return self


class PercentageComponent(BaseModel):
    """A price component worth a percentage of another component's amount."""

    model_config = ConfigDict(frozen=True)

    component_type: Literal["percentage"] = "percentage"
    percentage: float = Field(ge=0)
    of: str
    unit: str | None = None


PriceComponent = Annotated[
    FixedComponent | PercentageComponent,
    Field(discriminator="component_type"),
]


class Measure(BaseModel):
    """A retrofit measure as authored in the measure catalogue.

    ``measure_prices`` is ordered: components are evaluated in declaration
    order and a percentage component may only refer to an earlier one.
    ``labor_hours`` is the pre-resolved installation effort for one
    application of the measure.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    group: str | None = None
    heat_demand: HeatDemandTable | None = None
    measure_prices: dict[str, PriceComponent] = Field(default_factory=dict)
    additional_components: list[str] = Field(default_factory=list)
    labor_hours: float = Field(default=0.0, ge=0)
    maintenance_cost_per_year: float = Field(default=0.0, ge=0)

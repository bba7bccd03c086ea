"""Seed catalog and sample measures for the Versneller engine.

Unit rates are indicative 2025 Dutch retrofit prices excluding VAT. The
sample measures use the five construction periods of the heat-demand
tables.
"""

from versneller.data.rates import AdditionalComponent, UnitRate
from versneller.models.building import BuildingDescriptor
from versneller.models.enums import Typology
from versneller.models.measure import (
    FixedComponent,
    FormulaToken,
    HeatDemandTable,
    Measure,
    PercentageComponent,
    PeriodValue,
)

BUILD_PERIODS: list[str] = [
    "tot 1965",
    "1965-1974",
    "1975-1982",
    "1983-1987",
    "1988-1991",
]

SEED_UNIT_RATES: list[UnitRate] = [
    UnitRate(
        unit="m2",
        price=85.0,
        prices_per_type={Typology.PORTIEK: 78.0, Typology.GALLERIJ: 80.0},
        notes="Insulated roof panel incl. fixing",
    ),
    UnitRate(unit="meters", price=42.5, notes="Linear work: frames, edges, seams"),
    UnitRate(unit="pieces", price=325.0, notes="Per installed unit"),
    UnitRate(unit="m2 glas", price=145.0, notes="HR++ glazing incl. beads"),
    UnitRate(unit="m2 vloer", price=32.0, notes="Underfloor insulation"),
]

SEED_ADDITIONAL_COMPONENTS: list[AdditionalComponent] = [
    AdditionalComponent(id="steiger", name="Steigerwerk", cost=1_250.0),
    AdditionalComponent(id="container", name="Afvalcontainer", cost=450.0),
    AdditionalComponent(id="bouwplaats", name="Bouwplaatsinrichting", cost=800.0),
]


def _periods(*values: float) -> list[PeriodValue]:
    return [
        PeriodValue(period=period, value=value)
        for period, value in zip(BUILD_PERIODS, values, strict=True)
    ]


def _var(name: str) -> FormulaToken:
    return FormulaToken(type="variable", value=name)


def _op(symbol: str) -> FormulaToken:
    return FormulaToken(type="operator", value=symbol)


SAMPLE_MEASURES: list[Measure] = [
    Measure(
        id="dakisolatie",
        name="Dakisolatie met geisoleerde dakplaat",
        group="Dak",
        heat_demand=HeatDemandTable(
            grondgebonden=_periods(38.0, 34.0, 22.0, 15.0, 11.0),
            portiek=_periods(21.0, 19.0, 12.0, 8.0, 6.0),
            gallerij=_periods(19.0, 17.0, 11.0, 7.0, 5.0),
        ),
        measure_prices={
            "geisoleerde_dakplaat": FixedComponent(
                formula=[_var("Dakoppervlak")],
                unit="m2",
            ),
            "extra_oppervlakte": PercentageComponent(
                percentage=10.0,
                of="geisoleerde_dakplaat",
                unit="m2",
            ),
        },
        additional_components=["steiger"],
        labor_hours=16.0,
        maintenance_cost_per_year=35.0,
    ),
    Measure(
        id="kozijnen",
        name="HR++ glas in bestaande kozijnen",
        group="Gevel",
        heat_demand=HeatDemandTable(
            grondgebonden=_periods(24.0, 22.0, 18.0, 9.0, 6.0),
            portiek=_periods(20.0, 18.0, 15.0, 8.0, 5.0),
            gallerij=_periods(20.0, 18.0, 15.0, 8.0, 5.0),
        ),
        measure_prices={
            "glas": FixedComponent(
                formula=[_var("gevelOppervlakTotaal"), _op("*"), _var("glasAandeel")],
                unit="m2 glas",
            ),
            "kitwerk": FixedComponent(
                formula=[_var("OmtrekKozijnen")],
                unit="meters",
                unit_price=6.5,
            ),
        },
        labor_hours=12.0,
        maintenance_cost_per_year=20.0,
    ),
    Measure(
        id="vloerisolatie",
        name="Vloerisolatie",
        group="Vloer",
        heat_demand=HeatDemandTable(
            grondgebonden=_periods(16.0, 15.0, 9.0, 4.0, 3.0),
        ),
        measure_prices={
            "isolatie": FixedComponent(
                formula=[_var("BreedteWoning"), _op("*"), _var("diepte")],
                unit="m2 vloer",
            ),
        },
        labor_hours=6.0,
    ),
    Measure(
        id="ventilatie",
        name="Mechanische ventilatie met CO2-sturing",
        measure_prices={
            "unit": FixedComponent(quantity=1, unit="pieces"),
            "montage": PercentageComponent(percentage=25.0, of="unit"),
        },
        additional_components=["bouwplaats"],
        labor_hours=4.0,
        maintenance_cost_per_year=60.0,
    ),
]

SAMPLE_BUILDING = BuildingDescriptor(
    grondgebonden=True,
    type_label="Eengezinswoning tussenwoning",
    build_period="1965-1974",
    width=5.4,
    depth=9.0,
    unit_count=1,
    variables={
        "dakOppervlak": 62.0,
        "gevelOppervlakTotaal": 48.0,
        "glasAandeel": 0.3,
        "kozijnOmtrekTotaal": 56.0,
    },
)

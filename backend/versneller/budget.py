"""Detailed budget breakdown from direct costs to the amount including VAT."""

from __future__ import annotations

from typing import TYPE_CHECKING

from versneller.models.results import BudgetBreakdown

if TYPE_CHECKING:
    from versneller.models.settings import BudgetSettings


def budget_breakdown(
    direct_costs: float,
    budget_settings: BudgetSettings,
    vat_percentage: float,
    number_of_units: int = 0,
) -> BudgetBreakdown:
    """Spread surcharges over the direct costs and add VAT.

    Negative direct costs are clamped to zero, and the custom values only
    apply when there are direct costs at all. Every surcharge is a
    percentage of direct costs plus custom values.
    """
    s = budget_settings
    direct = max(0.0, direct_costs)
    custom_1 = s.custom_value_1 if direct > 0 else 0.0
    custom_2 = s.custom_value_2 if direct > 0 else 0.0
    base = direct + custom_1 + custom_2

    def pct(value: float) -> float:
        return base * (value / 100.0)

    abk = pct(s.abk_materieel)
    after_abk = base + abk
    afkoop = pct(s.afkoop)
    after_afkoop = after_abk + afkoop
    planuitwerking = pct(s.kosten_planuitwerking)
    after_planuitwerking = after_afkoop + planuitwerking

    nazorg = pct(s.nazorg_service)
    car_pi_dic = pct(s.car_pi_dic_verzekering)
    bankgarantie = pct(s.bankgarantie)
    algemene_kosten = pct(s.algemene_kosten)
    risico = pct(s.risico)
    winst = pct(s.winst)
    bouwkosten = (
        after_planuitwerking
        + nazorg
        + car_pi_dic
        + bankgarantie
        + algemene_kosten
        + risico
        + winst
    )

    planvoorbereiding = pct(s.planvoorbereiding)
    huurdersbegeleiding = pct(s.huurdersbegeleiding)
    after_bijkomend = bouwkosten + planvoorbereiding + huurdersbegeleiding

    total_excl_vat = after_bijkomend
    vat = total_excl_vat * (vat_percentage / 100.0)
    final_amount = total_excl_vat + vat

    per_unit_incl = final_amount / number_of_units if number_of_units > 0 else 0.0
    per_unit_excl = total_excl_vat / number_of_units if number_of_units > 0 else 0.0

    return BudgetBreakdown(
        direct_costs=direct,
        custom_value_1_amount=custom_1,
        custom_value_2_amount=custom_2,
        subtotal_direct_and_custom=base,
        abk_materieel_amount=abk,
        subtotal_after_abk=after_abk,
        afkoop_amount=afkoop,
        subtotal_direct_abk_afkoop=after_afkoop,
        planuitwerking_amount=planuitwerking,
        subtotal_after_planuitwerking=after_planuitwerking,
        nazorg_service_amount=nazorg,
        car_pi_dic_amount=car_pi_dic,
        bankgarantie_amount=bankgarantie,
        algemene_kosten_amount=algemene_kosten,
        risico_amount=risico,
        winst_amount=winst,
        subtotal_bouwkosten=bouwkosten,
        planvoorbereiding_amount=planvoorbereiding,
        huurdersbegeleiding_amount=huurdersbegeleiding,
        subtotal_after_bijkomende_kosten=after_bijkomend,
        total_excl_vat=total_excl_vat,
        vat=vat,
        final_amount=final_amount,
        price_per_unit_incl_vat=per_unit_incl,
        price_per_unit_excl_vat=per_unit_excl,
    )

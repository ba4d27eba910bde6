"""Fattening-cycle profit and ROI simulator.

Final weight, GMD and cycle days are tied by
`final_weight = entry_weight + gmd * days`. The caller picks one of them as
the solve target; the other two are taken as entered. The stored value of
the target field is ignored, never overwritten, so switching targets back
and forth keeps the user's inputs intact.

Purchase price is per live-weight arroba (30 kg). Revenue is per carcass
arroba (15 kg) after applying the carcass yield.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ranchcalc.domain.calculators.numeric import (
    CARCASS_ARROBA_KG,
    DAYS_PER_MONTH,
    HUNDRED,
    LIVE_ARROBA_KG,
    percent_of,
    safe_div,
    to_decimal,
)
from ranchcalc.domain.value_objects.solve_target import CycleVerdict, SolveTarget

# Monthly ROI (%) above which a cycle is considered clearly profitable
PROFITABLE_MONTHLY_ROI = Decimal("0.9")


@dataclass(frozen=True, slots=True)
class CycleInputs:
    head_count: int
    entry_weight: Decimal
    buy_price_per_arroba: Decimal
    exit_weight: Decimal
    gmd: Decimal
    days: Decimal
    carcass_yield_percent: Decimal
    sell_price_per_arroba: Decimal
    daily_supplement_cost: Decimal
    daily_operating_cost: Decimal
    live_arroba_kg: Decimal = LIVE_ARROBA_KG
    carcass_arroba_kg: Decimal = CARCASS_ARROBA_KG


@dataclass(frozen=True, slots=True)
class CycleResult:
    days: Decimal
    gmd: Decimal
    final_weight: Decimal
    purchase_cost_per_head: Decimal
    nutrition_cost_per_head: Decimal
    operational_cost_per_head: Decimal
    outlay_per_head: Decimal
    carcass_kg: Decimal
    arrobas_produced: Decimal
    revenue_per_head: Decimal
    net_profit_per_head: Decimal
    net_profit_total: Decimal
    total_outlay: Decimal
    roi_percent: Decimal
    monthly_roi: Decimal
    break_even: Decimal
    verdict: CycleVerdict


def solve_cycle(inputs: CycleInputs, target: SolveTarget) -> tuple[Decimal, Decimal, Decimal]:
    """Return (days, gmd, final_weight) with the target derived from the others."""
    entry = to_decimal(inputs.entry_weight)
    exit_weight = to_decimal(inputs.exit_weight)
    gmd = to_decimal(inputs.gmd)
    days = to_decimal(inputs.days)

    if target is SolveTarget.DAYS:
        return safe_div(exit_weight - entry, gmd), gmd, exit_weight
    if target is SolveTarget.GMD:
        return days, safe_div(exit_weight - entry, days), exit_weight
    return days, gmd, entry + gmd * days


def classify(monthly_roi: Decimal) -> CycleVerdict:
    if monthly_roi > PROFITABLE_MONTHLY_ROI:
        return CycleVerdict.PROFITABLE
    if monthly_roi > 0:
        return CycleVerdict.MARGIN_ALERT
    return CycleVerdict.LOSS


def simulate_cycle(inputs: CycleInputs, target: SolveTarget) -> CycleResult:
    days, gmd, final_weight = solve_cycle(inputs, target)

    purchase = safe_div(inputs.entry_weight, inputs.live_arroba_kg) * to_decimal(
        inputs.buy_price_per_arroba
    )
    nutrition = to_decimal(inputs.daily_supplement_cost) * days
    operational = to_decimal(inputs.daily_operating_cost) * days
    outlay = purchase + nutrition + operational

    carcass_kg = percent_of(final_weight, inputs.carcass_yield_percent)
    arrobas = safe_div(carcass_kg, inputs.carcass_arroba_kg)
    revenue = arrobas * to_decimal(inputs.sell_price_per_arroba)
    net_per_head = revenue - outlay

    heads = Decimal(inputs.head_count)
    roi = safe_div(net_per_head, outlay) * HUNDRED
    monthly_roi = safe_div(roi, days / DAYS_PER_MONTH)

    return CycleResult(
        days=days,
        gmd=gmd,
        final_weight=final_weight,
        purchase_cost_per_head=purchase,
        nutrition_cost_per_head=nutrition,
        operational_cost_per_head=operational,
        outlay_per_head=outlay,
        carcass_kg=carcass_kg,
        arrobas_produced=arrobas,
        revenue_per_head=revenue,
        net_profit_per_head=net_per_head,
        net_profit_total=net_per_head * heads,
        total_outlay=outlay * heads,
        roi_percent=roi,
        monthly_roi=monthly_roi,
        break_even=safe_div(outlay, arrobas),
        verdict=classify(monthly_roi),
    )

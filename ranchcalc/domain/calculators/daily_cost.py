"""Allocation of monthly farm costs to a daily cost per animal."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ranchcalc.domain.calculators.numeric import (
    DAYS_PER_MONTH,
    LIVE_ARROBA_KG,
    ZERO,
    Number,
    safe_div,
    to_decimal,
)


@dataclass(frozen=True, slots=True)
class DailyAllocation:
    total_monthly_cost: Decimal
    monthly_cost_per_animal: Decimal
    daily_cost_per_animal: Decimal
    days_per_arroba: Decimal
    cost_per_arroba_produced: Decimal


@dataclass(frozen=True, slots=True)
class OperationalCosts:
    """Monthly operating expenses of the farm."""

    labor: Decimal = ZERO
    fuel: Decimal = ZERO
    energy: Decimal = ZERO
    maintenance: Decimal = ZERO
    other: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        parts = (self.labor, self.fuel, self.energy, self.maintenance, self.other)
        return sum((to_decimal(v) for v in parts), ZERO)


def compute_daily_allocation(
    rent: Number,
    supp_cost_monthly: Number,
    extra_cost_monthly: Number,
    total_animals: int,
    gmd: Number,
) -> DailyAllocation:
    total = to_decimal(rent) + to_decimal(supp_cost_monthly) + to_decimal(extra_cost_monthly)
    monthly_per_animal = safe_div(total, total_animals)
    daily_per_animal = monthly_per_animal / DAYS_PER_MONTH
    # Days of gain needed to put one live-weight arroba on the animal
    days_per_arroba = safe_div(LIVE_ARROBA_KG, gmd)
    return DailyAllocation(
        total_monthly_cost=total,
        monthly_cost_per_animal=monthly_per_animal,
        daily_cost_per_animal=daily_per_animal,
        days_per_arroba=days_per_arroba,
        cost_per_arroba_produced=daily_per_animal * days_per_arroba,
    )


def compute_operational_daily_cost(costs: OperationalCosts, head_count: int) -> Decimal:
    return safe_div(costs.total / DAYS_PER_MONTH, head_count)


def combined_daily_cost(operational_daily: Number, diet_daily: Number) -> Decimal:
    """Daily cost per head saved to a lot: operations plus supplement."""
    return to_decimal(operational_daily) + to_decimal(diet_daily)

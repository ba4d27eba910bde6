from __future__ import annotations

from decimal import Decimal

from ranchcalc.domain.calculators.daily_cost import (
    OperationalCosts,
    combined_daily_cost,
    compute_daily_allocation,
    compute_operational_daily_cost,
)

TOLERANCE = Decimal("0.001")


def test_daily_allocation_reference_values():
    result = compute_daily_allocation(
        Decimal("3000"), Decimal("2000"), Decimal("500"), 50, Decimal("0.8")
    )
    assert result.total_monthly_cost == Decimal("5500")
    assert result.monthly_cost_per_animal == Decimal("110")
    assert abs(result.daily_cost_per_animal - Decimal("3.667")) < TOLERANCE
    assert result.days_per_arroba == Decimal("37.5")
    assert abs(result.cost_per_arroba_produced - Decimal("137.5")) < TOLERANCE


def test_daily_allocation_without_animals_or_gain_is_zero():
    result = compute_daily_allocation(Decimal("3000"), 0, 0, 0, 0)
    assert result.monthly_cost_per_animal == Decimal("0")
    assert result.daily_cost_per_animal == Decimal("0")
    assert result.days_per_arroba == Decimal("0")
    assert result.cost_per_arroba_produced == Decimal("0")


def test_operational_daily_cost_per_head():
    costs = OperationalCosts(
        labor=Decimal("3000"),
        fuel=Decimal("600"),
        energy=Decimal("400"),
        maintenance=Decimal("300"),
        other=Decimal("200"),
    )
    assert costs.total == Decimal("4500")
    assert compute_operational_daily_cost(costs, 50) == Decimal("3")
    assert compute_operational_daily_cost(costs, 0) == Decimal("0")


def test_combined_daily_cost_adds_operations_and_diet():
    assert combined_daily_cost(Decimal("3"), Decimal("5.6")) == Decimal("8.6")

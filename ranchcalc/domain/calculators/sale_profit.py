"""Sale profitability: projected profit of one animal and batch sale of a lot.

Holding cost is `days on farm * daily cost`, where the daily cost is the
lot override when the lot has one and the farm-wide default otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from typing import Iterable

from ranchcalc.domain.calculators.numeric import (
    LIVE_ARROBA_KG,
    ZERO,
    Number,
    days_between,
    safe_div,
    to_decimal,
    to_weight,
)
from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.models.lot import Lot
from ranchcalc.domain.models.transaction import Transaction
from ranchcalc.domain.value_objects.animal_status import AnimalStatus
from ranchcalc.domain.value_objects.pricing import PricingMode
from ranchcalc.domain.value_objects.transaction_type import TransactionType

SALES_CATEGORY = "Sales"
HOLDING_COST_CATEGORY = "Holding costs"


@dataclass(frozen=True, slots=True)
class SaleProjection:
    days: int
    daily_cost: Decimal
    production_cost: Decimal
    profit: Decimal


@dataclass(frozen=True, slots=True)
class LotSaleResult:
    head_count: int
    revenue: Decimal
    purchase_total: Decimal
    holding_cost_total: Decimal
    net_profit: Decimal
    revenue_transaction: Transaction | None
    holding_cost_transaction: Transaction | None
    updated_animals: list[Animal]


def sale_value_from_arroba(
    final_weight_kg: Number, price_per_arroba: Number, arroba_kg: Number = LIVE_ARROBA_KG
) -> Decimal:
    return safe_div(final_weight_kg, arroba_kg) * to_decimal(price_per_arroba)


def resolve_daily_cost(lot: Lot | None, global_daily_cost: Number) -> Decimal:
    if lot is not None and lot.daily_cost is not None:
        return lot.daily_cost
    return to_decimal(global_daily_cost)


def holding_days(entry_date: date | None, sale_date: date) -> int:
    # No entry date: the animal is treated as entering on the sale date itself
    start = entry_date or sale_date
    return max(0, days_between(start, sale_date))


def project_sale_profit(
    animal: Animal,
    lot: Lot | None,
    global_daily_cost: Number,
    sale_date: date,
    sale_value: Number,
) -> SaleProjection:
    daily_cost = resolve_daily_cost(lot, global_daily_cost)
    days = holding_days(animal.entry_date, sale_date)
    production_cost = Decimal(days) * daily_cost
    profit = to_decimal(sale_value) - (animal.purchase_value or ZERO) - production_cost
    return SaleProjection(
        days=days,
        daily_cost=daily_cost,
        production_cost=production_cost,
        profit=profit,
    )


def sell_animal(
    animal: Animal,
    sale_date: date,
    sale_value: Number,
    final_weight_kg: Number,
    projection: SaleProjection,
) -> tuple[Animal, Transaction]:
    """Mark the animal as sold and build its income transaction."""
    value = to_decimal(sale_value)
    sold = replace(
        animal,
        status=AnimalStatus.SOLD,
        weight_kg=to_weight(final_weight_kg),
        sold_at=sale_date,
        version=animal.version + 1,
    )
    income = Transaction.create(
        farm_id=animal.farm_id,
        date=sale_date,
        description=(
            f"Sale: {animal.ear_tag} | Gross: {value:.2f} "
            f"| Est. net profit: {projection.profit:.2f}"
        ),
        amount=value,
        type=TransactionType.INCOME,
        category=SALES_CATEGORY,
    )
    return sold, income


def record_death(animal: Animal, died_on: date, cause: str | None) -> Animal:
    return replace(
        animal,
        status=AnimalStatus.DEAD,
        death_date=died_on,
        death_cause=cause,
        version=animal.version + 1,
    )


def lot_sale_revenue(
    head_count: int,
    pricing_mode: PricingMode,
    price_input: Number,
    avg_final_weight_kg: Number | None = None,
    arroba_kg: Number = LIVE_ARROBA_KG,
) -> Decimal:
    heads = Decimal(max(head_count, 0))
    if pricing_mode is PricingMode.PER_HEAD:
        return heads * to_decimal(price_input)
    return heads * sale_value_from_arroba(avg_final_weight_kg or ZERO, price_input, arroba_kg)


def compute_lot_sale(
    lot_animals: Iterable[Animal],
    lot: Lot | None,
    global_daily_cost: Number,
    sale_date: date,
    pricing_mode: PricingMode,
    price_input: Number,
    avg_final_weight_kg: Number | None = None,
    arroba_kg: Number = LIVE_ARROBA_KG,
) -> LotSaleResult:
    """Sell every active animal of a lot in one batch.

    Each animal's holding cost uses its own entry date. Animals already sold,
    dead, sick or quarantined are left out of the sale.
    """
    selling = [a for a in lot_animals if a.status is AnimalStatus.ACTIVE]
    if not selling:
        return LotSaleResult(
            head_count=0,
            revenue=ZERO,
            purchase_total=ZERO,
            holding_cost_total=ZERO,
            net_profit=ZERO,
            revenue_transaction=None,
            holding_cost_transaction=None,
            updated_animals=[],
        )

    daily_cost = resolve_daily_cost(lot, global_daily_cost)

    purchase_total = ZERO
    holding_total = ZERO
    for animal in selling:
        purchase_total += animal.purchase_value or ZERO
        holding_total += Decimal(holding_days(animal.entry_date, sale_date)) * daily_cost

    head_count = len(selling)
    revenue = lot_sale_revenue(
        head_count, pricing_mode, price_input, avg_final_weight_kg, arroba_kg
    )
    net_profit = revenue - purchase_total - holding_total

    final_weight = to_weight(avg_final_weight_kg) if avg_final_weight_kg is not None else None
    updated = [
        replace(
            a,
            status=AnimalStatus.SOLD,
            weight_kg=final_weight if final_weight is not None else a.weight_kg,
            sold_at=sale_date,
            version=a.version + 1,
        )
        for a in selling
    ]

    farm_id = lot.farm_id if lot is not None else selling[0].farm_id
    label = lot.name if lot is not None else "no lot"
    revenue_tx = Transaction.create(
        farm_id=farm_id,
        date=sale_date,
        description=f"Lot sale: {label} | {head_count} head | Net profit: {net_profit:.2f}",
        amount=revenue,
        type=TransactionType.INCOME,
        category=SALES_CATEGORY,
    )
    holding_tx = Transaction.create(
        farm_id=farm_id,
        date=sale_date,
        description=f"Holding costs: {label} | {head_count} head",
        amount=holding_total,
        type=TransactionType.EXPENSE,
        category=HOLDING_COST_CATEGORY,
    )
    return LotSaleResult(
        head_count=head_count,
        revenue=revenue,
        purchase_total=purchase_total,
        holding_cost_total=holding_total,
        net_profit=net_profit,
        revenue_transaction=revenue_tx,
        holding_cost_transaction=holding_tx,
        updated_animals=updated,
    )

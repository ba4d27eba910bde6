"""Pricing and registration of a purchased batch ("cargo") of animals."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from ranchcalc.domain.calculators.numeric import LIVE_ARROBA_KG, ZERO, Number, safe_div, to_decimal
from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.models.transaction import Transaction
from ranchcalc.domain.value_objects.animal_status import Gender
from ranchcalc.domain.value_objects.pricing import PricingMode, WeightUnit
from ranchcalc.domain.value_objects.transaction_type import TransactionType

PURCHASE_CATEGORY = "Animal purchase"


@dataclass(frozen=True, slots=True)
class BatchPurchaseQuote:
    quantity: int
    avg_weight_kg: Decimal
    unit_price: Decimal
    total_cost: Decimal


def price_batch_purchase(
    quantity: int,
    weight_value: Number,
    weight_unit: WeightUnit,
    pricing_mode: PricingMode,
    price_value: Number,
    arroba_kg: Number = LIVE_ARROBA_KG,
) -> BatchPurchaseQuote:
    weight = to_decimal(weight_value)
    avg_weight_kg = weight if weight_unit is WeightUnit.KG else weight * to_decimal(arroba_kg)
    if pricing_mode is PricingMode.PER_HEAD:
        unit_price = to_decimal(price_value)
    else:
        unit_price = safe_div(avg_weight_kg, arroba_kg) * to_decimal(price_value)
    heads = max(quantity, 0)
    return BatchPurchaseQuote(
        quantity=heads,
        avg_weight_kg=avg_weight_kg,
        unit_price=unit_price,
        total_cost=unit_price * Decimal(heads) if heads else ZERO,
    )


def batch_ear_tag(prefix: str, index: int) -> str:
    return f"{prefix}{index:03d}"


def build_batch_animals(
    farm_id: UUID,
    quote: BatchPurchaseQuote,
    *,
    tag_prefix: str,
    entry_date: date,
    breed: str | None = None,
    gender: Gender | None = Gender.MALE,
    lot_id: UUID | None = None,
) -> tuple[list[Animal], Transaction | None]:
    """Create one animal per head plus the expense for the whole batch."""
    animals = [
        Animal.create(
            farm_id=farm_id,
            ear_tag=batch_ear_tag(tag_prefix, i + 1),
            weight_kg=quote.avg_weight_kg,
            entry_date=entry_date,
            breed=breed,
            gender=gender,
            purchase_value=quote.unit_price,
            lot_id=lot_id,
        )
        for i in range(quote.quantity)
    ]
    if not animals:
        return [], None
    expense = Transaction.create(
        farm_id=farm_id,
        date=entry_date,
        description=f"Batch purchase: {tag_prefix} | {quote.quantity} head",
        amount=quote.total_cost,
        type=TransactionType.EXPENSE,
        category=PURCHASE_CATEGORY,
    )
    return animals, expense

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from ranchcalc.application.errors import NotFound, ValidationError
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.domain.calculators.purchase import (
    BatchPurchaseQuote,
    build_batch_animals,
    price_batch_purchase,
)
from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.models.transaction import Transaction
from ranchcalc.domain.value_objects.pricing import PricingMode, WeightUnit

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RegisterBatchInput:
    quantity: int
    tag_prefix: str
    entry_date: date
    weight_value: Decimal
    weight_unit: WeightUnit = WeightUnit.KG
    pricing_mode: PricingMode = PricingMode.PER_HEAD
    price_value: Decimal = Decimal("0")
    breed: str | None = None
    lot_id: UUID | None = None


@dataclass(slots=True)
class RegisterBatchOutput:
    quote: BatchPurchaseQuote
    animals: list[Animal]
    expense: Transaction | None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    payload: RegisterBatchInput,
    *,
    live_arroba_kg: Decimal = Decimal("30"),
) -> RegisterBatchOutput:
    if payload.quantity <= 0:
        raise ValidationError("Quantity must be positive")
    if payload.lot_id is not None and await uow.lots.get(farm_id, payload.lot_id) is None:
        raise NotFound("Lot not found")

    quote = price_batch_purchase(
        payload.quantity,
        payload.weight_value,
        payload.weight_unit,
        payload.pricing_mode,
        payload.price_value,
        live_arroba_kg,
    )
    animals, expense = build_batch_animals(
        farm_id,
        quote,
        tag_prefix=payload.tag_prefix,
        entry_date=payload.entry_date,
        breed=payload.breed,
        lot_id=payload.lot_id,
    )
    created = [await uow.animals.add(a) for a in animals]
    if expense is not None:
        expense = await uow.transactions.add(expense)
    await uow.commit()
    logger.info(
        "Registered batch %s with %d head (total %s)",
        payload.tag_prefix,
        quote.quantity,
        quote.total_cost,
    )
    return RegisterBatchOutput(quote=quote, animals=created, expense=expense)

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from ranchcalc.application.errors import NotFound, ValidationError
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.application.use_cases.costs import get_farm_config
from ranchcalc.domain.calculators.sale_profit import (
    SaleProjection,
    project_sale_profit,
    sale_value_from_arroba,
)
from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.value_objects.pricing import PricingMode


@dataclass(slots=True)
class SaleInput:
    sale_date: date
    final_weight_kg: Decimal
    # Total value, or price per live arroba when pricing_mode is PER_ARROBA
    price: Decimal
    pricing_mode: PricingMode = PricingMode.PER_HEAD


@dataclass(slots=True)
class SalePreview:
    animal: Animal
    sale_value: Decimal
    projection: SaleProjection


def resolve_sale_value(payload: SaleInput, live_arroba_kg: Decimal) -> Decimal:
    if payload.pricing_mode is PricingMode.PER_ARROBA:
        return sale_value_from_arroba(payload.final_weight_kg, payload.price, live_arroba_kg)
    return payload.price


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    animal_id: UUID,
    payload: SaleInput,
    *,
    live_arroba_kg: Decimal = Decimal("30"),
    default_daily_cost: Decimal = Decimal("0"),
) -> SalePreview:
    if payload.final_weight_kg < 0 or payload.price < 0:
        raise ValidationError("Sale price and weight cannot be negative")
    animal = await uow.animals.get(farm_id, animal_id)
    if animal is None:
        raise NotFound("Animal not found")
    lot = await uow.lots.get(farm_id, animal.lot_id) if animal.lot_id else None
    config = await get_farm_config.execute(uow, farm_id, default_daily_cost=default_daily_cost)

    sale_value = resolve_sale_value(payload, live_arroba_kg)
    projection = project_sale_profit(
        animal, lot, config.global_daily_cost, payload.sale_date, sale_value
    )
    return SalePreview(animal=animal, sale_value=sale_value, projection=projection)

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from ranchcalc.application.errors import ConflictError
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.application.use_cases.animals import preview_sale
from ranchcalc.domain.calculators.sale_profit import SaleProjection, sell_animal
from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.models.transaction import Transaction

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SellAnimalOutput:
    animal: Animal
    transaction: Transaction
    projection: SaleProjection


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    animal_id: UUID,
    payload: preview_sale.SaleInput,
    *,
    live_arroba_kg: Decimal = Decimal("30"),
    default_daily_cost: Decimal = Decimal("0"),
) -> SellAnimalOutput:
    preview = await preview_sale.execute(
        uow,
        farm_id,
        animal_id,
        payload,
        live_arroba_kg=live_arroba_kg,
        default_daily_cost=default_daily_cost,
    )
    animal = preview.animal
    if not animal.is_active:
        raise ConflictError(f"Animal is {animal.status.value} and cannot be sold")

    sold, income = sell_animal(
        animal, payload.sale_date, preview.sale_value, payload.final_weight_kg, preview.projection
    )
    updated = await uow.animals.update(sold, expected_version=animal.version)
    if updated is None:
        raise ConflictError("Animal was modified concurrently")
    income = await uow.transactions.add(income)
    await uow.commit()
    logger.info(
        "Animal %s sold for %s (estimated profit %s)",
        animal.ear_tag,
        preview.sale_value,
        preview.projection.profit,
    )
    return SellAnimalOutput(animal=updated, transaction=income, projection=preview.projection)

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from ranchcalc.application.errors import ConflictError, NotFound, ValidationError
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.application.use_cases.costs import get_farm_config
from ranchcalc.domain.calculators.sale_profit import LotSaleResult, compute_lot_sale
from ranchcalc.domain.value_objects.animal_status import AnimalStatus
from ranchcalc.domain.value_objects.pricing import PricingMode

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SellLotInput:
    sale_date: date
    pricing_mode: PricingMode
    price: Decimal
    avg_final_weight_kg: Decimal | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    lot_id: UUID,
    payload: SellLotInput,
    *,
    live_arroba_kg: Decimal = Decimal("30"),
    default_daily_cost: Decimal = Decimal("0"),
) -> LotSaleResult:
    if payload.pricing_mode is PricingMode.PER_ARROBA and not payload.avg_final_weight_kg:
        raise ValidationError("Average final weight is required for arroba pricing")
    lot = await uow.lots.get(farm_id, lot_id)
    if lot is None:
        raise NotFound("Lot not found")

    animals = await uow.animals.list(farm_id, lot_id=lot_id, statuses=[AnimalStatus.ACTIVE])
    if not animals:
        raise ValidationError("Lot has no active animals to sell")
    config = await get_farm_config.execute(uow, farm_id, default_daily_cost=default_daily_cost)

    result = compute_lot_sale(
        animals,
        lot,
        config.global_daily_cost,
        payload.sale_date,
        payload.pricing_mode,
        payload.price,
        payload.avg_final_weight_kg,
        live_arroba_kg,
    )
    previous_versions = {a.id: a.version for a in animals}
    for sold in result.updated_animals:
        if await uow.animals.update(sold, expected_version=previous_versions[sold.id]) is None:
            raise ConflictError(f"Animal {sold.ear_tag} was modified concurrently")
    for tx in (result.revenue_transaction, result.holding_cost_transaction):
        if tx is not None:
            await uow.transactions.add(tx)
    await uow.commit()
    logger.info(
        "Lot %s sold: %d head, revenue %s, net profit %s",
        lot.name,
        result.head_count,
        result.revenue,
        result.net_profit,
    )
    return result

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from ranchcalc.application.errors import NotFound, ValidationError
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.domain.models.farm_config import FarmConfig

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SaveDailyCostInput:
    daily_cost: Decimal
    lot_id: UUID | None = None


@dataclass(slots=True)
class SaveDailyCostOutput:
    daily_cost: Decimal
    lot_id: UUID | None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    payload: SaveDailyCostInput,
) -> SaveDailyCostOutput:
    """Store a daily cost per animal as a lot override, or as the farm default."""
    if payload.daily_cost < 0:
        raise ValidationError("Daily cost cannot be negative")

    if payload.lot_id is not None:
        updated = await uow.lots.set_daily_cost(farm_id, payload.lot_id, payload.daily_cost)
        if updated is None:
            raise NotFound("Lot not found")
        await uow.commit()
        logger.info("Daily cost %s saved for lot %s", payload.daily_cost, payload.lot_id)
        return SaveDailyCostOutput(daily_cost=payload.daily_cost, lot_id=payload.lot_id)

    await uow.farm_config.upsert(
        FarmConfig(
            farm_id=farm_id,
            global_daily_cost=payload.daily_cost,
            updated_at=datetime.now(timezone.utc),
        )
    )
    await uow.commit()
    logger.info("Global daily cost %s saved for farm %s", payload.daily_cost, farm_id)
    return SaveDailyCostOutput(daily_cost=payload.daily_cost, lot_id=None)

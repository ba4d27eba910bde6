from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.domain.models.farm_config import FarmConfig


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    *,
    default_daily_cost: Decimal = Decimal("0"),
) -> FarmConfig:
    """Saved farm configuration, or an unsaved default one."""
    config = await uow.farm_config.get(farm_id)
    if config is None:
        return FarmConfig(farm_id=farm_id, global_daily_cost=default_daily_cost)
    return config

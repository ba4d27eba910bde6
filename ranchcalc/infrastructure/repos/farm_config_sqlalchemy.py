from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ranchcalc.application.interfaces.repositories.farm_config import FarmConfigRepository
from ranchcalc.domain.models.farm_config import FarmConfig
from ranchcalc.infrastructure.db.orm.farm_config import FarmConfigORM


class FarmConfigSQLAlchemyRepository(FarmConfigRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: FarmConfigORM) -> FarmConfig:
        return FarmConfig(
            farm_id=orm.farm_id,
            global_daily_cost=orm.global_daily_cost,
            updated_at=orm.updated_at,
        )

    async def get(self, farm_id: UUID) -> FarmConfig | None:
        result = await self.session.execute(
            select(FarmConfigORM).where(FarmConfigORM.farm_id == farm_id)
        )
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def upsert(self, config: FarmConfig) -> FarmConfig:
        orm = await self.session.get(FarmConfigORM, config.farm_id)
        if orm is None:
            orm = FarmConfigORM(
                farm_id=config.farm_id,
                global_daily_cost=config.global_daily_cost,
                updated_at=config.updated_at,
            )
            self.session.add(orm)
            await self.session.flush()
            return self._to_domain(orm)
        orm.global_daily_cost = config.global_daily_cost
        orm.updated_at = config.updated_at
        await self.session.flush()
        return self._to_domain(orm)

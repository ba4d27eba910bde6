from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ranchcalc.application.errors import ConflictError, InfrastructureError
from ranchcalc.application.interfaces.repositories.lots import LotRepository
from ranchcalc.domain.models.lot import Lot
from ranchcalc.infrastructure.db.orm.lot import LotORM


class LotsSQLAlchemyRepository(LotRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: LotORM) -> Lot:
        return Lot(
            id=orm.id,
            farm_id=orm.farm_id,
            name=orm.name,
            description=orm.description,
            daily_cost=orm.daily_cost,
            created_at=orm.created_at,
        )

    async def add(self, lot: Lot) -> Lot:
        orm = LotORM(
            id=lot.id,
            farm_id=lot.farm_id,
            name=lot.name,
            description=lot.description,
            daily_cost=lot.daily_cost,
            created_at=lot.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to create lot") from exc
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, lot_id: UUID) -> Lot | None:
        stmt = select(LotORM).where(LotORM.farm_id == farm_id, LotORM.id == lot_id)
        res = await self.session.execute(stmt)
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def find_by_name(self, farm_id: UUID, name: str) -> Lot | None:
        stmt = select(LotORM).where(LotORM.farm_id == farm_id, LotORM.name.ilike(name))
        res = await self.session.execute(stmt)
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_for_farm(self, farm_id: UUID) -> list[Lot]:
        stmt = select(LotORM).where(LotORM.farm_id == farm_id).order_by(LotORM.name)
        res = await self.session.execute(stmt)
        return [self._to_domain(x) for x in res.scalars().all()]

    async def set_daily_cost(
        self, farm_id: UUID, lot_id: UUID, daily_cost: Decimal | None
    ) -> Lot | None:
        stmt = (
            update(LotORM)
            .where(LotORM.farm_id == farm_id, LotORM.id == lot_id)
            .values(daily_cost=daily_cost)
        )
        try:
            res = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise InfrastructureError("Failed to update lot daily cost") from exc
        if res.rowcount == 0:
            return None
        return await self.get(farm_id, lot_id)

    async def update(self, farm_id: UUID, lot_id: UUID, data: dict) -> Lot | None:
        stmt = (
            update(LotORM)
            .where(LotORM.farm_id == farm_id, LotORM.id == lot_id)
            .values(**data)
        )
        try:
            res = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update lot") from exc
        if res.rowcount == 0:
            return None
        return await self.get(farm_id, lot_id)

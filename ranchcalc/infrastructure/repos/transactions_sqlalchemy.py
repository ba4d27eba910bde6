from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ranchcalc.application.interfaces.repositories.transactions import TransactionRepository
from ranchcalc.domain.models.transaction import Transaction
from ranchcalc.domain.value_objects.transaction_type import TransactionType
from ranchcalc.infrastructure.db.orm.transaction import TransactionORM


class TransactionsSQLAlchemyRepository(TransactionRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: TransactionORM) -> Transaction:
        return Transaction(
            id=orm.id,
            farm_id=orm.farm_id,
            date=orm.date,
            description=orm.description,
            amount=orm.amount,
            type=TransactionType(orm.type),
            category=orm.category,
            created_at=orm.created_at,
        )

    async def add(self, transaction: Transaction) -> Transaction:
        orm = TransactionORM(
            id=transaction.id,
            farm_id=transaction.farm_id,
            date=transaction.date,
            description=transaction.description,
            amount=transaction.amount,
            type=transaction.type.value,
            category=transaction.category,
            created_at=transaction.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list(
        self,
        farm_id: UUID,
        *,
        type: TransactionType | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        search: str | None = None,
    ) -> list[Transaction]:
        stmt = select(TransactionORM).where(TransactionORM.farm_id == farm_id)
        if type is not None:
            stmt = stmt.where(TransactionORM.type == type.value)
        if date_from is not None:
            stmt = stmt.where(TransactionORM.date >= date_from)
        if date_to is not None:
            stmt = stmt.where(TransactionORM.date <= date_to)
        if search:
            pattern = f"%{search.strip()}%"
            stmt = stmt.where(
                TransactionORM.description.ilike(pattern) | TransactionORM.category.ilike(pattern)
            )
        stmt = stmt.order_by(TransactionORM.date.desc(), TransactionORM.created_at.desc())
        res = await self.session.execute(stmt)
        return [self._to_domain(x) for x in res.scalars().all()]

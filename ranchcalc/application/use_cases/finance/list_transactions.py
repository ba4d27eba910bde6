from __future__ import annotations

from datetime import date
from uuid import UUID

from ranchcalc.application.errors import ValidationError
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.domain.models.transaction import Transaction
from ranchcalc.domain.value_objects.transaction_type import TransactionType


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    *,
    type: TransactionType | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
    search: str | None = None,
) -> list[Transaction]:
    if date_from and date_to and date_from > date_to:
        raise ValidationError("date_from must be before date_to")
    return await uow.transactions.list(
        farm_id, type=type, date_from=date_from, date_to=date_to, search=search
    )

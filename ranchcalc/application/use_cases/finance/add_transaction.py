from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from ranchcalc.application.errors import ValidationError
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.domain.models.transaction import Transaction
from ranchcalc.domain.value_objects.transaction_type import TransactionType


@dataclass(slots=True)
class AddTransactionInput:
    date: date
    description: str
    amount: Decimal
    type: TransactionType
    category: str = "Other"


async def execute(uow: UnitOfWork, farm_id: UUID, payload: AddTransactionInput) -> Transaction:
    if payload.amount <= 0:
        raise ValidationError("Amount must be positive")
    if not payload.description.strip():
        raise ValidationError("Description is required")
    tx = Transaction.create(
        farm_id=farm_id,
        date=payload.date,
        description=payload.description.strip(),
        amount=payload.amount,
        type=payload.type,
        category=payload.category,
    )
    created = await uow.transactions.add(tx)
    await uow.commit()
    return created

from __future__ import annotations

from datetime import date as DtDate
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from ranchcalc.domain.models.transaction import Transaction
from ranchcalc.domain.value_objects.transaction_type import TransactionType


class TransactionCreate(BaseModel):
    date: DtDate
    description: str = Field(min_length=1, max_length=512)
    amount: Decimal = Field(gt=0)
    type: TransactionType
    category: str = Field(default="Other", max_length=64)


class TransactionResponse(BaseModel):
    id: UUID
    date: DtDate
    description: str
    amount: Decimal
    type: TransactionType
    category: str

    @classmethod
    def from_domain(cls, tx: Transaction) -> TransactionResponse:
        return cls(
            id=tx.id,
            date=tx.date,
            description=tx.description,
            amount=tx.amount,
            type=tx.type,
            category=tx.category,
        )

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from ranchcalc.domain.value_objects.transaction_type import TransactionType


@dataclass(frozen=True, slots=True)
class Transaction:
    id: UUID
    farm_id: UUID
    date: date
    description: str
    amount: Decimal
    type: TransactionType
    category: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        farm_id: UUID,
        date: date,
        description: str,
        amount: Decimal,
        type: TransactionType,
        category: str,
    ) -> Transaction:
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            date=date,
            description=description,
            amount=amount,
            type=type,
            category=category,
        )

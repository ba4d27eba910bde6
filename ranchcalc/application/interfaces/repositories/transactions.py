from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from ranchcalc.domain.models.transaction import Transaction
from ranchcalc.domain.value_objects.transaction_type import TransactionType


class TransactionRepository(Protocol):
    async def add(self, transaction: Transaction) -> Transaction: ...

    async def list(
        self,
        farm_id: UUID,
        *,
        type: TransactionType | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        search: str | None = None,
    ) -> list[Transaction]: ...

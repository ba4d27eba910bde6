from __future__ import annotations

from decimal import Decimal
from typing import Protocol
from uuid import UUID

from ranchcalc.domain.models.lot import Lot


class LotRepository(Protocol):
    async def add(self, lot: Lot) -> Lot: ...

    async def get(self, farm_id: UUID, lot_id: UUID) -> Lot | None: ...

    async def find_by_name(self, farm_id: UUID, name: str) -> Lot | None: ...

    async def list_for_farm(self, farm_id: UUID) -> list[Lot]: ...

    async def set_daily_cost(
        self, farm_id: UUID, lot_id: UUID, daily_cost: Decimal | None
    ) -> Lot | None: ...

    async def update(self, farm_id: UUID, lot_id: UUID, data: dict) -> Lot | None: ...

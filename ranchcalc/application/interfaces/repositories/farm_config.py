from __future__ import annotations

from typing import Protocol
from uuid import UUID

from ranchcalc.domain.models.farm_config import FarmConfig


class FarmConfigRepository(Protocol):
    async def get(self, farm_id: UUID) -> FarmConfig | None: ...

    async def upsert(self, config: FarmConfig) -> FarmConfig: ...

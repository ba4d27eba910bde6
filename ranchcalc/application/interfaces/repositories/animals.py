from __future__ import annotations

from typing import Protocol
from uuid import UUID

from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.value_objects.animal_status import AnimalStatus


class AnimalRepository(Protocol):
    async def add(self, animal: Animal) -> Animal: ...

    async def get(self, farm_id: UUID, animal_id: UUID) -> Animal | None: ...

    async def list(
        self,
        farm_id: UUID,
        *,
        lot_id: UUID | None = None,
        statuses: list[AnimalStatus] | None = None,
        search: str | None = None,
    ) -> list[Animal]: ...

    async def update(self, animal: Animal, expected_version: int) -> Animal | None: ...

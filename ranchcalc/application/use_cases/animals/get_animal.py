from __future__ import annotations

from uuid import UUID

from ranchcalc.application.errors import NotFound
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.domain.models.animal import Animal


async def execute(uow: UnitOfWork, farm_id: UUID, animal_id: UUID) -> Animal:
    animal = await uow.animals.get(farm_id, animal_id)
    if animal is None:
        raise NotFound("Animal not found")
    return animal

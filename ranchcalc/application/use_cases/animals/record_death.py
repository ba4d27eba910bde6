from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from ranchcalc.application.errors import ConflictError, NotFound
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.domain.calculators.sale_profit import record_death
from ranchcalc.domain.models.animal import Animal

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordDeathInput:
    died_on: date
    cause: str | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    animal_id: UUID,
    payload: RecordDeathInput,
) -> Animal:
    animal = await uow.animals.get(farm_id, animal_id)
    if animal is None:
        raise NotFound("Animal not found")
    if animal.status.is_disposed():
        raise ConflictError(f"Animal is already {animal.status.value}")

    dead = record_death(animal, payload.died_on, payload.cause)
    updated = await uow.animals.update(dead, expected_version=animal.version)
    if updated is None:
        raise ConflictError("Animal was modified concurrently")
    await uow.commit()
    logger.info("Animal %s recorded as dead (%s)", animal.ear_tag, payload.cause or "no cause")
    return updated

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from ranchcalc.application.errors import ConflictError, NotFound, ValidationError
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.domain.calculators.weight_gain import record_weighing
from ranchcalc.domain.models.animal import Animal


@dataclass(slots=True)
class RecordWeighingInput:
    weighed_on: date
    weight_kg: Decimal


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    animal_id: UUID,
    payload: RecordWeighingInput,
) -> Animal:
    if payload.weight_kg <= 0:
        raise ValidationError("Weight must be positive")
    animal = await uow.animals.get(farm_id, animal_id)
    if animal is None:
        raise NotFound("Animal not found")
    if animal.status.is_disposed():
        raise ValidationError("Sold or dead animals cannot be weighed")

    weighed = record_weighing(animal, payload.weighed_on, payload.weight_kg)
    updated = await uow.animals.update(weighed, expected_version=animal.version)
    if updated is None:
        raise ConflictError("Animal was modified concurrently")
    await uow.commit()
    return updated

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from ranchcalc.application.errors import ConflictError, ValidationError
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.domain.models.lot import Lot


@dataclass(slots=True)
class CreateLotInput:
    name: str
    description: str | None = None
    daily_cost: Decimal | None = None


async def execute(uow: UnitOfWork, farm_id: UUID, payload: CreateLotInput) -> Lot:
    name = payload.name.strip()
    if not name:
        raise ValidationError("Lot name is required")
    # Unique name per farm (case-insensitive)
    if await uow.lots.find_by_name(farm_id, name):
        raise ConflictError("Lot name already exists for farm")
    lot = Lot.create(
        farm_id=farm_id,
        name=name,
        description=payload.description,
        daily_cost=payload.daily_cost,
    )
    created = await uow.lots.add(lot)
    await uow.commit()
    return created

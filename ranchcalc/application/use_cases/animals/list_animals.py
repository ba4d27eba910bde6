from __future__ import annotations

from uuid import UUID

from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.value_objects.animal_status import AnimalStatus

AVAILABLE_STATUSES = [AnimalStatus.ACTIVE, AnimalStatus.SICK, AnimalStatus.QUARANTINE]


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    *,
    lot_id: UUID | None = None,
    status: AnimalStatus | None = None,
    include_disposed: bool = False,
    search: str | None = None,
) -> list[Animal]:
    """List animals; by default only those still on the farm (not sold or dead)."""
    if status is not None:
        statuses = [status]
    elif include_disposed:
        statuses = None
    else:
        statuses = AVAILABLE_STATUSES
    return await uow.animals.list(farm_id, lot_id=lot_id, statuses=statuses, search=search)

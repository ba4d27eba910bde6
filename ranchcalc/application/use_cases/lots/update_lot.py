from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from ranchcalc.application.errors import ConflictError, NotFound, ValidationError
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.application.use_cases.lots.list_lots import LotWithSummary
from ranchcalc.domain.calculators.herd_summary import summarize_lot


@dataclass(slots=True)
class UpdateLotInput:
    name: str | None = None
    description: str | None = None
    daily_cost: Decimal | None = None
    # Drops the override so the lot falls back to the farm-wide daily cost
    clear_daily_cost: bool = False


async def execute(
    uow: UnitOfWork, farm_id: UUID, lot_id: UUID, payload: UpdateLotInput
) -> LotWithSummary:
    existing = await uow.lots.get(farm_id, lot_id)
    if existing is None:
        raise NotFound("Lot not found")

    data: dict = {}
    if payload.name is not None:
        name = payload.name.strip()
        if not name:
            raise ValidationError("Lot name is required")
        clash = await uow.lots.find_by_name(farm_id, name)
        if clash is not None and clash.id != lot_id:
            raise ConflictError("Lot name already exists for farm")
        data["name"] = name
    if payload.description is not None:
        data["description"] = payload.description
    if payload.clear_daily_cost:
        if payload.daily_cost is not None:
            raise ValidationError("Cannot set and clear the daily cost in the same update")
        data["daily_cost"] = None
    elif payload.daily_cost is not None:
        if payload.daily_cost < 0:
            raise ValidationError("Daily cost cannot be negative")
        data["daily_cost"] = payload.daily_cost

    lot = existing
    if data:
        lot = await uow.lots.update(farm_id, lot_id, data)
        if lot is None:
            raise NotFound("Lot not found")
        await uow.commit()
    animals = await uow.animals.list(farm_id, lot_id=lot_id)
    return LotWithSummary(lot=lot, summary=summarize_lot(lot_id, animals))

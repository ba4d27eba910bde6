from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.domain.calculators.herd_summary import LotSummary, summarize_lot
from ranchcalc.domain.models.lot import Lot


@dataclass(slots=True)
class LotWithSummary:
    lot: Lot
    summary: LotSummary


async def execute(uow: UnitOfWork, farm_id: UUID) -> list[LotWithSummary]:
    lots = await uow.lots.list_for_farm(farm_id)
    animals = await uow.animals.list(farm_id)
    return [LotWithSummary(lot=lot, summary=summarize_lot(lot.id, animals)) for lot in lots]

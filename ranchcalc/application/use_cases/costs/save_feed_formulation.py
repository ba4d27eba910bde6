from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from ranchcalc.application.errors import ValidationError
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.application.use_cases.costs import save_daily_cost
from ranchcalc.domain.calculators.daily_cost import (
    OperationalCosts,
    combined_daily_cost,
    compute_operational_daily_cost,
)
from ranchcalc.domain.calculators.feed_mix import (
    Ingredient,
    LotConsumption,
    compute_lot_consumption,
    feed_mix_status,
)
from ranchcalc.domain.calculators.numeric import HUNDRED


@dataclass(slots=True)
class SaveFeedFormulationInput:
    ingredients: list[Ingredient]
    avg_weight_kg: Decimal
    head_count: int
    pv_percent: Decimal
    lot_id: UUID | None = None
    # Monthly operating costs folded into the saved daily cost (all zero by default)
    operational: OperationalCosts = field(default_factory=OperationalCosts)


@dataclass(slots=True)
class SaveFeedFormulationOutput:
    cost_per_kg_mix: Decimal
    consumption: LotConsumption
    operational_daily_cost: Decimal
    saved_daily_cost: Decimal
    lot_id: UUID | None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    payload: SaveFeedFormulationInput,
) -> SaveFeedFormulationOutput:
    status = feed_mix_status(payload.ingredients)
    if status.exceeds_limit:
        raise ValidationError(
            "Feed mix exceeds 100%",
            details={"total_percent": status.total_percent, "limit": HUNDRED},
        )

    consumption = compute_lot_consumption(
        status.cost_per_kg,
        payload.avg_weight_kg,
        payload.head_count,
        payload.pv_percent,
    )
    operational_daily = compute_operational_daily_cost(payload.operational, payload.head_count)
    daily_cost = combined_daily_cost(operational_daily, consumption.individual_daily_cost)

    saved = await save_daily_cost.execute(
        uow,
        farm_id,
        save_daily_cost.SaveDailyCostInput(daily_cost=daily_cost, lot_id=payload.lot_id),
    )
    return SaveFeedFormulationOutput(
        cost_per_kg_mix=status.cost_per_kg,
        consumption=consumption,
        operational_daily_cost=operational_daily,
        saved_daily_cost=saved.daily_cost,
        lot_id=saved.lot_id,
    )

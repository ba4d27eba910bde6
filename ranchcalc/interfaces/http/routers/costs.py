from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from ranchcalc.application.use_cases.costs import (
    get_farm_config,
    save_daily_cost,
    save_feed_formulation,
)
from ranchcalc.config.settings import Settings
from ranchcalc.domain.calculators.daily_cost import OperationalCosts
from ranchcalc.domain.calculators.feed_mix import Ingredient
from ranchcalc.interfaces.http.deps import get_app_settings, get_farm_id, get_uow
from ranchcalc.interfaces.http.schemas.costs import (
    DailyCostResponse,
    DailyCostUpdate,
    FarmConfigResponse,
    FeedFormulationResponse,
    FeedFormulationSave,
    LotConsumptionResponse,
)

router = APIRouter(prefix="/costs", tags=["costs"])


@router.get("/config", response_model=FarmConfigResponse)
async def get_config(
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    settings: Settings = Depends(get_app_settings),
):
    config = await get_farm_config.execute(
        uow, farm_id, default_daily_cost=settings.default_global_daily_cost
    )
    return FarmConfigResponse(global_daily_cost=config.global_daily_cost)


@router.put("/daily-cost", response_model=DailyCostResponse)
async def put_daily_cost(
    payload: DailyCostUpdate,
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    saved = await save_daily_cost.execute(
        uow,
        farm_id,
        save_daily_cost.SaveDailyCostInput(daily_cost=payload.daily_cost, lot_id=payload.lot_id),
    )
    return DailyCostResponse(daily_cost=saved.daily_cost, lot_id=saved.lot_id)


@router.post("/feed-formulation", response_model=FeedFormulationResponse)
async def post_feed_formulation(
    payload: FeedFormulationSave,
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    result = await save_feed_formulation.execute(
        uow,
        farm_id,
        save_feed_formulation.SaveFeedFormulationInput(
            ingredients=[
                Ingredient(name=i.name, percent=i.percent, price_kg=i.price_kg)
                for i in payload.ingredients
            ],
            avg_weight_kg=payload.avg_weight_kg,
            head_count=payload.head_count,
            pv_percent=payload.pv_percent,
            lot_id=payload.lot_id,
            operational=OperationalCosts(**payload.operational.model_dump()),
        ),
    )
    consumption = result.consumption
    return FeedFormulationResponse(
        cost_per_kg_mix=result.cost_per_kg_mix,
        consumption=LotConsumptionResponse(
            per_animal_kg=consumption.per_animal_kg,
            total_kg=consumption.total_kg,
            daily_cost=consumption.daily_cost,
            monthly_cost=consumption.monthly_cost,
            individual_daily_cost=consumption.individual_daily_cost,
        ),
        operational_daily_cost=result.operational_daily_cost,
        saved_daily_cost=result.saved_daily_cost,
        lot_id=result.lot_id,
    )

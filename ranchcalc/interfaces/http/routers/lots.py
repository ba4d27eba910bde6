from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from ranchcalc.application.use_cases.lots import create_lot, list_lots, sell_lot, update_lot
from ranchcalc.config.settings import Settings
from ranchcalc.interfaces.http.deps import get_app_settings, get_farm_id, get_uow
from ranchcalc.interfaces.http.schemas.lots import (
    LotCreate,
    LotResponse,
    LotSaleRequest,
    LotSaleResponse,
    LotUpdate,
)

router = APIRouter(prefix="/lots", tags=["lots"])


def _lot_response(item: list_lots.LotWithSummary) -> LotResponse:
    return LotResponse(
        id=item.lot.id,
        name=item.lot.name,
        description=item.lot.description,
        daily_cost=item.lot.daily_cost,
        head_count=item.summary.head_count,
        avg_weight_kg=item.summary.avg_weight_kg,
    )


@router.get("/", response_model=list[LotResponse])
async def list_lots_endpoint(
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    items = await list_lots.execute(uow, farm_id)
    return [_lot_response(x) for x in items]


@router.post("/", response_model=LotResponse, status_code=status.HTTP_201_CREATED)
async def create_lot_endpoint(
    payload: LotCreate,
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    created = await create_lot.execute(
        uow,
        farm_id,
        create_lot.CreateLotInput(
            name=payload.name,
            description=payload.description,
            daily_cost=payload.daily_cost,
        ),
    )
    return LotResponse(
        id=created.id,
        name=created.name,
        description=created.description,
        daily_cost=created.daily_cost,
    )


@router.put("/{lot_id}", response_model=LotResponse)
async def update_lot_endpoint(
    lot_id: UUID,
    payload: LotUpdate,
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    updated = await update_lot.execute(
        uow, farm_id, lot_id, update_lot.UpdateLotInput(**payload.model_dump())
    )
    return _lot_response(updated)


@router.post("/{lot_id}/sale", response_model=LotSaleResponse)
async def sell_lot_endpoint(
    lot_id: UUID,
    payload: LotSaleRequest,
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    settings: Settings = Depends(get_app_settings),
):
    result = await sell_lot.execute(
        uow,
        farm_id,
        lot_id,
        sell_lot.SellLotInput(
            sale_date=payload.sale_date,
            pricing_mode=payload.pricing_mode,
            price=payload.price,
            avg_final_weight_kg=payload.avg_final_weight_kg,
        ),
        live_arroba_kg=settings.live_arroba_kg,
        default_daily_cost=settings.default_global_daily_cost,
    )
    revenue_tx = result.revenue_transaction
    holding_tx = result.holding_cost_transaction
    return LotSaleResponse(
        head_count=result.head_count,
        revenue=result.revenue,
        purchase_total=result.purchase_total,
        holding_cost_total=result.holding_cost_total,
        net_profit=result.net_profit,
        revenue_transaction_id=revenue_tx.id if revenue_tx else None,
        holding_cost_transaction_id=holding_tx.id if holding_tx else None,
        sold_animal_ids=[a.id for a in result.updated_animals],
    )

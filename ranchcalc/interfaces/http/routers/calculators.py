"""Stateless endpoints over the calculation engine.

Nothing here reads or writes farm data; the caller sends every input on
each request (the forms recompute on every keystroke).
"""

from __future__ import annotations

from dataclasses import asdict
from decimal import Decimal
from uuid import uuid4

from fastapi import APIRouter, Depends

from ranchcalc.application.errors import ValidationError
from ranchcalc.config.settings import Settings
from ranchcalc.domain.calculators.cycle_simulator import CycleInputs, simulate_cycle
from ranchcalc.domain.calculators.daily_cost import (
    OperationalCosts,
    compute_daily_allocation,
    compute_operational_daily_cost,
)
from ranchcalc.domain.calculators.feed_mix import (
    Ingredient,
    batch_total_from_ingredient,
    compute_lot_consumption,
    feed_mix_status,
    mixer_batch,
)
from ranchcalc.domain.calculators.numeric import ZERO, days_between
from ranchcalc.domain.calculators.purchase import price_batch_purchase
from ranchcalc.domain.calculators.sale_profit import (
    compute_lot_sale,
    project_sale_profit,
    sale_value_from_arroba,
)
from ranchcalc.domain.calculators.weight_gain import compute_gmd
from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.models.lot import Lot
from ranchcalc.domain.models.weight_record import WeightRecord
from ranchcalc.interfaces.http.deps import get_app_settings
from ranchcalc.interfaces.http.schemas.calculators import (
    BatchPurchaseRequest,
    BatchPurchaseResponse,
    CycleRequest,
    CycleResponse,
    DailyAllocationRequest,
    DailyAllocationResponse,
    FeedMixRequest,
    FeedMixResponse,
    GmdRequest,
    GmdResponse,
    LotSalePreviewResponse,
    LotSaleRequest,
    MixerLine,
    OperationalCostRequest,
    OperationalCostResponse,
    SaleProfitRequest,
    SaleProfitResponse,
)
from ranchcalc.interfaces.http.schemas.costs import LotConsumptionResponse

router = APIRouter(prefix="/calculators", tags=["calculators"])


def _scratch_lot(daily_cost: Decimal | None) -> Lot | None:
    # Calculator requests carry the lot override directly, not a lot id
    if daily_cost is None:
        return None
    return Lot.create(farm_id=uuid4(), name="calculator", daily_cost=daily_cost)


@router.post("/gmd", response_model=GmdResponse)
async def calculate_gmd(payload: GmdRequest) -> GmdResponse:
    last = WeightRecord(date=payload.last_date, weight_kg=payload.last_weight_kg)
    return GmdResponse(
        days=days_between(payload.last_date, payload.new_date),
        gmd=compute_gmd(last, payload.new_date, payload.new_weight_kg),
    )


@router.post("/sale-profit", response_model=SaleProfitResponse)
async def calculate_sale_profit(
    payload: SaleProfitRequest,
    settings: Settings = Depends(get_app_settings),
) -> SaleProfitResponse:
    if payload.sale_value is not None:
        sale_value = payload.sale_value
    else:
        sale_value = sale_value_from_arroba(
            payload.final_weight_kg or ZERO,
            payload.price_per_arroba or ZERO,
            settings.live_arroba_kg,
        )
    animal = Animal.create(
        farm_id=uuid4(),
        ear_tag="calculator",
        weight_kg=payload.final_weight_kg or ZERO,
        entry_date=payload.entry_date,
        purchase_value=payload.purchase_value,
    )
    projection = project_sale_profit(
        animal,
        _scratch_lot(payload.lot_daily_cost),
        payload.global_daily_cost,
        payload.sale_date,
        sale_value,
    )
    return SaleProfitResponse(sale_value=sale_value, **asdict(projection))


@router.post("/lot-sale", response_model=LotSalePreviewResponse)
async def calculate_lot_sale(
    payload: LotSaleRequest,
    settings: Settings = Depends(get_app_settings),
) -> LotSalePreviewResponse:
    farm_id = uuid4()
    animals = []
    for i, item in enumerate(payload.animals):
        animal = Animal.create(
            farm_id=farm_id,
            ear_tag=f"calc-{i}",
            weight_kg=payload.avg_final_weight_kg or ZERO,
            entry_date=item.entry_date,
            status=item.status,
            purchase_value=item.purchase_value,
        )
        animals.append(animal)
    result = compute_lot_sale(
        animals,
        _scratch_lot(payload.lot_daily_cost),
        payload.global_daily_cost,
        payload.sale_date,
        payload.pricing_mode,
        payload.price,
        payload.avg_final_weight_kg,
        settings.live_arroba_kg,
    )
    return LotSalePreviewResponse(
        head_count=result.head_count,
        revenue=result.revenue,
        purchase_total=result.purchase_total,
        holding_cost_total=result.holding_cost_total,
        net_profit=result.net_profit,
    )


@router.post("/feed-mix", response_model=FeedMixResponse)
async def calculate_feed_mix(payload: FeedMixRequest) -> FeedMixResponse:
    ingredients = [
        Ingredient(name=i.name, percent=i.percent, price_kg=i.price_kg) for i in payload.ingredients
    ]
    status = feed_mix_status(ingredients)
    consumption = compute_lot_consumption(
        status.cost_per_kg, payload.avg_weight_kg, payload.head_count, payload.pv_percent
    )
    batch_total = payload.batch_total_kg
    if batch_total is None and payload.weighed_ingredient and payload.weighed_kg is not None:
        weighed = next((i for i in ingredients if i.name == payload.weighed_ingredient), None)
        if weighed is None:
            raise ValidationError(f"Unknown ingredient: {payload.weighed_ingredient}")
        batch_total = batch_total_from_ingredient(weighed, payload.weighed_kg)
    mixer = []
    if batch_total is not None:
        lines = mixer_batch(ingredients, batch_total)
        mixer = [MixerLine(name=name, kg=kg) for name, kg in lines]
    return FeedMixResponse(
        cost_per_kg_mix=status.cost_per_kg,
        total_percent=status.total_percent,
        exceeds_limit=status.exceeds_limit,
        consumption=LotConsumptionResponse(**asdict(consumption)),
        batch_total_kg=batch_total,
        mixer=mixer,
    )


@router.post("/daily-allocation", response_model=DailyAllocationResponse)
async def calculate_daily_allocation(payload: DailyAllocationRequest) -> DailyAllocationResponse:
    allocation = compute_daily_allocation(
        payload.rent,
        payload.supp_cost_monthly,
        payload.extra_cost_monthly,
        payload.total_animals,
        payload.gmd,
    )
    return DailyAllocationResponse(**asdict(allocation))


@router.post("/operational-cost", response_model=OperationalCostResponse)
async def calculate_operational_cost(payload: OperationalCostRequest) -> OperationalCostResponse:
    costs = OperationalCosts(
        labor=payload.labor,
        fuel=payload.fuel,
        energy=payload.energy,
        maintenance=payload.maintenance,
        other=payload.other,
    )
    return OperationalCostResponse(
        total_monthly=costs.total,
        daily_cost_per_head=compute_operational_daily_cost(costs, payload.head_count),
    )


@router.post("/cycle", response_model=CycleResponse)
async def calculate_cycle(
    payload: CycleRequest,
    settings: Settings = Depends(get_app_settings),
) -> CycleResponse:
    inputs = CycleInputs(
        head_count=payload.head_count,
        entry_weight=payload.entry_weight,
        buy_price_per_arroba=payload.buy_price_per_arroba,
        exit_weight=payload.exit_weight,
        gmd=payload.gmd,
        days=payload.days,
        carcass_yield_percent=payload.carcass_yield_percent,
        sell_price_per_arroba=payload.sell_price_per_arroba,
        daily_supplement_cost=payload.daily_supplement_cost,
        daily_operating_cost=payload.daily_operating_cost,
        live_arroba_kg=settings.live_arroba_kg,
        carcass_arroba_kg=settings.carcass_arroba_kg,
    )
    return CycleResponse(**asdict(simulate_cycle(inputs, payload.target)))


@router.post("/batch-purchase", response_model=BatchPurchaseResponse)
async def calculate_batch_purchase(
    payload: BatchPurchaseRequest,
    settings: Settings = Depends(get_app_settings),
) -> BatchPurchaseResponse:
    quote = price_batch_purchase(
        payload.quantity,
        payload.weight_value,
        payload.weight_unit,
        payload.pricing_mode,
        payload.price_value,
        settings.live_arroba_kg,
    )
    return BatchPurchaseResponse(**asdict(quote))

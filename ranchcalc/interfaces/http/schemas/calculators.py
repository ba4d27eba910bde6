from __future__ import annotations

from datetime import date as DtDate
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from ranchcalc.domain.value_objects.animal_status import AnimalStatus
from ranchcalc.domain.value_objects.pricing import PricingMode, WeightUnit
from ranchcalc.domain.value_objects.solve_target import CycleVerdict, SolveTarget
from ranchcalc.interfaces.http.schemas.costs import (
    IngredientIn,
    LotConsumptionResponse,
    OperationalCostsIn,
    check_pv_percent,
)


class GmdRequest(BaseModel):
    last_date: DtDate
    last_weight_kg: Decimal
    new_date: DtDate
    new_weight_kg: Decimal


class GmdResponse(BaseModel):
    days: int
    gmd: Decimal


class SaleProfitRequest(BaseModel):
    entry_date: DtDate | None = None
    purchase_value: Decimal = Decimal("0")
    lot_daily_cost: Decimal | None = None
    global_daily_cost: Decimal = Decimal("0")
    sale_date: DtDate
    # Either a total sale value, or an arroba price with the final weight
    sale_value: Decimal | None = None
    final_weight_kg: Decimal | None = None
    price_per_arroba: Decimal | None = None


class SaleProfitResponse(BaseModel):
    sale_value: Decimal
    days: int
    daily_cost: Decimal
    production_cost: Decimal
    profit: Decimal


class LotSaleAnimalIn(BaseModel):
    entry_date: DtDate | None = None
    purchase_value: Decimal = Decimal("0")
    status: AnimalStatus = AnimalStatus.ACTIVE


class LotSaleRequest(BaseModel):
    animals: list[LotSaleAnimalIn]
    lot_daily_cost: Decimal | None = None
    global_daily_cost: Decimal = Decimal("0")
    sale_date: DtDate
    pricing_mode: PricingMode
    price: Decimal
    avg_final_weight_kg: Decimal | None = None


class LotSalePreviewResponse(BaseModel):
    head_count: int
    revenue: Decimal
    purchase_total: Decimal
    holding_cost_total: Decimal
    net_profit: Decimal


class FeedMixRequest(BaseModel):
    ingredients: list[IngredientIn]
    avg_weight_kg: Decimal = Decimal("0")
    head_count: int = 0
    pv_percent: Decimal = Decimal("0.1")
    batch_total_kg: Decimal | None = None
    # Size the mixer load from the kg already weighed of one ingredient
    weighed_ingredient: str | None = None
    weighed_kg: Decimal | None = None

    @field_validator("pv_percent")
    @classmethod
    def validate_pv_percent(cls, value: Decimal) -> Decimal:
        return check_pv_percent(value)


class MixerLine(BaseModel):
    name: str
    kg: Decimal


class FeedMixResponse(BaseModel):
    cost_per_kg_mix: Decimal
    total_percent: Decimal
    exceeds_limit: bool
    consumption: LotConsumptionResponse
    batch_total_kg: Decimal | None = None
    mixer: list[MixerLine]


class DailyAllocationRequest(BaseModel):
    rent: Decimal = Decimal("0")
    supp_cost_monthly: Decimal = Decimal("0")
    extra_cost_monthly: Decimal = Decimal("0")
    total_animals: int = 0
    gmd: Decimal = Decimal("0")


class DailyAllocationResponse(BaseModel):
    total_monthly_cost: Decimal
    monthly_cost_per_animal: Decimal
    daily_cost_per_animal: Decimal
    days_per_arroba: Decimal
    cost_per_arroba_produced: Decimal


class OperationalCostRequest(OperationalCostsIn):
    head_count: int = 0


class OperationalCostResponse(BaseModel):
    total_monthly: Decimal
    daily_cost_per_head: Decimal


class CycleRequest(BaseModel):
    target: SolveTarget = SolveTarget.FINAL_WEIGHT
    head_count: int = Field(default=1, ge=0)
    entry_weight: Decimal = Decimal("0")
    buy_price_per_arroba: Decimal = Decimal("0")
    exit_weight: Decimal = Decimal("0")
    gmd: Decimal = Decimal("0")
    days: Decimal = Decimal("0")
    carcass_yield_percent: Decimal = Decimal("52")
    sell_price_per_arroba: Decimal = Decimal("0")
    daily_supplement_cost: Decimal = Decimal("0")
    daily_operating_cost: Decimal = Decimal("0")


class CycleResponse(BaseModel):
    days: Decimal
    gmd: Decimal
    final_weight: Decimal
    purchase_cost_per_head: Decimal
    nutrition_cost_per_head: Decimal
    operational_cost_per_head: Decimal
    outlay_per_head: Decimal
    carcass_kg: Decimal
    arrobas_produced: Decimal
    revenue_per_head: Decimal
    net_profit_per_head: Decimal
    net_profit_total: Decimal
    total_outlay: Decimal
    roi_percent: Decimal
    monthly_roi: Decimal
    break_even: Decimal
    verdict: CycleVerdict


class BatchPurchaseRequest(BaseModel):
    quantity: int = Field(ge=0)
    weight_value: Decimal
    weight_unit: WeightUnit = WeightUnit.KG
    pricing_mode: PricingMode = PricingMode.PER_HEAD
    price_value: Decimal


class BatchPurchaseResponse(BaseModel):
    quantity: int
    avg_weight_kg: Decimal
    unit_price: Decimal
    total_cost: Decimal

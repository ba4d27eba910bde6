from __future__ import annotations

from datetime import date as DtDate
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from ranchcalc.domain.value_objects.pricing import PricingMode


class LotCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    daily_cost: Decimal | None = Field(default=None, ge=0)


class LotUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    daily_cost: Decimal | None = Field(default=None, ge=0)
    clear_daily_cost: bool = False


class LotResponse(BaseModel):
    id: UUID
    name: str
    description: str | None
    daily_cost: Decimal | None
    head_count: int = 0
    avg_weight_kg: Decimal = Decimal("0")


class LotSaleRequest(BaseModel):
    sale_date: DtDate
    pricing_mode: PricingMode
    price: Decimal = Field(ge=0)
    avg_final_weight_kg: Decimal | None = Field(default=None, gt=0)


class LotSaleResponse(BaseModel):
    head_count: int
    revenue: Decimal
    purchase_total: Decimal
    holding_cost_total: Decimal
    net_profit: Decimal
    revenue_transaction_id: UUID | None
    holding_cost_transaction_id: UUID | None
    sold_animal_ids: list[UUID]

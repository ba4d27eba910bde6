from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from ranchcalc.domain.calculators.feed_mix import PV_PERCENT_OPTIONS


class IngredientIn(BaseModel):
    name: str = ""
    percent: Decimal = Field(ge=0)
    price_kg: Decimal = Field(ge=0)


class OperationalCostsIn(BaseModel):
    labor: Decimal = Field(default=Decimal("0"), ge=0)
    fuel: Decimal = Field(default=Decimal("0"), ge=0)
    energy: Decimal = Field(default=Decimal("0"), ge=0)
    maintenance: Decimal = Field(default=Decimal("0"), ge=0)
    other: Decimal = Field(default=Decimal("0"), ge=0)


def check_pv_percent(value: Decimal) -> Decimal:
    if value not in PV_PERCENT_OPTIONS:
        allowed = ", ".join(str(v) for v in PV_PERCENT_OPTIONS)
        raise ValueError(f"pv_percent must be one of: {allowed}")
    return value


class DailyCostUpdate(BaseModel):
    daily_cost: Decimal = Field(ge=0)
    lot_id: UUID | None = None


class DailyCostResponse(BaseModel):
    daily_cost: Decimal
    lot_id: UUID | None


class FarmConfigResponse(BaseModel):
    global_daily_cost: Decimal


class FeedFormulationSave(BaseModel):
    ingredients: list[IngredientIn] = Field(min_length=1)
    avg_weight_kg: Decimal = Field(ge=0)
    head_count: int = Field(ge=0)
    pv_percent: Decimal = Decimal("0.1")
    lot_id: UUID | None = None
    operational: OperationalCostsIn = Field(default_factory=OperationalCostsIn)

    @field_validator("pv_percent")
    @classmethod
    def validate_pv_percent(cls, value: Decimal) -> Decimal:
        return check_pv_percent(value)


class LotConsumptionResponse(BaseModel):
    per_animal_kg: Decimal
    total_kg: Decimal
    daily_cost: Decimal
    monthly_cost: Decimal
    individual_daily_cost: Decimal


class FeedFormulationResponse(BaseModel):
    cost_per_kg_mix: Decimal
    consumption: LotConsumptionResponse
    operational_daily_cost: Decimal
    saved_daily_cost: Decimal
    lot_id: UUID | None

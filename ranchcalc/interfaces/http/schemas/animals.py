from __future__ import annotations

from datetime import date as DtDate
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.value_objects.animal_status import AnimalStatus, Gender
from ranchcalc.domain.value_objects.pricing import PricingMode, WeightUnit


class AnimalCreate(BaseModel):
    ear_tag: str = Field(min_length=1, max_length=128)
    weight_kg: Decimal = Field(gt=0)
    entry_date: DtDate | None = None
    breed: str | None = None
    gender: Gender | None = None
    birth_date: DtDate | None = None
    status: AnimalStatus = AnimalStatus.ACTIVE
    purchase_price: Decimal = Field(default=Decimal("0"), ge=0)
    pricing_mode: PricingMode = PricingMode.PER_HEAD
    lot_id: UUID | None = None
    notes: str | None = None
    mother_id: UUID | None = None
    father_id: UUID | None = None


class AnimalUpdate(BaseModel):
    version: int = Field(ge=1)
    ear_tag: str | None = Field(default=None, min_length=1, max_length=128)
    breed: str | None = None
    gender: Gender | None = None
    birth_date: DtDate | None = None
    entry_date: DtDate | None = None
    status: AnimalStatus | None = None
    purchase_value: Decimal | None = Field(default=None, ge=0)
    lot_id: UUID | None = None
    remove_from_lot: bool = False
    notes: str | None = None
    mother_id: UUID | None = None
    father_id: UUID | None = None


class BatchCreate(BaseModel):
    quantity: int = Field(gt=0, le=1000)
    tag_prefix: str = Field(default="CRG-", max_length=64)
    entry_date: DtDate
    weight_value: Decimal = Field(gt=0)
    weight_unit: WeightUnit = WeightUnit.KG
    pricing_mode: PricingMode = PricingMode.PER_HEAD
    price_value: Decimal = Field(default=Decimal("0"), ge=0)
    breed: str | None = None
    lot_id: UUID | None = None


class WeighingCreate(BaseModel):
    weighed_on: DtDate
    weight_kg: Decimal = Field(gt=0)


class SaleRequest(BaseModel):
    sale_date: DtDate
    final_weight_kg: Decimal = Field(ge=0)
    price: Decimal = Field(ge=0)
    pricing_mode: PricingMode = PricingMode.PER_HEAD


class DeathRequest(BaseModel):
    died_on: DtDate
    cause: str | None = None


class WeightRecordResponse(BaseModel):
    date: DtDate
    weight_kg: Decimal
    gmd: Decimal


class AnimalResponse(BaseModel):
    id: UUID
    ear_tag: str
    breed: str | None
    gender: Gender | None
    birth_date: DtDate | None
    entry_date: DtDate | None
    weight_kg: Decimal
    status: AnimalStatus
    purchase_value: Decimal
    lot_id: UUID | None
    notes: str | None
    mother_id: UUID | None
    father_id: UUID | None
    sold_at: DtDate | None
    death_date: DtDate | None
    death_cause: str | None
    last_gmd: Decimal
    history: list[WeightRecordResponse]
    version: int

    @classmethod
    def from_domain(cls, animal: Animal) -> AnimalResponse:
        return cls(
            id=animal.id,
            ear_tag=animal.ear_tag,
            breed=animal.breed,
            gender=animal.gender,
            birth_date=animal.birth_date,
            entry_date=animal.entry_date,
            weight_kg=animal.weight_kg,
            status=animal.status,
            purchase_value=animal.purchase_value,
            lot_id=animal.lot_id,
            notes=animal.notes,
            mother_id=animal.mother_id,
            father_id=animal.father_id,
            sold_at=animal.sold_at,
            death_date=animal.death_date,
            death_cause=animal.death_cause,
            last_gmd=animal.last_record.gmd,
            history=[
                WeightRecordResponse(date=r.date, weight_kg=r.weight_kg, gmd=r.gmd)
                for r in animal.history
            ],
            version=animal.version,
        )


class SaleProjectionResponse(BaseModel):
    sale_value: Decimal
    days: int
    daily_cost: Decimal
    production_cost: Decimal
    profit: Decimal


class SaleResponse(BaseModel):
    animal: AnimalResponse
    transaction_id: UUID
    projection: SaleProjectionResponse


class BatchResponse(BaseModel):
    quantity: int
    avg_weight_kg: Decimal
    unit_price: Decimal
    total_cost: Decimal
    animals: list[AnimalResponse]
    expense_transaction_id: UUID | None

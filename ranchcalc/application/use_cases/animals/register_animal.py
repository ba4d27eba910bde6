from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from ranchcalc.application.errors import NotFound, ValidationError
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.domain.calculators.sale_profit import sale_value_from_arroba
from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.value_objects.animal_status import AnimalStatus, Gender
from ranchcalc.domain.value_objects.pricing import PricingMode


@dataclass(slots=True)
class RegisterAnimalInput:
    ear_tag: str
    weight_kg: Decimal
    entry_date: date | None = None
    breed: str | None = None
    gender: Gender | None = None
    birth_date: date | None = None
    status: AnimalStatus = AnimalStatus.ACTIVE
    # Total price, or price per live arroba when pricing_mode is PER_ARROBA
    purchase_price: Decimal = Decimal("0")
    pricing_mode: PricingMode = PricingMode.PER_HEAD
    lot_id: UUID | None = None
    notes: str | None = None
    mother_id: UUID | None = None
    father_id: UUID | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    payload: RegisterAnimalInput,
    *,
    live_arroba_kg: Decimal = Decimal("30"),
) -> Animal:
    if payload.weight_kg <= 0:
        raise ValidationError("Weight must be positive")
    if payload.lot_id is not None and await uow.lots.get(farm_id, payload.lot_id) is None:
        raise NotFound("Lot not found")

    if payload.pricing_mode is PricingMode.PER_ARROBA:
        purchase_value = sale_value_from_arroba(
            payload.weight_kg, payload.purchase_price, live_arroba_kg
        )
    else:
        purchase_value = payload.purchase_price

    animal = Animal.create(
        farm_id=farm_id,
        ear_tag=payload.ear_tag.strip(),
        weight_kg=payload.weight_kg,
        entry_date=payload.entry_date,
        breed=payload.breed,
        gender=payload.gender,
        birth_date=payload.birth_date,
        status=payload.status,
        purchase_value=purchase_value,
        lot_id=payload.lot_id,
        notes=payload.notes,
        mother_id=payload.mother_id,
        father_id=payload.father_id,
    )
    created = await uow.animals.add(animal)
    await uow.commit()
    return created

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from ranchcalc.domain.calculators.numeric import to_weight
from ranchcalc.domain.models.weight_record import WeightRecord
from ranchcalc.domain.value_objects.animal_status import AnimalStatus, Gender


@dataclass(slots=True)
class Animal:
    id: UUID
    farm_id: UUID
    ear_tag: str
    weight_kg: Decimal
    history: list[WeightRecord]
    breed: str | None = None
    gender: Gender | None = None
    birth_date: date | None = None
    entry_date: date | None = None
    status: AnimalStatus = AnimalStatus.ACTIVE
    purchase_value: Decimal = Decimal("0")
    lot_id: UUID | None = None
    notes: str | None = None

    # Genealogy (plain identifiers, resolved by the caller)
    mother_id: UUID | None = None
    father_id: UUID | None = None

    # Disposition fields
    sold_at: date | None = None
    death_date: date | None = None
    death_cause: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        ear_tag: str,
        weight_kg: Decimal,
        *,
        entry_date: date | None = None,
        breed: str | None = None,
        gender: Gender | None = None,
        birth_date: date | None = None,
        status: AnimalStatus = AnimalStatus.ACTIVE,
        purchase_value: Decimal = Decimal("0"),
        lot_id: UUID | None = None,
        notes: str | None = None,
        mother_id: UUID | None = None,
        father_id: UUID | None = None,
    ) -> Animal:
        now = datetime.now(timezone.utc)
        weight_kg = to_weight(weight_kg)
        # The first weighing is the registration itself; no gain measured yet
        first = WeightRecord(date=entry_date or now.date(), weight_kg=weight_kg, gmd=Decimal("0"))
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            ear_tag=ear_tag,
            weight_kg=weight_kg,
            history=[first],
            breed=breed,
            gender=gender,
            birth_date=birth_date,
            entry_date=entry_date,
            status=status,
            purchase_value=purchase_value,
            lot_id=lot_id,
            notes=notes,
            mother_id=mother_id,
            father_id=father_id,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def last_record(self) -> WeightRecord:
        return self.history[-1]

    @property
    def is_active(self) -> bool:
        return self.status is AnimalStatus.ACTIVE

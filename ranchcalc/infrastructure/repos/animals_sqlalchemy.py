from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ranchcalc.application.errors import ConflictError
from ranchcalc.application.interfaces.repositories.animals import AnimalRepository
from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.models.weight_record import WeightRecord
from ranchcalc.domain.value_objects.animal_status import AnimalStatus, Gender
from ranchcalc.infrastructure.db.orm.animal import AnimalORM


def _history_to_json(history: list[WeightRecord]) -> list[dict]:
    return [
        {"date": r.date.isoformat(), "weight_kg": str(r.weight_kg), "gmd": str(r.gmd)}
        for r in history
    ]


def _history_from_json(items: list[dict]) -> list[WeightRecord]:
    return [
        WeightRecord(
            date=date.fromisoformat(item["date"]),
            weight_kg=Decimal(item["weight_kg"]),
            gmd=Decimal(item.get("gmd") or "0"),
        )
        for item in items
    ]


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            farm_id=orm.farm_id,
            ear_tag=orm.ear_tag,
            weight_kg=orm.weight_kg,
            history=_history_from_json(orm.history),
            breed=orm.breed,
            gender=Gender(orm.gender) if orm.gender else None,
            birth_date=orm.birth_date,
            entry_date=orm.entry_date,
            status=AnimalStatus(orm.status),
            purchase_value=orm.purchase_value,
            lot_id=orm.lot_id,
            notes=orm.notes,
            mother_id=orm.mother_id,
            father_id=orm.father_id,
            sold_at=orm.sold_at,
            death_date=orm.death_date,
            death_cause=orm.death_cause,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    def _apply(self, orm: AnimalORM, animal: Animal) -> None:
        orm.ear_tag = animal.ear_tag
        orm.weight_kg = animal.weight_kg
        orm.history = _history_to_json(animal.history)
        orm.breed = animal.breed
        orm.gender = animal.gender.value if animal.gender else None
        orm.birth_date = animal.birth_date
        orm.entry_date = animal.entry_date
        orm.status = animal.status.value
        orm.purchase_value = animal.purchase_value
        orm.lot_id = animal.lot_id
        orm.notes = animal.notes
        orm.mother_id = animal.mother_id
        orm.father_id = animal.father_id
        orm.sold_at = animal.sold_at
        orm.death_date = animal.death_date
        orm.death_cause = animal.death_cause
        orm.version = animal.version

    async def add(self, animal: Animal) -> Animal:
        orm = AnimalORM(
            id=animal.id,
            farm_id=animal.farm_id,
            created_at=animal.created_at,
            updated_at=animal.updated_at,
        )
        self._apply(orm, animal)
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Ear tag already exists for farm") from exc
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, animal_id: UUID) -> Animal | None:
        stmt = select(AnimalORM).where(AnimalORM.farm_id == farm_id, AnimalORM.id == animal_id)
        res = await self.session.execute(stmt)
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        farm_id: UUID,
        *,
        lot_id: UUID | None = None,
        statuses: list[AnimalStatus] | None = None,
        search: str | None = None,
    ) -> list[Animal]:
        stmt = select(AnimalORM).where(AnimalORM.farm_id == farm_id)
        if lot_id is not None:
            stmt = stmt.where(AnimalORM.lot_id == lot_id)
        if statuses:
            stmt = stmt.where(AnimalORM.status.in_([s.value for s in statuses]))
        if search:
            pattern = f"%{search.strip()}%"
            stmt = stmt.where(AnimalORM.ear_tag.ilike(pattern) | AnimalORM.breed.ilike(pattern))
        stmt = stmt.order_by(AnimalORM.ear_tag)
        res = await self.session.execute(stmt)
        return [self._to_domain(x) for x in res.scalars().all()]

    async def update(self, animal: Animal, expected_version: int) -> Animal | None:
        stmt = select(AnimalORM).where(
            AnimalORM.farm_id == animal.farm_id,
            AnimalORM.id == animal.id,
            AnimalORM.version == expected_version,
        )
        res = await self.session.execute(stmt)
        orm = res.scalar_one_or_none()
        if orm is None:
            return None
        self._apply(orm, animal)
        orm.updated_at = datetime.now(timezone.utc)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to update animal") from exc
        return self._to_domain(orm)

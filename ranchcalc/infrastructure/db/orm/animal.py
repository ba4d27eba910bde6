from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    Date,
    DateTime,
    Integer,
    Numeric,
    String,
    Text,
    TypeDecorator,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from ranchcalc.infrastructure.db.base import Base


class WeightHistory(TypeDecorator):
    """Stores the weighing history as a JSON list of {date, weight_kg, gmd}.

    Decimals are kept as strings so GMD values survive the round trip exactly.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            value = []
        return json.dumps(value)

    def process_result_value(self, value, dialect):
        if not value:
            return []
        return json.loads(value)


class AnimalORM(Base):
    __tablename__ = "animals"
    __table_args__ = (UniqueConstraint("farm_id", "ear_tag", name="ux_animals_farm_ear_tag"),)

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    ear_tag: Mapped[str] = mapped_column(String(128), nullable=False)
    breed: Mapped[str | None] = mapped_column(String(255), nullable=True)
    gender: Mapped[str | None] = mapped_column(String(8), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    entry_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    weight_kg: Mapped[Decimal] = mapped_column(Numeric(10, 3), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="active")
    purchase_value: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False, default=0)
    lot_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True, index=True)
    notes: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    history: Mapped[list[dict]] = mapped_column(WeightHistory, nullable=False)

    # Genealogy fields (no FK: lineage is resolved by the caller)
    mother_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    father_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)

    # Disposition fields
    sold_at: Mapped[date | None] = mapped_column(Date, nullable=True)
    death_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    death_cause: Mapped[str | None] = mapped_column(String(512), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

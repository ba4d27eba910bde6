from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DateTime, Numeric, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from ranchcalc.infrastructure.db.base import Base


class FarmConfigORM(Base):
    __tablename__ = "farm_configs"

    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    global_daily_cost: Mapped[Decimal] = mapped_column(Numeric(12, 4), nullable=False, default=0)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

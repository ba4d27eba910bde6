from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(slots=True)
class Lot:
    id: UUID
    farm_id: UUID
    name: str
    description: str | None = None
    # Overrides the farm-wide daily cost for animals of this lot
    daily_cost: Decimal | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        name: str,
        *,
        description: str | None = None,
        daily_cost: Decimal | None = None,
    ) -> Lot:
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            name=name,
            description=description,
            daily_cost=daily_cost,
            created_at=datetime.now(timezone.utc),
        )

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, slots=True)
class HealthRecord:
    """Read-only health context consumed by the dashboard."""

    id: UUID
    animal_id: UUID
    title: str
    status: str  # 'in_treatment' | 'done' | 'scheduled'
    severity: str  # 'low' | 'moderate' | 'critical'
    notify_as_reminder: bool = False
    repeat_after_days: int | None = None


@dataclass(frozen=True, slots=True)
class InventoryItem:
    id: UUID
    name: str
    quantity: Decimal
    min_quantity: Decimal
    unit: str
    unit_cost: Decimal = Decimal("0")

    @property
    def is_low(self) -> bool:
        return self.quantity <= self.min_quantity


@dataclass(frozen=True, slots=True)
class Task:
    id: UUID
    description: str
    due_date: date
    status: str  # 'pending' | 'done'

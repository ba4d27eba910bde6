from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class WeightRecord:
    date: date
    weight_kg: Decimal
    gmd: Decimal = Decimal("0")

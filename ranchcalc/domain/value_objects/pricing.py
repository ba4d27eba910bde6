from __future__ import annotations

from enum import Enum


class PricingMode(str, Enum):
    """How a sale or purchase price is entered."""

    PER_HEAD = "per_head"
    PER_ARROBA = "per_arroba"


class WeightUnit(str, Enum):
    KG = "kg"
    ARROBA = "arroba"

"""Numeric helpers shared by the calculators.

Every calculator is meant to run on half-filled forms, so divisions never
raise: a zero or negative denominator yields zero.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")

# Flat month used by every monthly/daily conversion (not calendar accurate)
DAYS_PER_MONTH = Decimal("30")

# kg per arroba: live weight for purchase/sale pricing, carcass weight for yield revenue
LIVE_ARROBA_KG = Decimal("30")
CARCASS_ARROBA_KG = Decimal("15")

# Weights are kept to the gram, matching the animals.weight_kg column scale
WEIGHT_STEP = Decimal("0.001")

Number = Decimal | int | float | str


def to_decimal(value: Number | None) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # Go through str so 0.1 stays 0.1
        return Decimal(str(value))
    return Decimal(value)


def to_weight(value: Number | None) -> Decimal:
    return to_decimal(value).quantize(WEIGHT_STEP, rounding=ROUND_HALF_UP)


def safe_div(numerator: Number, denominator: Number) -> Decimal:
    num = to_decimal(numerator)
    den = to_decimal(denominator)
    if den <= 0:
        return ZERO
    return num / den


def percent_of(value: Number, percent: Number) -> Decimal:
    return to_decimal(value) * (to_decimal(percent) / HUNDRED)


def utc_day(value: date | datetime) -> date:
    """Normalise to the UTC calendar day (midnight timestamp)."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def days_between(start: date | datetime, end: date | datetime) -> int:
    """Signed number of whole days between two UTC-normalised midnights."""
    return (utc_day(end) - utc_day(start)).days

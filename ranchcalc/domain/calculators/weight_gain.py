"""Average daily gain (GMD) from successive weighings.

GMD is the rate between two consecutive weighings, never a lifetime
average. Same-day or backdated weighings produce a GMD of zero instead of a
spike or a negative-infinity artifact.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable

from ranchcalc.domain.calculators.numeric import (
    ZERO,
    Number,
    days_between,
    to_decimal,
    to_weight,
    utc_day,
)
from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.models.weight_record import WeightRecord


def compute_gmd(last: WeightRecord, new_date: date | datetime, new_weight_kg: Number) -> Decimal:
    days = days_between(last.date, new_date)
    if days <= 0:
        return ZERO
    return (to_decimal(new_weight_kg) - last.weight_kg) / Decimal(days)


def record_weighing(animal: Animal, weighed_on: date | datetime, weight_kg: Number) -> Animal:
    """Return a copy of `animal` with the new weighing appended to its history."""
    weight = to_weight(weight_kg)
    day = utc_day(weighed_on)
    gmd = compute_gmd(animal.last_record, day, weight)
    record = WeightRecord(date=day, weight_kg=weight, gmd=gmd)
    return replace(
        animal,
        history=[*animal.history, record],
        weight_kg=weight,
        version=animal.version + 1,
    )


def last_gmd(animal: Animal) -> Decimal:
    if not animal.history:
        return ZERO
    return animal.history[-1].gmd


def average_last_gmd(animals: Iterable[Animal]) -> Decimal:
    """Mean of the latest GMD across active animals (0 for an empty herd)."""
    values = [last_gmd(a) for a in animals if a.is_active and a.history]
    if not values:
        return ZERO
    return sum(values, ZERO) / Decimal(len(values))

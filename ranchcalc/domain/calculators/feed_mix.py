"""Feed-mix (supplement) costing and per-lot consumption.

Ingredient percents are parts per 100 kg of mix. The cost per kg is the
plain weighted sum and is never renormalised, so a mix that does not add up
to 100 % still produces a figure. Above 100 % the mix is flagged and cannot
be saved.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Sequence

from ranchcalc.domain.calculators.numeric import (
    DAYS_PER_MONTH,
    HUNDRED,
    ZERO,
    Number,
    percent_of,
    safe_div,
    to_decimal,
)

# Daily intake as a percentage of live weight offered by the nutrition form
PV_PERCENT_OPTIONS: tuple[Decimal, ...] = (
    Decimal("0.1"),
    Decimal("0.2"),
    Decimal("0.3"),
    Decimal("0.5"),
    Decimal("1.0"),
)


@dataclass(frozen=True, slots=True)
class Ingredient:
    name: str
    percent: Decimal
    price_kg: Decimal


@dataclass(frozen=True, slots=True)
class FeedMixStatus:
    cost_per_kg: Decimal
    total_percent: Decimal

    @property
    def exceeds_limit(self) -> bool:
        return self.total_percent > HUNDRED


@dataclass(frozen=True, slots=True)
class LotConsumption:
    per_animal_kg: Decimal
    total_kg: Decimal
    daily_cost: Decimal
    monthly_cost: Decimal
    individual_daily_cost: Decimal


def total_percent(ingredients: Iterable[Ingredient]) -> Decimal:
    return sum((to_decimal(i.percent) for i in ingredients), ZERO)


def ingredient_share_cost(ingredient: Ingredient) -> Decimal:
    """Cost this ingredient adds to one kg of mix."""
    return percent_of(ingredient.price_kg, ingredient.percent)


def compute_feed_mix(ingredients: Iterable[Ingredient]) -> Decimal:
    return sum((ingredient_share_cost(i) for i in ingredients), ZERO)


def feed_mix_status(ingredients: Sequence[Ingredient]) -> FeedMixStatus:
    return FeedMixStatus(
        cost_per_kg=compute_feed_mix(ingredients),
        total_percent=total_percent(ingredients),
    )


def compute_lot_consumption(
    cost_per_kg_mix: Number,
    avg_weight_kg: Number,
    head_count: int,
    pv_percent: Number,
) -> LotConsumption:
    per_animal_kg = percent_of(avg_weight_kg, pv_percent)
    individual_daily_cost = per_animal_kg * to_decimal(cost_per_kg_mix)
    if head_count <= 0:
        return LotConsumption(
            per_animal_kg=per_animal_kg,
            total_kg=ZERO,
            daily_cost=ZERO,
            monthly_cost=ZERO,
            individual_daily_cost=individual_daily_cost,
        )
    total_kg = per_animal_kg * Decimal(head_count)
    daily_cost = total_kg * to_decimal(cost_per_kg_mix)
    return LotConsumption(
        per_animal_kg=per_animal_kg,
        total_kg=total_kg,
        daily_cost=daily_cost,
        monthly_cost=daily_cost * DAYS_PER_MONTH,
        individual_daily_cost=individual_daily_cost,
    )


def mixer_batch(
    ingredients: Iterable[Ingredient], batch_total_kg: Number
) -> list[tuple[str, Decimal]]:
    """Kg of each ingredient needed for a mixer load of `batch_total_kg`."""
    return [(i.name, percent_of(batch_total_kg, i.percent)) for i in ingredients]


def batch_total_from_ingredient(ingredient: Ingredient, ingredient_kg: Number) -> Decimal | None:
    """Mixer load size implied by weighing `ingredient_kg` of one ingredient."""
    if to_decimal(ingredient.percent) <= 0:
        return None
    return safe_div(to_decimal(ingredient_kg) * HUNDRED, ingredient.percent)

from __future__ import annotations

from decimal import Decimal

from ranchcalc.domain.calculators.feed_mix import (
    Ingredient,
    batch_total_from_ingredient,
    compute_feed_mix,
    compute_lot_consumption,
    feed_mix_status,
    mixer_batch,
)

CORN = Ingredient(name="Corn", percent=Decimal("60"), price_kg=Decimal("1"))
SOY = Ingredient(name="Soybean meal", percent=Decimal("40"), price_kg=Decimal("2"))


def test_cost_per_kg_is_weighted_sum():
    assert compute_feed_mix([CORN, SOY]) == Decimal("1.4")


def test_mix_over_100_percent_still_computes_but_is_flagged():
    urea = Ingredient(name="Urea", percent=Decimal("10"), price_kg=Decimal("5"))
    status = feed_mix_status([CORN, SOY, urea])
    assert status.total_percent == Decimal("110")
    assert status.cost_per_kg == Decimal("1.9")
    assert status.exceeds_limit


def test_mix_under_100_percent_is_not_renormalised():
    status = feed_mix_status([CORN])
    assert status.cost_per_kg == Decimal("0.6")
    assert not status.exceeds_limit


def test_empty_mix_costs_nothing():
    assert compute_feed_mix([]) == Decimal("0")


def test_lot_consumption():
    consumption = compute_lot_consumption(Decimal("1.4"), Decimal("400"), 10, Decimal("1.0"))
    assert consumption.per_animal_kg == Decimal("4")
    assert consumption.total_kg == Decimal("40")
    assert consumption.daily_cost == Decimal("56")
    assert consumption.monthly_cost == Decimal("1680")
    assert consumption.individual_daily_cost == Decimal("5.6")


def test_zero_head_lot_returns_zero_aggregates():
    consumption = compute_lot_consumption(Decimal("1.4"), Decimal("400"), 0, Decimal("0.5"))
    assert consumption.total_kg == Decimal("0")
    assert consumption.daily_cost == Decimal("0")
    assert consumption.monthly_cost == Decimal("0")


def test_mixer_batch_splits_load_by_percent():
    assert mixer_batch([CORN, SOY], Decimal("1000")) == [
        ("Corn", Decimal("600")),
        ("Soybean meal", Decimal("400")),
    ]


def test_batch_total_from_one_weighed_ingredient():
    assert batch_total_from_ingredient(CORN, Decimal("300")) == Decimal("500")
    empty = Ingredient(name="Salt", percent=Decimal("0"), price_kg=Decimal("3"))
    assert batch_total_from_ingredient(empty, Decimal("10")) is None

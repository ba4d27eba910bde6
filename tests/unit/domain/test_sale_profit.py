from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from uuid import uuid4

from ranchcalc.domain.calculators.sale_profit import (
    HOLDING_COST_CATEGORY,
    SALES_CATEGORY,
    compute_lot_sale,
    holding_days,
    lot_sale_revenue,
    project_sale_profit,
    record_death,
    resolve_daily_cost,
    sale_value_from_arroba,
    sell_animal,
)
from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.models.lot import Lot
from ranchcalc.domain.value_objects.animal_status import AnimalStatus
from ranchcalc.domain.value_objects.pricing import PricingMode
from ranchcalc.domain.value_objects.transaction_type import TransactionType

SALE_DATE = date(2024, 6, 1)
FARM_ID = uuid4()


def make_animal(tag: str, days_ago: int, purchase: str, **kwargs) -> Animal:
    return Animal.create(
        FARM_ID,
        tag,
        Decimal("350"),
        entry_date=SALE_DATE - timedelta(days=days_ago),
        purchase_value=Decimal(purchase),
        **kwargs,
    )


def test_sale_profit_reference_case():
    animal = make_animal("BR-1", 100, "3000")
    projection = project_sale_profit(animal, None, Decimal("2"), SALE_DATE, Decimal("5000"))
    assert projection.days == 100
    assert projection.daily_cost == Decimal("2")
    assert projection.production_cost == Decimal("200")
    assert projection.profit == Decimal("1800")


def test_lot_override_wins_even_when_zero():
    free_lot = Lot.create(FARM_ID, "Pasture A", daily_cost=Decimal("0"))
    assert resolve_daily_cost(free_lot, Decimal("5")) == Decimal("0")
    assert resolve_daily_cost(Lot.create(FARM_ID, "Pasture B"), Decimal("5")) == Decimal("5")
    assert resolve_daily_cost(None, Decimal("5")) == Decimal("5")


def test_holding_days_never_negative():
    assert holding_days(None, SALE_DATE) == 0
    assert holding_days(SALE_DATE + timedelta(days=3), SALE_DATE) == 0
    assert holding_days(SALE_DATE - timedelta(days=45), SALE_DATE) == 45


def test_sale_value_from_live_arroba():
    assert sale_value_from_arroba(Decimal("540"), Decimal("300")) == Decimal("5400")


def test_sell_animal_marks_sold_and_builds_income():
    animal = make_animal("BR-1", 100, "3000")
    projection = project_sale_profit(animal, None, Decimal("2"), SALE_DATE, Decimal("5000"))
    sold, income = sell_animal(animal, SALE_DATE, Decimal("5000"), Decimal("520"), projection)

    assert sold.status is AnimalStatus.SOLD
    assert sold.sold_at == SALE_DATE
    assert sold.weight_kg == Decimal("520")
    assert sold.version == animal.version + 1
    assert animal.status is AnimalStatus.ACTIVE
    assert income.type is TransactionType.INCOME
    assert income.amount == Decimal("5000")
    assert income.category == SALES_CATEGORY
    assert income.description == "Sale: BR-1 | Gross: 5000.00 | Est. net profit: 1800.00"


def test_record_death():
    dead = record_death(make_animal("BR-1", 10, "0"), SALE_DATE, "Snake bite")
    assert dead.status is AnimalStatus.DEAD
    assert dead.death_date == SALE_DATE
    assert dead.death_cause == "Snake bite"


def test_lot_sale_revenue_modes():
    assert lot_sale_revenue(3, PricingMode.PER_HEAD, Decimal("5000")) == Decimal("15000")
    assert lot_sale_revenue(
        2, PricingMode.PER_ARROBA, Decimal("300"), Decimal("540")
    ) == Decimal("10800")


def test_lot_sale_only_sells_active_animals():
    lot = Lot.create(FARM_ID, "Feedlot 1", daily_cost=Decimal("2"))
    a = make_animal("L-1", 100, "3000", lot_id=lot.id)
    b = make_animal("L-2", 50, "2000", lot_id=lot.id)
    already_sold = make_animal("L-3", 80, "2500", lot_id=lot.id, status=AnimalStatus.SOLD)
    sick = make_animal("L-4", 80, "2500", lot_id=lot.id, status=AnimalStatus.SICK)

    result = compute_lot_sale(
        [a, b, already_sold, sick],
        lot,
        Decimal("9"),
        SALE_DATE,
        PricingMode.PER_HEAD,
        Decimal("5000"),
    )
    assert result.head_count == 2
    assert result.revenue == Decimal("10000")
    assert result.purchase_total == Decimal("5000")
    assert result.holding_cost_total == Decimal("300")
    assert result.net_profit == Decimal("4700")
    assert {x.id for x in result.updated_animals} == {a.id, b.id}
    assert all(x.status is AnimalStatus.SOLD for x in result.updated_animals)
    assert all(x.sold_at == SALE_DATE for x in result.updated_animals)

    assert result.revenue_transaction.amount == Decimal("10000")
    assert result.revenue_transaction.type is TransactionType.INCOME
    assert result.holding_cost_transaction.amount == Decimal("300")
    assert result.holding_cost_transaction.type is TransactionType.EXPENSE
    assert result.holding_cost_transaction.category == HOLDING_COST_CATEGORY


def test_lot_sale_by_arroba_sets_final_weight():
    lot = Lot.create(FARM_ID, "Feedlot 2")
    animal = make_animal("L-1", 10, "3000", lot_id=lot.id)
    result = compute_lot_sale(
        [animal],
        lot,
        Decimal("1"),
        SALE_DATE,
        PricingMode.PER_ARROBA,
        Decimal("300"),
        Decimal("540"),
    )
    assert result.revenue == Decimal("5400")
    assert result.holding_cost_total == Decimal("10")
    assert result.updated_animals[0].weight_kg == Decimal("540")


def test_lot_sale_without_active_animals_is_empty():
    lot = Lot.create(FARM_ID, "Empty")
    dead = make_animal("L-9", 10, "3000", lot_id=lot.id, status=AnimalStatus.DEAD)
    result = compute_lot_sale(
        [dead], lot, Decimal("2"), SALE_DATE, PricingMode.PER_HEAD, Decimal("5000")
    )
    assert result.head_count == 0
    assert result.revenue == Decimal("0")
    assert result.revenue_transaction is None
    assert result.holding_cost_transaction is None
    assert result.updated_animals == []

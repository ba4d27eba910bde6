from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from ranchcalc.application.errors import ConflictError, NotFound, ValidationError
from ranchcalc.application.use_cases.animals import (
    list_animals,
    preview_sale,
    record_death,
    record_weighing,
    register_animal,
    register_batch,
    sell_animal,
    update_animal,
)
from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.models.farm_config import FarmConfig
from ranchcalc.domain.models.lot import Lot
from ranchcalc.domain.value_objects.animal_status import AnimalStatus
from ranchcalc.domain.value_objects.pricing import PricingMode, WeightUnit
from ranchcalc.domain.value_objects.transaction_type import TransactionType

FARM_ID = uuid4()
ENTRY = date(2024, 1, 1)


def make_animal(**kwargs) -> Animal:
    params = {"entry_date": ENTRY, "purchase_value": Decimal("3000")}
    params.update(kwargs)
    return Animal.create(FARM_ID, "BR-100", Decimal("300"), **params)


@pytest.mark.asyncio
async def test_register_animal_prices_per_live_arroba(make_uow):
    uow = make_uow()
    created = await register_animal.execute(
        uow,
        FARM_ID,
        register_animal.RegisterAnimalInput(
            ear_tag=" BR-1 ",
            weight_kg=Decimal("360"),
            purchase_price=Decimal("300"),
            pricing_mode=PricingMode.PER_ARROBA,
        ),
    )
    assert created.ear_tag == "BR-1"
    assert created.purchase_value == Decimal("3600")
    assert len(created.history) == 1
    assert uow.commits


@pytest.mark.asyncio
async def test_register_animal_rejects_unknown_lot(make_uow):
    uow = make_uow()
    with pytest.raises(NotFound):
        await register_animal.execute(
            uow,
            FARM_ID,
            register_animal.RegisterAnimalInput(
                ear_tag="BR-1", weight_kg=Decimal("300"), lot_id=uuid4()
            ),
        )
    assert not uow.animals.items


@pytest.mark.asyncio
async def test_register_batch_records_animals_and_expense(make_uow):
    lot = Lot.create(FARM_ID, "Arrivals")
    uow = make_uow(lots=[lot])
    result = await register_batch.execute(
        uow,
        FARM_ID,
        register_batch.RegisterBatchInput(
            quantity=5,
            tag_prefix="CRG-",
            entry_date=ENTRY,
            weight_value=Decimal("12"),
            weight_unit=WeightUnit.ARROBA,
            pricing_mode=PricingMode.PER_ARROBA,
            price_value=Decimal("300"),
            lot_id=lot.id,
        ),
    )
    assert len(result.animals) == 5
    assert all(a.lot_id == lot.id for a in result.animals)
    assert result.quote.total_cost == Decimal("18000")
    assert uow.transactions.items == [result.expense]
    assert result.expense.type is TransactionType.EXPENSE


@pytest.mark.asyncio
async def test_list_animals_hides_disposed_by_default(make_uow):
    active = make_animal()
    sold = make_animal(status=AnimalStatus.SOLD)
    uow = make_uow(animals=[active, sold])

    visible = await list_animals.execute(uow, FARM_ID)
    assert [a.id for a in visible] == [active.id]

    everything = await list_animals.execute(uow, FARM_ID, include_disposed=True)
    assert len(everything) == 2


@pytest.mark.asyncio
async def test_record_weighing_appends_history(make_uow):
    animal = make_animal()
    uow = make_uow(animals=[animal])
    updated = await record_weighing.execute(
        uow,
        FARM_ID,
        animal.id,
        record_weighing.RecordWeighingInput(
            weighed_on=ENTRY + timedelta(days=20), weight_kg=Decimal("316")
        ),
    )
    assert len(updated.history) == 2
    assert updated.history[-1].gmd == Decimal("0.8")
    assert uow.commits


@pytest.mark.asyncio
async def test_weighing_sold_animal_is_rejected(make_uow):
    animal = make_animal(status=AnimalStatus.SOLD)
    uow = make_uow(animals=[animal])
    with pytest.raises(ValidationError):
        await record_weighing.execute(
            uow,
            FARM_ID,
            animal.id,
            record_weighing.RecordWeighingInput(weighed_on=ENTRY, weight_kg=Decimal("310")),
        )


@pytest.mark.asyncio
async def test_weighing_missing_animal_raises_not_found(make_uow):
    uow = make_uow()
    with pytest.raises(NotFound):
        await record_weighing.execute(
            uow,
            FARM_ID,
            uuid4(),
            record_weighing.RecordWeighingInput(weighed_on=ENTRY, weight_kg=Decimal("310")),
        )


@pytest.mark.asyncio
async def test_weighing_conflict_raises(make_uow):
    animal = make_animal()
    uow = make_uow(animals=[animal])

    async def update_stub(animal, expected_version):
        return None

    uow.animals.update = update_stub  # type: ignore

    with pytest.raises(ConflictError):
        await record_weighing.execute(
            uow,
            FARM_ID,
            animal.id,
            record_weighing.RecordWeighingInput(
                weighed_on=ENTRY + timedelta(days=1), weight_kg=Decimal("301")
            ),
        )
    assert not uow.commits


@pytest.mark.asyncio
async def test_preview_sale_uses_lot_override(make_uow):
    lot = Lot.create(FARM_ID, "Feedlot", daily_cost=Decimal("2"))
    animal = make_animal(lot_id=lot.id)
    uow = make_uow(
        animals=[animal],
        lots=[lot],
        farm_config=FarmConfig(farm_id=FARM_ID, global_daily_cost=Decimal("9")),
    )
    preview = await preview_sale.execute(
        uow,
        FARM_ID,
        animal.id,
        preview_sale.SaleInput(
            sale_date=ENTRY + timedelta(days=100),
            final_weight_kg=Decimal("500"),
            price=Decimal("5000"),
        ),
    )
    assert preview.sale_value == Decimal("5000")
    assert preview.projection.daily_cost == Decimal("2")
    assert preview.projection.profit == Decimal("1800")
    # Preview never persists anything
    assert not uow.commits
    assert not uow.transactions.items


@pytest.mark.asyncio
async def test_sell_animal_creates_income(make_uow):
    animal = make_animal()
    uow = make_uow(
        animals=[animal],
        farm_config=FarmConfig(farm_id=FARM_ID, global_daily_cost=Decimal("2")),
    )
    result = await sell_animal.execute(
        uow,
        FARM_ID,
        animal.id,
        preview_sale.SaleInput(
            sale_date=ENTRY + timedelta(days=100),
            final_weight_kg=Decimal("540"),
            price=Decimal("300"),
            pricing_mode=PricingMode.PER_ARROBA,
        ),
    )
    assert result.animal.status is AnimalStatus.SOLD
    assert result.transaction.amount == Decimal("5400")
    assert result.projection.profit == Decimal("2200")
    assert uow.transactions.items == [result.transaction]
    assert uow.commits


@pytest.mark.asyncio
async def test_selling_sick_animal_conflicts(make_uow):
    animal = make_animal(status=AnimalStatus.SICK)
    uow = make_uow(animals=[animal])
    with pytest.raises(ConflictError):
        await sell_animal.execute(
            uow,
            FARM_ID,
            animal.id,
            preview_sale.SaleInput(
                sale_date=ENTRY, final_weight_kg=Decimal("400"), price=Decimal("4000")
            ),
        )
    assert not uow.transactions.items


@pytest.mark.asyncio
async def test_record_death_twice_conflicts(make_uow):
    animal = make_animal()
    uow = make_uow(animals=[animal])
    dead = await record_death.execute(
        uow, FARM_ID, animal.id, record_death.RecordDeathInput(died_on=ENTRY, cause="Lightning")
    )
    assert dead.status is AnimalStatus.DEAD
    with pytest.raises(ConflictError):
        await record_death.execute(
            uow, FARM_ID, animal.id, record_death.RecordDeathInput(died_on=ENTRY)
        )


@pytest.mark.asyncio
async def test_record_weighing_keeps_weight_and_history_in_step(make_uow):
    animal = make_animal()
    uow = make_uow(animals=[animal])
    updated = await record_weighing.execute(
        uow,
        FARM_ID,
        animal.id,
        record_weighing.RecordWeighingInput(
            weighed_on=ENTRY + timedelta(days=10), weight_kg=Decimal("310.5678")
        ),
    )
    assert updated.weight_kg == Decimal("310.568")
    assert updated.history[-1].weight_kg == updated.weight_kg


@pytest.mark.asyncio
async def test_update_animal_moves_it_to_another_lot(make_uow):
    old_lot = Lot.create(FARM_ID, "Pasture", daily_cost=Decimal("2"))
    new_lot = Lot.create(FARM_ID, "Feedlot", daily_cost=Decimal("5"))
    animal = make_animal(lot_id=old_lot.id)
    uow = make_uow(animals=[animal], lots=[old_lot, new_lot])

    moved = await update_animal.execute(
        uow,
        FARM_ID,
        animal.id,
        update_animal.UpdateAnimalInput(version=1, lot_id=new_lot.id, notes="Finishing"),
    )
    assert moved.lot_id == new_lot.id
    assert moved.notes == "Finishing"
    assert moved.version == 2
    # Weight and history are untouched by an edit
    assert moved.history == animal.history
    assert uow.commits

    preview = await preview_sale.execute(
        uow,
        FARM_ID,
        animal.id,
        preview_sale.SaleInput(
            sale_date=ENTRY + timedelta(days=100),
            final_weight_kg=Decimal("500"),
            price=Decimal("5000"),
        ),
    )
    assert preview.projection.daily_cost == Decimal("5")
    assert preview.projection.profit == Decimal("1500")


@pytest.mark.asyncio
async def test_update_animal_can_leave_its_lot(make_uow):
    lot = Lot.create(FARM_ID, "Pasture")
    animal = make_animal(lot_id=lot.id)
    uow = make_uow(animals=[animal], lots=[lot])
    updated = await update_animal.execute(
        uow,
        FARM_ID,
        animal.id,
        update_animal.UpdateAnimalInput(version=1, remove_from_lot=True),
    )
    assert updated.lot_id is None


@pytest.mark.asyncio
async def test_update_animal_with_stale_version_conflicts(make_uow):
    animal = make_animal()
    uow = make_uow(animals=[animal])
    with pytest.raises(ConflictError):
        await update_animal.execute(
            uow,
            FARM_ID,
            animal.id,
            update_animal.UpdateAnimalInput(version=3, breed="Angus"),
        )
    assert not uow.commits


@pytest.mark.asyncio
async def test_update_animal_rejects_unknown_lot(make_uow):
    animal = make_animal()
    uow = make_uow(animals=[animal])
    with pytest.raises(NotFound):
        await update_animal.execute(
            uow,
            FARM_ID,
            animal.id,
            update_animal.UpdateAnimalInput(version=1, lot_id=uuid4()),
        )


@pytest.mark.asyncio
async def test_update_animal_cannot_mark_sold(make_uow):
    animal = make_animal()
    uow = make_uow(animals=[animal])
    with pytest.raises(ValidationError):
        await update_animal.execute(
            uow,
            FARM_ID,
            animal.id,
            update_animal.UpdateAnimalInput(version=1, status=AnimalStatus.SOLD),
        )
    assert uow.animals.items[animal.id].status is AnimalStatus.ACTIVE


@pytest.mark.asyncio
async def test_update_animal_without_changes_is_a_no_op(make_uow):
    animal = make_animal()
    uow = make_uow(animals=[animal])
    same = await update_animal.execute(
        uow, FARM_ID, animal.id, update_animal.UpdateAnimalInput(version=1)
    )
    assert same is animal
    assert not uow.commits

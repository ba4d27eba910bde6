from __future__ import annotations

from dataclasses import replace
from types import SimpleNamespace

import pytest

from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.models.farm_config import FarmConfig
from ranchcalc.domain.models.lot import Lot
from ranchcalc.domain.models.transaction import Transaction


class StubAnimals:
    def __init__(self, *animals: Animal) -> None:
        self.items = {a.id: a for a in animals}
        self.updates: list[Animal] = []

    async def add(self, animal: Animal) -> Animal:
        self.items[animal.id] = animal
        return animal

    async def get(self, farm_id, animal_id):
        animal = self.items.get(animal_id)
        if animal is None or animal.farm_id != farm_id:
            return None
        return animal

    async def list(self, farm_id, *, lot_id=None, statuses=None, search=None):
        return [
            a
            for a in self.items.values()
            if a.farm_id == farm_id
            and (lot_id is None or a.lot_id == lot_id)
            and (statuses is None or a.status in statuses)
        ]

    async def update(self, animal: Animal, expected_version: int):
        current = self.items.get(animal.id)
        if current is None or current.version != expected_version:
            return None
        self.items[animal.id] = animal
        self.updates.append(animal)
        return animal


class StubLots:
    def __init__(self, *lots: Lot) -> None:
        self.items = {lot.id: lot for lot in lots}

    async def add(self, lot: Lot) -> Lot:
        self.items[lot.id] = lot
        return lot

    async def get(self, farm_id, lot_id):
        lot = self.items.get(lot_id)
        if lot is None or lot.farm_id != farm_id:
            return None
        return lot

    async def find_by_name(self, farm_id, name):
        for lot in self.items.values():
            if lot.farm_id == farm_id and lot.name.lower() == name.lower():
                return lot
        return None

    async def list_for_farm(self, farm_id):
        return [lot for lot in self.items.values() if lot.farm_id == farm_id]

    async def set_daily_cost(self, farm_id, lot_id, daily_cost):
        lot = await self.get(farm_id, lot_id)
        if lot is None:
            return None
        updated = replace(lot, daily_cost=daily_cost)
        self.items[lot_id] = updated
        return updated

    async def update(self, farm_id, lot_id, data):
        lot = await self.get(farm_id, lot_id)
        if lot is None:
            return None
        updated = replace(lot, **data)
        self.items[lot_id] = updated
        return updated


class StubTransactions:
    def __init__(self) -> None:
        self.items: list[Transaction] = []

    async def add(self, tx: Transaction) -> Transaction:
        self.items.append(tx)
        return tx

    async def list(self, farm_id, *, type=None, date_from=None, date_to=None, search=None):
        return [t for t in self.items if t.farm_id == farm_id]


class StubFarmConfig:
    def __init__(self, config: FarmConfig | None = None) -> None:
        self.config = config

    async def get(self, farm_id):
        return self.config

    async def upsert(self, config: FarmConfig) -> FarmConfig:
        self.config = config
        return config


def _make_uow(*, animals=(), lots=(), farm_config: FarmConfig | None = None):
    commits: list[bool] = []

    async def commit():
        commits.append(True)

    async def rollback():
        return None

    return SimpleNamespace(
        animals=StubAnimals(*animals),
        lots=StubLots(*lots),
        transactions=StubTransactions(),
        farm_config=StubFarmConfig(farm_config),
        commit=commit,
        rollback=rollback,
        commits=commits,
    )


@pytest.fixture()
def make_uow():
    """Factory for an in-memory unit of work seeded with domain objects."""
    return _make_uow

from __future__ import annotations

from typing import Protocol

from ranchcalc.application.interfaces.repositories.animals import AnimalRepository
from ranchcalc.application.interfaces.repositories.farm_config import FarmConfigRepository
from ranchcalc.application.interfaces.repositories.lots import LotRepository
from ranchcalc.application.interfaces.repositories.transactions import TransactionRepository


class UnitOfWork(Protocol):
    animals: AnimalRepository
    lots: LotRepository
    transactions: TransactionRepository
    farm_config: FarmConfigRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...

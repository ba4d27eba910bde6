from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.domain.calculators.herd_summary import (
    DashboardSummary,
    LedgerTotals,
    MonthlyFlow,
    dashboard_summary,
    ledger_totals,
    monthly_cash_flow,
)


@dataclass(slots=True)
class DashboardOutput:
    summary: DashboardSummary
    totals: LedgerTotals
    cash_flow: list[MonthlyFlow]


async def execute(uow: UnitOfWork, farm_id: UUID, *, today: date) -> DashboardOutput:
    animals = await uow.animals.list(farm_id)
    transactions = await uow.transactions.list(farm_id)
    return DashboardOutput(
        summary=dashboard_summary(animals, transactions, today=today),
        totals=ledger_totals(transactions),
        cash_flow=monthly_cash_flow(transactions, today),
    )

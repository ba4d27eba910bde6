"""Read-only aggregates over the herd and the ledger for lot cards and the dashboard."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable, Sequence
from uuid import UUID

from ranchcalc.domain.calculators.numeric import ZERO, safe_div
from ranchcalc.domain.calculators.weight_gain import average_last_gmd
from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.models.farm_context import HealthRecord, InventoryItem, Task
from ranchcalc.domain.models.transaction import Transaction
from ranchcalc.domain.value_objects.animal_status import AnimalStatus
from ranchcalc.domain.value_objects.transaction_type import TransactionType


@dataclass(frozen=True, slots=True)
class LotSummary:
    lot_id: UUID | None
    head_count: int
    avg_weight_kg: Decimal


@dataclass(frozen=True, slots=True)
class LedgerTotals:
    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True, slots=True)
class MonthlyFlow:
    year: int
    month: int
    income: Decimal
    expense: Decimal


@dataclass(frozen=True, slots=True)
class DashboardSummary:
    active_animals: int
    avg_gmd: Decimal
    balance: Decimal
    health_alerts: int = 0
    stock_alerts: int = 0
    overdue_tasks: int = 0
    top_expenses: list[tuple[str, Decimal]] = field(default_factory=list)


def summarize_lot(lot_id: UUID | None, animals: Iterable[Animal]) -> LotSummary:
    """Head count and mean weight of the animals still on the farm in a lot."""
    members = [a for a in animals if a.lot_id == lot_id and not a.status.is_disposed()]
    total_weight = sum((a.weight_kg for a in members), ZERO)
    return LotSummary(
        lot_id=lot_id,
        head_count=len(members),
        avg_weight_kg=safe_div(total_weight, len(members)),
    )


def ledger_totals(transactions: Iterable[Transaction]) -> LedgerTotals:
    income = ZERO
    expense = ZERO
    for tx in transactions:
        if tx.type is TransactionType.INCOME:
            income += tx.amount
        else:
            expense += tx.amount
    return LedgerTotals(income=income, expense=expense)


def expenses_by_category(
    transactions: Iterable[Transaction], *, limit: int = 5
) -> list[tuple[str, Decimal]]:
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for tx in transactions:
        if tx.type is TransactionType.EXPENSE:
            totals[tx.category] += tx.amount
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return ranked[:limit]


def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def monthly_cash_flow(
    transactions: Iterable[Transaction], today: date, *, months: int = 6
) -> list[MonthlyFlow]:
    """Income and expense per calendar month for the last `months` months, oldest first."""
    keys = [_shift_month(today.year, today.month, -offset) for offset in range(months - 1, -1, -1)]
    income: dict[tuple[int, int], Decimal] = {k: ZERO for k in keys}
    expense: dict[tuple[int, int], Decimal] = {k: ZERO for k in keys}
    for tx in transactions:
        key = (tx.date.year, tx.date.month)
        if key not in income:
            continue
        if tx.type is TransactionType.INCOME:
            income[key] += tx.amount
        else:
            expense[key] += tx.amount
    return [
        MonthlyFlow(year=y, month=m, income=income[(y, m)], expense=expense[(y, m)])
        for y, m in keys
    ]


def dashboard_summary(
    animals: Sequence[Animal],
    transactions: Sequence[Transaction],
    *,
    health_records: Sequence[HealthRecord] = (),
    inventory: Sequence[InventoryItem] = (),
    tasks: Sequence[Task] = (),
    today: date | None = None,
) -> DashboardSummary:
    active = [a for a in animals if a.status is AnimalStatus.ACTIVE]
    overdue = 0
    if today is not None:
        overdue = sum(1 for t in tasks if t.status == "pending" and t.due_date <= today)
    return DashboardSummary(
        active_animals=len(active),
        avg_gmd=average_last_gmd(active),
        balance=ledger_totals(transactions).balance,
        health_alerts=sum(1 for r in health_records if r.status == "in_treatment"),
        stock_alerts=sum(1 for i in inventory if i.is_low),
        overdue_tasks=overdue,
        top_expenses=expenses_by_category(transactions),
    )

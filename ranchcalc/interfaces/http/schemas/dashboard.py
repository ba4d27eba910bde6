from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel


class CategoryTotal(BaseModel):
    category: str
    amount: Decimal


class MonthlyFlowResponse(BaseModel):
    year: int
    month: int
    income: Decimal
    expense: Decimal


class DashboardResponse(BaseModel):
    active_animals: int
    avg_gmd: Decimal
    income: Decimal
    expense: Decimal
    balance: Decimal
    health_alerts: int = 0
    stock_alerts: int = 0
    overdue_tasks: int = 0
    top_expenses: list[CategoryTotal]
    cash_flow: list[MonthlyFlowResponse]

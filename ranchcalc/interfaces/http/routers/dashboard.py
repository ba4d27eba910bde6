from __future__ import annotations

from datetime import date, datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from ranchcalc.application.use_cases.finance import dashboard_summary
from ranchcalc.interfaces.http.deps import get_farm_id, get_uow
from ranchcalc.interfaces.http.schemas.dashboard import (
    CategoryTotal,
    DashboardResponse,
    MonthlyFlowResponse,
)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=DashboardResponse)
async def get_summary(
    date_param: date = Query(
        alias="date", default_factory=lambda: datetime.now(timezone.utc).date()
    ),
    farm_id: UUID = Depends(get_farm_id),
    uow=Depends(get_uow),
) -> DashboardResponse:
    result = await dashboard_summary.execute(uow, farm_id, today=date_param)
    summary = result.summary
    return DashboardResponse(
        active_animals=summary.active_animals,
        avg_gmd=summary.avg_gmd,
        income=result.totals.income,
        expense=result.totals.expense,
        balance=result.totals.balance,
        health_alerts=summary.health_alerts,
        stock_alerts=summary.stock_alerts,
        overdue_tasks=summary.overdue_tasks,
        top_expenses=[
            CategoryTotal(category=name, amount=amount) for name, amount in summary.top_expenses
        ],
        cash_flow=[
            MonthlyFlowResponse(year=m.year, month=m.month, income=m.income, expense=m.expense)
            for m in result.cash_flow
        ],
    )

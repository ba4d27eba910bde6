from __future__ import annotations

from datetime import date as DtDate
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from ranchcalc.application.use_cases.finance import add_transaction, list_transactions
from ranchcalc.domain.value_objects.transaction_type import TransactionType
from ranchcalc.interfaces.http.deps import get_farm_id, get_uow
from ranchcalc.interfaces.http.schemas.transactions import TransactionCreate, TransactionResponse

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("/", response_model=list[TransactionResponse])
async def list_transactions_endpoint(
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    type_filter: TransactionType | None = Query(None, alias="type"),
    date_from: DtDate | None = Query(None),
    date_to: DtDate | None = Query(None),
    search: str | None = Query(None),
):
    items = await list_transactions.execute(
        uow,
        farm_id,
        type=type_filter,
        date_from=date_from,
        date_to=date_to,
        search=search,
    )
    return [TransactionResponse.from_domain(t) for t in items]


@router.post("/", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    payload: TransactionCreate,
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    created = await add_transaction.execute(
        uow,
        farm_id,
        add_transaction.AddTransactionInput(
            date=payload.date,
            description=payload.description,
            amount=payload.amount,
            type=payload.type,
            category=payload.category,
        ),
    )
    return TransactionResponse.from_domain(created)

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from ranchcalc.application.use_cases.animals import (
    get_animal,
    list_animals,
    preview_sale,
    record_death,
    record_weighing,
    register_animal,
    register_batch,
    sell_animal,
    update_animal,
)
from ranchcalc.config.settings import Settings
from ranchcalc.domain.value_objects.animal_status import AnimalStatus
from ranchcalc.interfaces.http.deps import get_app_settings, get_farm_id, get_uow
from ranchcalc.interfaces.http.schemas.animals import (
    AnimalCreate,
    AnimalResponse,
    AnimalUpdate,
    BatchCreate,
    BatchResponse,
    DeathRequest,
    SaleProjectionResponse,
    SaleRequest,
    SaleResponse,
    WeighingCreate,
)

router = APIRouter(prefix="/animals", tags=["animals"])


def _sale_input(payload: SaleRequest) -> preview_sale.SaleInput:
    return preview_sale.SaleInput(
        sale_date=payload.sale_date,
        final_weight_kg=payload.final_weight_kg,
        price=payload.price,
        pricing_mode=payload.pricing_mode,
    )


@router.get("/", response_model=list[AnimalResponse])
async def list_animals_endpoint(
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    lot_id: UUID | None = Query(None),
    status_filter: AnimalStatus | None = Query(None, alias="status"),
    include_disposed: bool = Query(False),
    search: str | None = Query(None),
):
    animals = await list_animals.execute(
        uow,
        farm_id,
        lot_id=lot_id,
        status=status_filter,
        include_disposed=include_disposed,
        search=search,
    )
    return [AnimalResponse.from_domain(a) for a in animals]


@router.post("/", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal(
    payload: AnimalCreate,
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    settings: Settings = Depends(get_app_settings),
):
    created = await register_animal.execute(
        uow,
        farm_id,
        register_animal.RegisterAnimalInput(**payload.model_dump()),
        live_arroba_kg=settings.live_arroba_kg,
    )
    return AnimalResponse.from_domain(created)


@router.post("/batch", response_model=BatchResponse, status_code=status.HTTP_201_CREATED)
async def create_batch(
    payload: BatchCreate,
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    settings: Settings = Depends(get_app_settings),
):
    result = await register_batch.execute(
        uow,
        farm_id,
        register_batch.RegisterBatchInput(**payload.model_dump()),
        live_arroba_kg=settings.live_arroba_kg,
    )
    return BatchResponse(
        quantity=result.quote.quantity,
        avg_weight_kg=result.quote.avg_weight_kg,
        unit_price=result.quote.unit_price,
        total_cost=result.quote.total_cost,
        animals=[AnimalResponse.from_domain(a) for a in result.animals],
        expense_transaction_id=result.expense.id if result.expense else None,
    )


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal_endpoint(
    animal_id: UUID,
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    animal = await get_animal.execute(uow, farm_id, animal_id)
    return AnimalResponse.from_domain(animal)


@router.put("/{animal_id}", response_model=AnimalResponse)
async def update_animal_endpoint(
    animal_id: UUID,
    payload: AnimalUpdate,
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    updated = await update_animal.execute(
        uow,
        farm_id,
        animal_id,
        update_animal.UpdateAnimalInput(**payload.model_dump()),
    )
    return AnimalResponse.from_domain(updated)


@router.post(
    "/{animal_id}/weighings", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED
)
async def add_weighing(
    animal_id: UUID,
    payload: WeighingCreate,
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    updated = await record_weighing.execute(
        uow,
        farm_id,
        animal_id,
        record_weighing.RecordWeighingInput(
            weighed_on=payload.weighed_on, weight_kg=payload.weight_kg
        ),
    )
    return AnimalResponse.from_domain(updated)


@router.post("/{animal_id}/sale-preview", response_model=SaleProjectionResponse)
async def sale_preview(
    animal_id: UUID,
    payload: SaleRequest,
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    settings: Settings = Depends(get_app_settings),
):
    preview = await preview_sale.execute(
        uow,
        farm_id,
        animal_id,
        _sale_input(payload),
        live_arroba_kg=settings.live_arroba_kg,
        default_daily_cost=settings.default_global_daily_cost,
    )
    return SaleProjectionResponse(
        sale_value=preview.sale_value,
        days=preview.projection.days,
        daily_cost=preview.projection.daily_cost,
        production_cost=preview.projection.production_cost,
        profit=preview.projection.profit,
    )


@router.post("/{animal_id}/sale", response_model=SaleResponse)
async def sell(
    animal_id: UUID,
    payload: SaleRequest,
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
    settings: Settings = Depends(get_app_settings),
):
    result = await sell_animal.execute(
        uow,
        farm_id,
        animal_id,
        _sale_input(payload),
        live_arroba_kg=settings.live_arroba_kg,
        default_daily_cost=settings.default_global_daily_cost,
    )
    return SaleResponse(
        animal=AnimalResponse.from_domain(result.animal),
        transaction_id=result.transaction.id,
        projection=SaleProjectionResponse(
            sale_value=result.transaction.amount,
            days=result.projection.days,
            daily_cost=result.projection.daily_cost,
            production_cost=result.projection.production_cost,
            profit=result.projection.profit,
        ),
    )


@router.post("/{animal_id}/death", response_model=AnimalResponse)
async def register_death(
    animal_id: UUID,
    payload: DeathRequest,
    *,
    uow=Depends(get_uow),
    farm_id: UUID = Depends(get_farm_id),
):
    updated = await record_death.execute(
        uow,
        farm_id,
        animal_id,
        record_death.RecordDeathInput(died_on=payload.died_on, cause=payload.cause),
    )
    return AnimalResponse.from_domain(updated)

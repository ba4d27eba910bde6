from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from uuid import UUID

from ranchcalc.application.errors import ConflictError, NotFound, ValidationError
from ranchcalc.application.interfaces.unit_of_work import UnitOfWork
from ranchcalc.domain.models.animal import Animal
from ranchcalc.domain.value_objects.animal_status import AnimalStatus, Gender

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateAnimalInput:
    version: int
    ear_tag: str | None = None
    breed: str | None = None
    gender: Gender | None = None
    birth_date: date | None = None
    entry_date: date | None = None
    status: AnimalStatus | None = None
    purchase_value: Decimal | None = None
    lot_id: UUID | None = None
    # Takes the animal out of its lot; lot_id=None alone means "unchanged"
    remove_from_lot: bool = False
    notes: str | None = None
    mother_id: UUID | None = None
    father_id: UUID | None = None


_EDITABLE_FIELDS = (
    "ear_tag",
    "breed",
    "gender",
    "birth_date",
    "entry_date",
    "status",
    "purchase_value",
    "lot_id",
    "notes",
    "mother_id",
    "father_id",
)


async def _validate(uow: UnitOfWork, farm_id: UUID, existing: Animal, changes: dict) -> None:
    if "ear_tag" in changes:
        changes["ear_tag"] = changes["ear_tag"].strip()
        if not changes["ear_tag"]:
            raise ValidationError("Ear tag is required")
    if "purchase_value" in changes and changes["purchase_value"] < 0:
        raise ValidationError("Purchase value cannot be negative")
    if "status" in changes:
        # Sales and deaths carry ledger and date side effects of their own
        if changes["status"].is_disposed():
            raise ValidationError("Use the sale or death operations to dispose of an animal")
        if existing.status.is_disposed():
            raise ConflictError(f"Animal is already {existing.status.value}")
    if changes.get("lot_id") is not None:
        if await uow.lots.get(farm_id, changes["lot_id"]) is None:
            raise NotFound("Lot not found")


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    animal_id: UUID,
    payload: UpdateAnimalInput,
) -> Animal:
    """Edit the descriptive fields of an animal.

    Weight is not editable here: it only changes through weighings so the
    weight always matches the last history record.
    """
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    if payload.remove_from_lot and payload.lot_id is not None:
        raise ValidationError("Cannot assign and remove a lot in the same update")
    existing = await uow.animals.get(farm_id, animal_id)
    if existing is None:
        raise NotFound("Animal not found")

    changes: dict = {}
    for field_name in _EDITABLE_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            changes[field_name] = value
    if payload.remove_from_lot:
        changes["lot_id"] = None
    if not changes:
        return existing
    await _validate(uow, farm_id, existing, changes)

    edited = replace(existing, **changes, version=existing.version + 1)
    updated = await uow.animals.update(edited, expected_version=payload.version)
    if updated is None:
        raise ConflictError("Version mismatch while updating animal")
    await uow.commit()
    logger.info("Animal %s updated (%s)", updated.ear_tag, ", ".join(sorted(changes)))
    return updated

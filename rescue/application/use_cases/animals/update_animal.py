from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID

from rescue.application.authorization import Capability, ensure_capability
from rescue.application.errors import ConflictError, NotFoundError, ValidationError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.domain.models.animal import Animal
from rescue.domain.value_objects.role import Role


@dataclass(slots=True)
class UpdateAnimalInput:
    version: int
    name: str | None = None
    species: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    gender: str | None = None
    weight: Decimal | None = None
    story: str | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID | None,
    animal_id: UUID,
    payload: UpdateAnimalInput,
) -> Animal:
    """Edit descriptive fields. Status and foster placement have their own operations."""
    ensure_capability(role, Capability.EDIT_ANIMAL_DETAILS, "edit animals")
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    existing = await uow.animals.get(animal_id)
    if not existing:
        raise NotFoundError("Animal not found")
    data: dict = {}
    for field_name in (
        "name",
        "species",
        "breed",
        "birth_date",
        "gender",
        "weight",
        "story",
    ):
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if "name" in data and not str(data["name"]).strip():
        raise ValidationError("Animal name cannot be blank")
    if not data:
        return existing
    data["updated_by"] = actor_user_id
    data["updated_at"] = datetime.now(timezone.utc)
    updated = await uow.animals.update(
        animal_id,
        data=data,
        expected_version=payload.version,
    )
    if not updated:
        raise ConflictError("Version mismatch while updating animal")
    await uow.commit()
    return updated

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from rescue.application.authorization import Capability, ensure_capability
from rescue.application.errors import ValidationError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.application.status_registry import parse_animal_status
from rescue.domain.models.animal import Animal
from rescue.domain.value_objects.animal_status import AnimalStatus
from rescue.domain.value_objects.role import Role


@dataclass(slots=True)
class CreateAnimalInput:
    name: str
    species: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    gender: str | None = None
    weight: Decimal | None = None
    story: str | None = None
    adoption_status: str = AnimalStatus.NOT_YET_AVAILABLE.value


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID | None,
    payload: CreateAnimalInput,
) -> Animal:
    ensure_capability(role, Capability.CREATE_ANIMALS, "create animals")
    status = parse_animal_status(payload.adoption_status)
    # Intake cannot start an animal in a foster placement or an outcome.
    if status in {AnimalStatus.AVAILABLE_IN_FOSTER, AnimalStatus.ADOPTED}:
        raise ValidationError(f"New animals cannot start as '{status.value}'")
    if not payload.name or not payload.name.strip():
        raise ValidationError("Animal name is required")
    animal = Animal.create(
        name=payload.name.strip(),
        species=payload.species,
        breed=payload.breed,
        birth_date=payload.birth_date,
        gender=payload.gender,
        weight=payload.weight,
        story=payload.story,
        adoption_status=status,
        created_by=actor_user_id,
    )
    created = await uow.animals.add(animal)
    await uow.commit()
    return created

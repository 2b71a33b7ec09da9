from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from rescue.application.authorization import Capability, ensure_capability
from rescue.application.errors import ConflictError, NotFoundError, ValidationError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.application.status_registry import parse_animal_status
from rescue.application.use_cases.animals.lifecycle import (
    apply_status_change,
    ensure_transition_allowed,
)
from rescue.domain.models.animal import Animal
from rescue.domain.value_objects.animal_status import AnimalStatus
from rescue.domain.value_objects.role import Role


@dataclass(slots=True)
class TransitionAnimalInput:
    adoption_status: str
    # Version the caller last read; defaults to the version loaded here.
    version: int | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID | None,
    animal_id: UUID,
    payload: TransitionAnimalInput,
) -> Animal:
    ensure_capability(role, Capability.TRANSITION_ANIMAL_STATUS, "change animal status")
    new_status = parse_animal_status(payload.adoption_status)
    animal = await uow.animals.get(animal_id)
    if not animal:
        raise NotFoundError("Animal not found")
    if payload.version is not None and payload.version != animal.version:
        raise ConflictError("Version mismatch while updating animal")

    current = animal.adoption_status
    if new_status is AnimalStatus.ADOPTED:
        raise ValidationError(
            "Adopted can only be set by finalizing an adoption",
            details={"reason": "illegal_transition", "from": current.value, "to": new_status.value},
        )
    if current is AnimalStatus.ADOPTED:
        raise ValidationError(
            "Adopted animals leave that status only by recording a return",
            details={"reason": "illegal_transition", "from": current.value, "to": new_status.value},
        )
    ensure_transition_allowed(current, new_status)
    if new_status is AnimalStatus.AVAILABLE_IN_FOSTER and not animal.is_fostered:
        raise ValidationError(
            "Assign a foster before marking the animal as in foster",
            details={"reason": "foster_required"},
        )

    updated = await apply_status_change(
        uow,
        animal,
        new_status,
        actor_user_id,
        expected_version=payload.version,
    )
    await uow.commit()
    return updated

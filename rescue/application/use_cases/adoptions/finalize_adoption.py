from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from rescue.application.authorization import Capability, ensure_capability
from rescue.application.errors import ConflictError, NotFoundError, ValidationError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.application.use_cases.animals.lifecycle import apply_status_change
from rescue.domain.models.adoption_history import AdopterSnapshot, AdoptionHistory
from rescue.domain.models.animal import Animal
from rescue.domain.policies.animal_transitions import ADOPTABLE_STATUSES, is_terminal
from rescue.domain.value_objects.animal_status import AnimalStatus
from rescue.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FinalizeAdoptionInput:
    adopter: AdopterSnapshot
    adoption_date: date
    notes: str | None = None
    version: int | None = None


@dataclass(slots=True)
class FinalizeAdoptionOutput:
    history: AdoptionHistory
    animal: Animal


def _validate_adopter(adopter: AdopterSnapshot) -> None:
    missing = [
        name
        for name in ("first_name", "last_name", "email", "primary_phone")
        if not (getattr(adopter, name) or "").strip()
    ]
    if missing:
        raise ValidationError("Missing required adopter fields", details={"missing": missing})


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID | None,
    animal_id: UUID,
    payload: FinalizeAdoptionInput,
) -> FinalizeAdoptionOutput:
    ensure_capability(role, Capability.FINALIZE_ADOPTIONS, "finalize adoptions")
    _validate_adopter(payload.adopter)

    animal = await uow.animals.get(animal_id)
    if not animal:
        raise NotFoundError("Animal not found")
    if payload.version is not None and payload.version != animal.version:
        raise ConflictError("Version mismatch while updating animal")
    if is_terminal(animal.adoption_status):
        raise ConflictError(
            f"Animal status is already '{animal.adoption_status.value}'",
            details={"adoption_status": animal.adoption_status.value},
        )
    open_history = await uow.adoption_history.get_open_for_animal(animal.id)
    if open_history:
        raise ConflictError(
            "Animal already has an open adoption record",
            details={"history_id": str(open_history.id)},
        )
    if animal.adoption_status not in ADOPTABLE_STATUSES:
        raise ValidationError(
            f"Cannot finalize an adoption while the animal is '{animal.adoption_status.value}'",
            details={
                "reason": "illegal_transition",
                "from": animal.adoption_status.value,
                "to": AnimalStatus.ADOPTED.value,
            },
        )

    history = await uow.adoption_history.add(
        AdoptionHistory.create(
            animal_id=animal.id,
            adopter=payload.adopter,
            adoption_date=payload.adoption_date,
            notes=payload.notes,
            created_by=actor_user_id,
        )
    )
    updated = await apply_status_change(
        uow,
        animal,
        AnimalStatus.ADOPTED,
        actor_user_id,
        expected_version=payload.version,
        extra={"current_foster_id": None},
    )
    logger.info(
        "Recorded adoption %s for animal %s on %s",
        history.id,
        animal.id,
        payload.adoption_date.isoformat(),
    )
    await uow.commit()
    return FinalizeAdoptionOutput(history=history, animal=updated)

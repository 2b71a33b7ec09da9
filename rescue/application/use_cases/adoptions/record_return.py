from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from rescue.application.authorization import Capability, ensure_capability
from rescue.application.errors import ConflictError, NotFoundError, ValidationError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.application.status_registry import parse_animal_status
from rescue.application.use_cases.animals.lifecycle import apply_status_change
from rescue.domain.models.adoption_history import AdoptionHistory
from rescue.domain.models.animal import Animal
from rescue.domain.policies.animal_transitions import RETURN_DESTINATIONS
from rescue.domain.value_objects.animal_status import AnimalStatus
from rescue.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordReturnInput:
    return_date: date
    adoption_status: str = AnimalStatus.AVAILABLE.value


@dataclass(slots=True)
class RecordReturnOutput:
    history: AdoptionHistory
    animal: Animal


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID | None,
    history_id: UUID,
    payload: RecordReturnInput,
) -> RecordReturnOutput:
    ensure_capability(role, Capability.FINALIZE_ADOPTIONS, "record returns")
    destination = parse_animal_status(payload.adoption_status)
    if destination not in RETURN_DESTINATIONS:
        raise ValidationError(
            f"A returned animal cannot move to '{destination.value}'",
            details={
                "reason": "illegal_transition",
                "from": AnimalStatus.ADOPTED.value,
                "to": destination.value,
            },
        )

    history = await uow.adoption_history.get(history_id)
    if not history:
        raise NotFoundError(f"Adoption record {history_id} not found")
    if history.return_date is not None:
        raise ConflictError(
            "Return already recorded for this adoption",
            details={"return_date": history.return_date.isoformat()},
        )
    if payload.return_date < history.adoption_date:
        raise ValidationError("Return date cannot be before the adoption date")

    animal = await uow.animals.get(history.animal_id)
    if not animal:
        raise NotFoundError("Animal for adoption record not found")
    if animal.adoption_status is not AnimalStatus.ADOPTED:
        raise ConflictError(
            f"Cannot process return: animal status is '{animal.adoption_status.value}', "
            "not 'Adopted'"
        )

    returned = await uow.adoption_history.mark_returned(history.id, payload.return_date)
    if not returned:
        raise ConflictError("Return already recorded for this adoption")
    updated = await apply_status_change(uow, animal, destination, actor_user_id)
    logger.info(
        "Processed return for animal %s (history %s); new status %s",
        animal.id,
        history.id,
        destination.value,
    )
    await uow.commit()
    return RecordReturnOutput(history=returned, animal=updated)

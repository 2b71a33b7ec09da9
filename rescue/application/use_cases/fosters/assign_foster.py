from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from rescue.application.authorization import Capability, ensure_capability
from rescue.application.errors import ConflictError, NotFoundError, ValidationError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.application.use_cases.animals.lifecycle import (
    apply_status_change,
    ensure_transition_allowed,
)
from rescue.domain.models.animal import Animal
from rescue.domain.policies.animal_transitions import (
    FOSTER_PROMOTABLE_STATUSES,
    is_terminal,
)
from rescue.domain.value_objects.animal_status import AnimalStatus
from rescue.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AssignFosterInput:
    foster_user_id: UUID
    version: int | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID | None,
    animal_id: UUID,
    payload: AssignFosterInput,
) -> Animal:
    ensure_capability(role, Capability.MANAGE_FOSTERS, "assign fosters")

    profile = await uow.foster_profiles.get_by_user(payload.foster_user_id)
    if not profile:
        raise ValidationError("User has no foster profile")
    if not profile.is_active_foster:
        raise ValidationError("Foster profile is not active")
    foster_user = await uow.users.get(payload.foster_user_id)
    if not foster_user or not foster_user.is_active:
        raise ValidationError("Foster user is missing or inactive")

    animal = await uow.animals.get(animal_id)
    if not animal:
        raise NotFoundError("Animal not found")
    if payload.version is not None and payload.version != animal.version:
        raise ConflictError("Version mismatch while updating animal")
    if animal.is_fostered:
        raise ConflictError(
            "Animal is already fostered - unassign first",
            details={"current_foster_id": str(animal.current_foster_id)},
        )
    if is_terminal(animal.adoption_status):
        raise ValidationError(
            f"Cannot place an animal with status '{animal.adoption_status.value}' in foster"
        )

    if animal.adoption_status in FOSTER_PROMOTABLE_STATUSES:
        ensure_transition_allowed(animal.adoption_status, AnimalStatus.AVAILABLE_IN_FOSTER)
        updated = await apply_status_change(
            uow,
            animal,
            AnimalStatus.AVAILABLE_IN_FOSTER,
            actor_user_id,
            expected_version=payload.version,
            extra={"current_foster_id": profile.id},
        )
    else:
        # Holds and Adoption Pending keep their status; only the placement is recorded.
        updated = await uow.animals.update(
            animal.id,
            data={
                "current_foster_id": profile.id,
                "updated_by": actor_user_id,
                "updated_at": datetime.now(timezone.utc),
            },
            expected_version=animal.version,
        )
        if not updated:
            raise ConflictError("Animal was modified concurrently; reload and retry")

    logger.info(
        "Animal %s assigned to foster profile %s (user %s)",
        animal.id,
        profile.id,
        payload.foster_user_id,
    )
    await uow.commit()
    return updated

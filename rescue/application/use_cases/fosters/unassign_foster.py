from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import UUID

from rescue.application.authorization import Capability, ensure_capability
from rescue.application.errors import ConflictError, NotFoundError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.application.use_cases.animals.lifecycle import apply_status_change
from rescue.domain.models.animal import Animal
from rescue.domain.value_objects.animal_status import AnimalStatus
from rescue.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID | None,
    animal_id: UUID,
    version: int | None = None,
) -> Animal:
    ensure_capability(role, Capability.MANAGE_FOSTERS, "unassign fosters")
    animal = await uow.animals.get(animal_id)
    if not animal:
        raise NotFoundError("Animal not found")
    if version is not None and version != animal.version:
        raise ConflictError("Version mismatch while updating animal")
    if not animal.is_fostered:
        raise ConflictError("Animal has no foster assignment")

    previous_foster_id = animal.current_foster_id
    if animal.adoption_status is AnimalStatus.AVAILABLE_IN_FOSTER:
        updated = await apply_status_change(
            uow,
            animal,
            AnimalStatus.AVAILABLE,
            actor_user_id,
            extra={"current_foster_id": None},
        )
    else:
        updated = await uow.animals.update(
            animal.id,
            data={
                "current_foster_id": None,
                "updated_by": actor_user_id,
                "updated_at": datetime.now(timezone.utc),
            },
            expected_version=animal.version,
        )
        if not updated:
            raise ConflictError("Animal was modified concurrently; reload and retry")

    logger.info("Animal %s returned from foster profile %s", animal.id, previous_foster_id)
    await uow.commit()
    return updated

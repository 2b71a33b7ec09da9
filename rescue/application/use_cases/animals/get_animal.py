from __future__ import annotations

from uuid import UUID

from rescue.application.authorization import Capability, can
from rescue.application.errors import NotFoundError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.domain.models.animal import Animal
from rescue.domain.value_objects.animal_status import PUBLIC_STATUSES, AnimalStatus
from rescue.domain.value_objects.role import Role

# Graduates stay reachable from the public site.
PUBLICLY_VISIBLE = PUBLIC_STATUSES | {AnimalStatus.ADOPTED}


async def execute(uow: UnitOfWork, role: Role, animal_id: UUID) -> Animal:
    animal = await uow.animals.get(animal_id)
    if not animal:
        raise NotFoundError("Animal not found")
    if not can(role, Capability.EDIT_ANIMAL_DETAILS) and (
        animal.adoption_status not in PUBLICLY_VISIBLE
    ):
        raise NotFoundError("Animal not found")
    return animal

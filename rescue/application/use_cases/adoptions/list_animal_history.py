from __future__ import annotations

from uuid import UUID

from rescue.application.authorization import Capability, ensure_capability
from rescue.application.errors import NotFoundError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.domain.models.adoption_history import AdoptionHistory
from rescue.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, role: Role, animal_id: UUID) -> list[AdoptionHistory]:
    ensure_capability(role, Capability.READ_STAFF_RECORDS, "view adoption history")
    animal = await uow.animals.get(animal_id)
    if not animal:
        raise NotFoundError("Animal not found")
    return await uow.adoption_history.list_for_animal(animal_id)

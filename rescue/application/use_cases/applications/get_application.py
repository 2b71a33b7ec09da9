from __future__ import annotations

from uuid import UUID

from rescue.application.authorization import Capability, ensure_capability
from rescue.application.errors import NotFoundError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.domain.models.application import Application
from rescue.domain.value_objects.role import Role


async def execute(uow: UnitOfWork, role: Role, application_id: UUID) -> Application:
    ensure_capability(role, Capability.READ_STAFF_RECORDS, "view applications")
    application = await uow.applications.get(application_id)
    if not application:
        raise NotFoundError(f"Application {application_id} not found")
    return application

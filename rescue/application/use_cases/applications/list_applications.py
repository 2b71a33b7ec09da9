from __future__ import annotations

from rescue.application.authorization import Capability, ensure_capability
from rescue.application.errors import ValidationError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.application.status_registry import parse_application_status
from rescue.domain.models.application import Application
from rescue.domain.value_objects.application_kind import ApplicationKind
from rescue.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    role: Role,
    *,
    kind: str | None = None,
    status: str | None = None,
    limit: int = 50,
    offset: int = 0,
) -> list[Application]:
    ensure_capability(role, Capability.READ_STAFF_RECORDS, "view applications")
    if limit <= 0 or limit > 200:
        raise ValidationError("limit must be between 1 and 200")
    try:
        kind_value = ApplicationKind(kind) if kind else None
    except ValueError as exc:
        raise ValidationError(f"Unknown application kind '{kind}'") from exc
    status_value = parse_application_status(status) if status else None
    return await uow.applications.list(
        kind=kind_value,
        status=status_value,
        limit=limit,
        offset=offset,
    )

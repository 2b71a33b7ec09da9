from __future__ import annotations

from typing import Protocol
from uuid import UUID

from rescue.domain.models.application import Application
from rescue.domain.value_objects.application_kind import ApplicationKind
from rescue.domain.value_objects.application_status import ApplicationStatus


class ApplicationRepository(Protocol):
    async def add(self, application: Application) -> Application: ...

    async def get(self, application_id: UUID) -> Application | None: ...

    async def list(
        self,
        *,
        kind: ApplicationKind | None = None,
        status: ApplicationStatus | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Application]: ...

    async def update(
        self,
        application_id: UUID,
        data: dict,
        expected_version: int,
    ) -> Application | None: ...

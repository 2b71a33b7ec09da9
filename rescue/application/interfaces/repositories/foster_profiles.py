from __future__ import annotations

from typing import Protocol
from uuid import UUID

from rescue.domain.models.foster_profile import FosterProfile


class FosterProfileRepository(Protocol):
    async def add(self, profile: FosterProfile) -> FosterProfile: ...

    async def get(self, profile_id: UUID) -> FosterProfile | None: ...

    async def get_by_user(self, user_id: UUID) -> FosterProfile | None: ...

    async def list(self, *, active_only: bool = False) -> list[FosterProfile]: ...

    async def update(
        self,
        profile_id: UUID,
        data: dict,
        expected_version: int,
    ) -> FosterProfile | None: ...

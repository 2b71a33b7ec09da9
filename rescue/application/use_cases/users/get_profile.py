from __future__ import annotations

from uuid import UUID

from rescue.application.errors import AuthError, NotFoundError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.domain.models.user import User


async def execute(uow: UnitOfWork, actor_user_id: UUID | None) -> User:
    if actor_user_id is None:
        raise AuthError("Authentication required")
    user = await uow.users.get(actor_user_id)
    if not user:
        raise NotFoundError("User profile not found")
    return user

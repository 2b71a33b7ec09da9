from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from rescue.application.errors import AuthError, ConflictError, NotFoundError, ValidationError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.domain.models.user import User

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 100
PHONE_MAX_LENGTH = 20


@dataclass(slots=True)
class UpdateProfileInput:
    version: int
    first_name: str | None = None
    last_name: str | None = None
    primary_phone: str | None = None


async def execute(
    uow: UnitOfWork,
    actor_user_id: UUID | None,
    payload: UpdateProfileInput,
) -> User:
    """Edit the caller's own contact fields. Email, role and active flag are not self-service."""
    if actor_user_id is None:
        raise AuthError("Authentication required")
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    user = await uow.users.get(actor_user_id)
    if not user:
        raise NotFoundError("User profile not found")

    data: dict = {}
    for field_name in ("first_name", "last_name"):
        value = getattr(payload, field_name)
        if value is None:
            continue
        value = value.strip()
        if not value:
            raise ValidationError(f"{field_name} cannot be blank", details={"field": field_name})
        if len(value) > NAME_MAX_LENGTH:
            raise ValidationError(
                f"{field_name} must be {NAME_MAX_LENGTH} characters or less",
                details={"field": field_name},
            )
        if value != getattr(user, field_name):
            data[field_name] = value
    if payload.primary_phone is not None:
        phone = payload.primary_phone.strip() or None
        if phone and len(phone) > PHONE_MAX_LENGTH:
            raise ValidationError(
                f"primary_phone must be {PHONE_MAX_LENGTH} characters or less",
                details={"field": "primary_phone"},
            )
        if phone != user.primary_phone:
            data["primary_phone"] = phone

    if payload.version != user.version:
        raise ConflictError("Version mismatch while updating profile")
    if not data:
        logger.info("No profile changes for user %s", user.id)
        return user
    data["updated_at"] = datetime.now(timezone.utc)
    updated = await uow.users.update(user.id, data=data, expected_version=payload.version)
    if not updated:
        raise ConflictError("Version mismatch while updating profile")
    await uow.commit()
    logger.info("Updated profile for user %s", user.id)
    return updated

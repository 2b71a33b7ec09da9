from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from rescue.domain.value_objects.role import Role


@dataclass(slots=True)
class User:
    id: UUID
    email: str
    first_name: str
    last_name: str
    role: Role = Role.GUEST
    is_active: bool = True
    primary_phone: str | None = None
    external_provider_id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        email: str,
        first_name: str,
        last_name: str,
        *,
        role: Role = Role.GUEST,
        is_active: bool = True,
        primary_phone: str | None = None,
        external_provider_id: str | None = None,
    ) -> User:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            email=email.lower(),
            first_name=first_name,
            last_name=last_name,
            role=role,
            is_active=is_active,
            primary_phone=primary_phone,
            external_provider_id=external_provider_id,
            created_at=now,
            updated_at=now,
            version=1,
        )

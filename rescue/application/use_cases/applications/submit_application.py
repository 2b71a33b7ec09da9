from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from rescue.application.errors import NotFoundError, ValidationError
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.domain.models.application import Application
from rescue.domain.value_objects.application_kind import ApplicationKind

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SubmitApplicationInput:
    kind: str
    first_name: str
    last_name: str
    primary_email: str
    primary_phone: str | None = None
    animal_id: UUID | None = None
    answers: dict[str, Any] = field(default_factory=dict)


def _parse_kind(value: str) -> ApplicationKind:
    try:
        return ApplicationKind(value)
    except ValueError as exc:
        raise ValidationError(
            f"Unknown application kind '{value}'",
            details={"allowed": [k.value for k in ApplicationKind]},
        ) from exc


async def execute(
    uow: UnitOfWork,
    actor_user_id: UUID | None,
    payload: SubmitApplicationInput,
) -> Application:
    """Public intake: anyone may submit, signed in or not."""
    kind = _parse_kind(payload.kind)
    missing = [
        name
        for name in ("first_name", "last_name", "primary_email")
        if not (getattr(payload, name) or "").strip()
    ]
    if missing:
        raise ValidationError("Missing required applicant fields", details={"missing": missing})
    if payload.animal_id is not None:
        if kind is not ApplicationKind.ADOPTION:
            raise ValidationError("Only adoption applications reference an animal")
        animal = await uow.animals.get(payload.animal_id)
        if not animal:
            raise NotFoundError("Animal not found")

    application = Application.submit(
        kind=kind,
        first_name=payload.first_name.strip(),
        last_name=payload.last_name.strip(),
        primary_email=payload.primary_email.strip(),
        primary_phone=payload.primary_phone,
        applicant_user_id=actor_user_id,
        animal_id=payload.animal_id,
        answers=payload.answers,
    )
    created = await uow.applications.add(application)
    logger.info("Received %s application %s", kind.value, created.id)
    await uow.commit()
    return created

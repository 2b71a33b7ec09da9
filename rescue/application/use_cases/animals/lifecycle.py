"""Shared status-change path for every operation that moves an animal.

Plain transitions, foster assignment, adoption finalization and returns all
write the animal's status through ``apply_status_change`` so the version
check and the status-changed fact are recorded the same way.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import UUID

from rescue.application.errors import ConflictError, ValidationError
from rescue.application.events.models import StatusChangedEvent
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.domain.models.animal import Animal
from rescue.domain.policies import animal_transitions
from rescue.domain.value_objects.animal_status import AnimalStatus

logger = logging.getLogger(__name__)


def ensure_transition_allowed(current: AnimalStatus, new: AnimalStatus) -> None:
    if not animal_transitions.is_allowed(current, new):
        raise ValidationError(
            f"Illegal status transition from '{current.value}' to '{new.value}'",
            details={
                "reason": "illegal_transition",
                "from": current.value,
                "to": new.value,
            },
        )


async def apply_status_change(
    uow: UnitOfWork,
    animal: Animal,
    new_status: AnimalStatus,
    actor_user_id: UUID | None,
    *,
    expected_version: int | None = None,
    extra: dict | None = None,
) -> Animal:
    data: dict = {
        "adoption_status": new_status,
        "updated_by": actor_user_id,
        "updated_at": datetime.now(timezone.utc),
    }
    if extra:
        data.update(extra)
    # Leaving foster-compatible statuses ends the placement.
    if "current_foster_id" not in data and not animal_transitions.keeps_foster(new_status):
        if animal.current_foster_id is not None:
            data["current_foster_id"] = None
    updated = await uow.animals.update(
        animal.id,
        data=data,
        expected_version=expected_version if expected_version is not None else animal.version,
    )
    if not updated:
        raise ConflictError("Animal was modified concurrently; reload and retry")
    if updated.adoption_status != animal.adoption_status:
        uow.add_event(
            StatusChangedEvent(
                entity_type="animal",
                entity_id=animal.id,
                old_status=animal.adoption_status.value,
                new_status=updated.adoption_status.value,
                actor_id=actor_user_id,
            )
        )
        logger.info(
            "Animal %s status changed %s -> %s by %s",
            animal.id,
            animal.adoption_status.value,
            updated.adoption_status.value,
            actor_user_id,
        )
    return updated

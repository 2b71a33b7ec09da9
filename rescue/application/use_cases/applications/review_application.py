from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from rescue.application.authorization import Capability, can
from rescue.application.errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from rescue.application.events.models import StatusChangedEvent
from rescue.application.interfaces.unit_of_work import UnitOfWork
from rescue.application.status_registry import parse_application_status
from rescue.domain.models.application import Application
from rescue.domain.models.foster_profile import FosterProfile
from rescue.domain.models.user import User
from rescue.domain.value_objects.application_kind import ApplicationKind
from rescue.domain.value_objects.application_status import ApplicationStatus
from rescue.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReviewApplicationInput:
    status: str
    notes: str | None = None
    version: int | None = None


@dataclass(slots=True)
class ReviewApplicationOutput:
    application: Application
    foster_profile: FosterProfile | None = None
    foster_profile_created: bool = False


def _append_note(existing: str | None, note: str | None, when: datetime, by: str) -> str | None:
    if not note or not note.strip():
        return existing
    line = f"[{when:%Y-%m-%d %H:%M} by {by}]: {note.strip()}"
    return f"{existing}\n{line}" if existing else line


async def _resolve_applicant_user(uow: UnitOfWork, application: Application) -> User:
    user = None
    if application.applicant_user_id is not None:
        user = await uow.users.get(application.applicant_user_id)
    if user is None and application.primary_email:
        user = await uow.users.get_by_email(application.primary_email)
    if user is None:
        logger.info(
            "Creating user for approved foster applicant %s (application %s)",
            application.primary_email,
            application.id,
        )
        user = await uow.users.add(
            User.create(
                email=application.primary_email or "",
                first_name=application.first_name,
                last_name=application.last_name,
                role=Role.GUEST,
                primary_phone=application.primary_phone,
            )
        )
    return user


async def _ensure_foster_profile(
    uow: UnitOfWork, application: Application
) -> tuple[FosterProfile, bool]:
    user = await _resolve_applicant_user(uow, application)
    profile = await uow.foster_profiles.get_by_user(user.id)
    if profile is None:
        profile = await uow.foster_profiles.add(
            FosterProfile.create(user_id=user.id, foster_application_id=application.id)
        )
        logger.info(
            "Created foster profile %s for user %s from application %s",
            profile.id,
            user.id,
            application.id,
        )
        return profile, True
    if not profile.is_active_foster:
        reactivated = await uow.foster_profiles.update(
            profile.id,
            data={"is_active_foster": True, "updated_at": datetime.now(timezone.utc)},
            expected_version=profile.version,
        )
        if not reactivated:
            raise ConflictError("Foster profile was modified concurrently; reload and retry")
        logger.info("Reactivated foster profile %s for user %s", profile.id, user.id)
        return reactivated, False
    return profile, False


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID | None,
    application_id: UUID,
    payload: ReviewApplicationInput,
    *,
    actor_email: str | None = None,
) -> ReviewApplicationOutput:
    is_reviewer = can(role, Capability.REVIEW_APPLICATIONS)
    # Applicants may withdraw their own application; every other outcome is staff-only.
    if not is_reviewer and payload.status != ApplicationStatus.WITHDRAWN.value:
        raise AuthorizationError(
            "Role not allowed to review applications",
            details={"role": role.value, "capability": Capability.REVIEW_APPLICATIONS.value},
        )
    new_status = parse_application_status(payload.status)
    if new_status is ApplicationStatus.PENDING_REVIEW:
        raise ValidationError("An application cannot be returned to 'Pending Review'")
    if actor_user_id is None:
        raise ValidationError("Reviewer identity is required")

    application = await uow.applications.get(application_id)
    if not application:
        raise NotFoundError(f"Application {application_id} not found")
    if not is_reviewer and not application.is_submitted_by(actor_user_id, actor_email):
        raise AuthorizationError("Only the applicant or staff may withdraw this application")
    if payload.version is not None and payload.version != application.version:
        raise ConflictError("Version mismatch while reviewing application")

    approving_foster = (
        application.kind is ApplicationKind.FOSTER and new_status is ApplicationStatus.APPROVED
    )
    if approving_foster and not application.primary_email and not application.applicant_user_id:
        raise ValidationError("Application is missing primary email, cannot approve")

    now = datetime.now(timezone.utc)
    data = {
        "status": new_status,
        "reviewed_by": actor_user_id,
        "review_date": now,
        "internal_notes": _append_note(
            application.internal_notes, payload.notes, now, actor_email or str(actor_user_id)
        ),
        "updated_at": now,
    }
    updated = await uow.applications.update(
        application.id,
        data=data,
        expected_version=application.version,
    )
    if not updated:
        raise ConflictError("Application was modified concurrently; reload and retry")

    if application.status is not new_status:
        uow.add_event(
            StatusChangedEvent(
                entity_type="application",
                entity_id=application.id,
                old_status=application.status.value,
                new_status=new_status.value,
                actor_id=actor_user_id,
                timestamp=now,
            )
        )

    output = ReviewApplicationOutput(application=updated)
    if approving_foster:
        output.foster_profile, output.foster_profile_created = await _ensure_foster_profile(
            uow, application
        )

    logger.info(
        "%s application %s moved %s -> %s by %s",
        application.kind.value,
        application.id,
        application.status.value,
        new_status.value,
        actor_user_id,
    )
    await uow.commit()
    return output

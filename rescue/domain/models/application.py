from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from rescue.domain.value_objects.application_kind import ApplicationKind
from rescue.domain.value_objects.application_status import ApplicationStatus


@dataclass(slots=True)
class Application:
    """A submitted adoption, foster, volunteer or partnership request.

    The four kinds share contact and review fields; the kind-specific
    questionnaire lives in ``answers``.
    """

    id: UUID
    kind: ApplicationKind
    first_name: str
    last_name: str
    primary_email: str | None
    primary_phone: str | None = None
    status: ApplicationStatus = ApplicationStatus.PENDING_REVIEW
    submission_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    applicant_user_id: UUID | None = None
    animal_id: UUID | None = None
    answers: dict[str, Any] = field(default_factory=dict)

    reviewed_by: UUID | None = None
    review_date: datetime | None = None
    internal_notes: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def submit(
        cls,
        kind: ApplicationKind,
        first_name: str,
        last_name: str,
        primary_email: str | None,
        primary_phone: str | None = None,
        applicant_user_id: UUID | None = None,
        animal_id: UUID | None = None,
        answers: dict[str, Any] | None = None,
    ) -> Application:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            kind=kind,
            first_name=first_name,
            last_name=last_name,
            primary_email=primary_email,
            primary_phone=primary_phone,
            status=ApplicationStatus.PENDING_REVIEW,
            submission_date=now,
            applicant_user_id=applicant_user_id,
            animal_id=animal_id,
            answers=dict(answers or {}),
            created_at=now,
            updated_at=now,
            version=1,
        )

    def is_submitted_by(self, user_id: UUID | None, email: str | None) -> bool:
        if user_id is not None and self.applicant_user_id == user_id:
            return True
        if email and self.primary_email:
            return self.primary_email.strip().lower() == email.strip().lower()
        return False

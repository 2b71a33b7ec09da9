from __future__ import annotations

from uuid import uuid4

import pytest

from rescue.application.errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from rescue.application.use_cases.applications import (
    get_application,
    list_applications,
    review_application,
    submit_application,
)
from rescue.domain.value_objects.application_kind import ApplicationKind
from rescue.domain.value_objects.application_status import ApplicationStatus
from rescue.domain.value_objects.role import Role


def review(status: str, notes: str | None = None, version: int | None = None):
    return review_application.ReviewApplicationInput(status=status, notes=notes, version=version)


@pytest.mark.asyncio
async def test_approving_foster_application_creates_profile(uow):
    staff_id = uuid4()
    application = uow.seed_application(ApplicationKind.FOSTER, email="New.Foster@example.org")
    result = await review_application.execute(
        uow, Role.STAFF, staff_id, application.id, review("Approved", notes="Great home")
    )
    assert result.application.status is ApplicationStatus.APPROVED
    assert result.application.reviewed_by == staff_id
    assert result.application.review_date is not None
    assert "Great home" in result.application.internal_notes
    assert result.foster_profile_created is True

    user = await uow.users.get_by_email("new.foster@example.org")
    assert user is not None
    assert user.role is Role.GUEST
    profile = await uow.foster_profiles.get_by_user(user.id)
    assert profile is not None
    assert profile.is_active_foster is True
    assert profile.foster_application_id == application.id

    [event] = uow.drain_events()
    assert event.entity_type == "application"
    assert (event.old_status, event.new_status) == ("Pending Review", "Approved")


@pytest.mark.asyncio
async def test_approving_foster_reuses_existing_user_and_reactivates(uow):
    user, profile = uow.seed_foster(active=False)
    application = uow.seed_application(ApplicationKind.FOSTER, email=user.email.upper())
    result = await review_application.execute(
        uow, Role.ADMIN, uuid4(), application.id, review("Approved")
    )
    assert result.foster_profile_created is False
    assert result.foster_profile.id == profile.id
    assert result.foster_profile.is_active_foster is True
    assert len(uow.store.users) == 1


@pytest.mark.asyncio
async def test_approving_adoption_touches_nothing_else(uow):
    application = uow.seed_application(ApplicationKind.ADOPTION)
    result = await review_application.execute(
        uow, Role.STAFF, uuid4(), application.id, review("Approved")
    )
    assert result.foster_profile is None
    assert uow.store.users == {}
    assert uow.store.foster_profiles == {}


@pytest.mark.asyncio
async def test_pending_review_is_not_a_review_outcome(uow):
    application = uow.seed_application()
    with pytest.raises(ValidationError):
        await review_application.execute(
            uow, Role.STAFF, uuid4(), application.id, review("Pending Review")
        )


@pytest.mark.asyncio
async def test_unknown_application_status(uow):
    application = uow.seed_application()
    with pytest.raises(ValidationError):
        await review_application.execute(
            uow, Role.STAFF, uuid4(), application.id, review("approved")
        )


@pytest.mark.asyncio
async def test_volunteer_cannot_approve(uow):
    application = uow.seed_application()
    with pytest.raises(AuthorizationError):
        await review_application.execute(
            uow, Role.VOLUNTEER, uuid4(), application.id, review("Approved")
        )
    assert uow.store.applications[application.id].status is ApplicationStatus.PENDING_REVIEW


@pytest.mark.asyncio
async def test_applicant_may_withdraw_own_application(uow):
    applicant = uow.seed_user(role=Role.GUEST, email="jamie@example.org")
    application = uow.seed_application(email="Jamie@Example.org")
    result = await review_application.execute(
        uow,
        Role.GUEST,
        applicant.id,
        application.id,
        review("Withdrawn"),
        actor_email=applicant.email,
    )
    assert result.application.status is ApplicationStatus.WITHDRAWN


@pytest.mark.asyncio
async def test_other_guest_cannot_withdraw(uow):
    application = uow.seed_application(email="jamie@example.org")
    with pytest.raises(AuthorizationError):
        await review_application.execute(
            uow,
            Role.GUEST,
            uuid4(),
            application.id,
            review("Withdrawn"),
            actor_email="someone.else@example.org",
        )


@pytest.mark.asyncio
async def test_foster_approval_requires_email(uow):
    application = uow.seed_application(ApplicationKind.FOSTER, email=None)
    with pytest.raises(ValidationError):
        await review_application.execute(
            uow, Role.STAFF, uuid4(), application.id, review("Approved")
        )


@pytest.mark.asyncio
async def test_review_stale_version_conflicts(uow):
    application = uow.seed_application()
    with pytest.raises(ConflictError):
        await review_application.execute(
            uow, Role.STAFF, uuid4(), application.id, review("Rejected", version=7)
        )


@pytest.mark.asyncio
async def test_review_missing_application(uow):
    with pytest.raises(NotFoundError):
        await review_application.execute(uow, Role.STAFF, uuid4(), uuid4(), review("Rejected"))


@pytest.mark.asyncio
async def test_notes_are_appended(uow):
    application = uow.seed_application()
    first = await review_application.execute(
        uow, Role.STAFF, uuid4(), application.id, review("Contacted", notes="Left voicemail")
    )
    second = await review_application.execute(
        uow, Role.STAFF, uuid4(), application.id, review("On Hold", notes="Waiting on landlord")
    )
    lines = second.application.internal_notes.splitlines()
    assert len(lines) == 2
    assert lines[0] == first.application.internal_notes
    assert lines[1].endswith("Waiting on landlord")


@pytest.mark.asyncio
async def test_submit_application_is_public(uow):
    animal = uow.seed_animal()
    created = await submit_application.execute(
        uow,
        None,
        submit_application.SubmitApplicationInput(
            kind="adoption",
            first_name="Sam",
            last_name="Lee",
            primary_email="sam@example.org",
            animal_id=animal.id,
            answers={"has_yard": True},
        ),
    )
    assert created.status is ApplicationStatus.PENDING_REVIEW
    assert created.answers == {"has_yard": True}


@pytest.mark.asyncio
async def test_submit_rejects_missing_fields_and_unknown_kind(uow):
    with pytest.raises(ValidationError) as exc_info:
        await submit_application.execute(
            uow,
            None,
            submit_application.SubmitApplicationInput(
                kind="volunteer", first_name="", last_name="Lee", primary_email=""
            ),
        )
    assert exc_info.value.details["missing"] == ["first_name", "primary_email"]
    with pytest.raises(ValidationError):
        await submit_application.execute(
            uow,
            None,
            submit_application.SubmitApplicationInput(
                kind="sponsorship", first_name="Sam", last_name="Lee", primary_email="s@x.org"
            ),
        )


@pytest.mark.asyncio
async def test_staff_reads_applications(uow):
    application = uow.seed_application(ApplicationKind.VOLUNTEER)
    uow.seed_application(ApplicationKind.FOSTER)
    assert (await get_application.execute(uow, Role.STAFF, application.id)).id == application.id
    volunteers = await list_applications.execute(uow, Role.STAFF, kind="volunteer")
    assert [a.id for a in volunteers] == [application.id]
    with pytest.raises(AuthorizationError):
        await list_applications.execute(uow, Role.VOLUNTEER)

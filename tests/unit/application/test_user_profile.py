from __future__ import annotations

from uuid import uuid4

import pytest

from rescue.application.errors import AuthError, ConflictError, NotFoundError, ValidationError
from rescue.application.use_cases.users import get_profile, update_profile
from rescue.domain.value_objects.role import Role


@pytest.mark.asyncio
async def test_get_profile_returns_own_user(uow):
    user = uow.seed_user(role=Role.VOLUNTEER, email="vol@example.org")
    profile = await get_profile.execute(uow, user.id)
    assert profile.email == "vol@example.org"
    assert profile.role == Role.VOLUNTEER


@pytest.mark.asyncio
async def test_get_profile_requires_identity(uow):
    with pytest.raises(AuthError):
        await get_profile.execute(uow, None)
    with pytest.raises(NotFoundError):
        await get_profile.execute(uow, uuid4())


@pytest.mark.asyncio
async def test_update_profile_edits_contact_fields(uow):
    user = uow.seed_user(role=Role.GUEST)
    updated = await update_profile.execute(
        uow,
        user.id,
        update_profile.UpdateProfileInput(
            version=user.version, first_name="  Robin ", primary_phone="555-0100"
        ),
    )
    assert updated.first_name == "Robin"
    assert updated.last_name == user.last_name
    assert updated.primary_phone == "555-0100"
    assert updated.role == Role.GUEST
    assert updated.version == user.version + 1
    assert uow.commits == 1


@pytest.mark.asyncio
async def test_update_profile_without_changes_keeps_version(uow):
    user = uow.seed_user()
    result = await update_profile.execute(
        uow,
        user.id,
        update_profile.UpdateProfileInput(version=user.version, first_name=user.first_name),
    )
    assert result.version == user.version
    assert uow.commits == 0


@pytest.mark.asyncio
async def test_update_profile_rejects_blank_name(uow):
    user = uow.seed_user()
    with pytest.raises(ValidationError) as exc_info:
        await update_profile.execute(
            uow, user.id, update_profile.UpdateProfileInput(version=user.version, last_name=" ")
        )
    assert exc_info.value.details["field"] == "last_name"


@pytest.mark.asyncio
async def test_update_profile_with_stale_version_conflicts(uow):
    user = uow.seed_user()
    await update_profile.execute(
        uow, user.id, update_profile.UpdateProfileInput(version=user.version, first_name="Ana")
    )
    with pytest.raises(ConflictError):
        await update_profile.execute(
            uow, user.id, update_profile.UpdateProfileInput(version=user.version, first_name="Bo")
        )
    assert uow.store.users[user.id].first_name == "Ana"

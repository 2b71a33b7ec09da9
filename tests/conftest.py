from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any, cast
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from rescue.application.errors import AuthError
from rescue.config.settings import Settings
from rescue.domain.value_objects.role import Role
from rescue.infrastructure.db.base import Base
from rescue.infrastructure.db.orm import (  # noqa: F401
    adoption_history,
    animal,
    application,
    foster_profile,
    user,
)
from rescue.infrastructure.db.orm.user import UserORM
from rescue.interfaces.http.main import create_app


class StubJWTService:
    """Treats the bearer token itself as the subject claim."""

    def decode(self, token: str) -> dict[str, Any]:
        if token == "invalid":
            raise AuthError("Token validation failed")
        return {"sub": token}


class RecordingPublisher:
    def __init__(self) -> None:
        self.published: list = []

    async def publish(self, event) -> None:
        self.published.append(event)


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture()
def app(test_settings: Settings, publisher: RecordingPublisher):
    return create_app(settings=test_settings, jwt_service=StubJWTService(), publisher=publisher)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
        await engine.dispose()


@pytest.fixture()
async def seeded_users(app, client) -> dict[str, UUID]:
    ids = {
        "admin": uuid4(),
        "staff": uuid4(),
        "volunteer": uuid4(),
        "guest": uuid4(),
    }
    roles = {
        "admin": Role.ADMIN,
        "staff": Role.STAFF,
        "volunteer": Role.VOLUNTEER,
        "guest": Role.GUEST,
    }
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        async_session = cast(AsyncSession, session)
        async_session.add_all(
            [
                UserORM(
                    id=ids[name],
                    email=f"{name}@rescue.test",
                    first_name=name.title(),
                    last_name="Tester",
                    role=roles[name],
                    is_active=True,
                )
                for name in ids
            ]
        )
        await async_session.commit()
    return ids


@pytest.fixture()
def auth_headers(seeded_users) -> dict[str, dict[str, str]]:
    return {name: {"Authorization": f"Bearer {user_id}"} for name, user_id in seeded_users.items()}

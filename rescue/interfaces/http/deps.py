from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import BackgroundTasks, Request

from rescue.application.errors import AuthError
from rescue.application.events.dispatcher import dispatch_events
from rescue.application.interfaces.notifications import NotificationPublisher
from rescue.config.settings import Settings, get_settings
from rescue.infrastructure.auth.context import AuthContext
from rescue.infrastructure.db.session import SQLAlchemyUnitOfWork


async def get_auth_context(request: Request) -> AuthContext:
    context = getattr(request.state, "auth_context", None)
    if context is None:
        raise AuthError("Authentication required")
    return context


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()


def get_publisher(request: Request) -> NotificationPublisher | None:
    return getattr(request.app.state, "notification_publisher", None)


def schedule_dispatch(request: Request, background_tasks: BackgroundTasks, uow) -> None:
    """Hand the committed status-change facts to a background task."""
    events = uow.drain_events()
    publisher = get_publisher(request)
    if publisher is not None and events:
        background_tasks.add_task(dispatch_events, publisher, events)

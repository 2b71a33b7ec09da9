from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from rescue.application.interfaces.unit_of_work import UnitOfWork


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.animals = None
        self.applications = None
        self.foster_profiles = None
        self.adoption_history = None
        self.users = None
        self.events: list = []

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from rescue.infrastructure.repos.adoption_history_sqlalchemy import (
            AdoptionHistorySQLAlchemyRepository,
        )
        from rescue.infrastructure.repos.animals_sqlalchemy import AnimalsSQLAlchemyRepository
        from rescue.infrastructure.repos.applications_sqlalchemy import (
            ApplicationsSQLAlchemyRepository,
        )
        from rescue.infrastructure.repos.foster_profiles_sqlalchemy import (
            FosterProfilesSQLAlchemyRepository,
        )
        from rescue.infrastructure.repos.users_sqlalchemy import UsersSQLAlchemyRepository

        self.animals = AnimalsSQLAlchemyRepository(self.session)
        self.applications = ApplicationsSQLAlchemyRepository(self.session)
        self.foster_profiles = FosterProfilesSQLAlchemyRepository(self.session)
        self.adoption_history = AdoptionHistorySQLAlchemyRepository(self.session)
        self.users = UsersSQLAlchemyRepository(self.session)
        self.events = []
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
                # Facts from a failed transaction must never be published
                self.events = []
        finally:
            await self.session.close()
            self.session = None
            self.animals = None
            self.applications = None
            self.foster_profiles = None
            self.adoption_history = None
            self.users = None

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
        self.events = []

    def add_event(self, event: object) -> None:
        self.events.append(event)

    def drain_events(self) -> list:
        events, self.events = self.events, []
        return events

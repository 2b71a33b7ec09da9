from __future__ import annotations

from typing import Protocol

from rescue.application.interfaces.repositories.adoption_history import (
    AdoptionHistoryRepository,
)
from rescue.application.interfaces.repositories.animals import AnimalRepository
from rescue.application.interfaces.repositories.applications import ApplicationRepository
from rescue.application.interfaces.repositories.foster_profiles import (
    FosterProfileRepository,
)
from rescue.application.interfaces.repositories.users import UserRepository


class UnitOfWork(Protocol):
    animals: AnimalRepository
    applications: ApplicationRepository
    foster_profiles: FosterProfileRepository
    adoption_history: AdoptionHistoryRepository
    users: UserRepository
    # Domain events collected during the transaction
    events: list

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...

    # Record a domain event during the transaction
    def add_event(self, event: object) -> None: ...

    # Drain collected events (used for post-commit dispatch)
    def drain_events(self) -> list: ...

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from uuid import UUID

import pytest

from rescue.application.errors import ConflictError
from rescue.domain.models.adoption_history import AdopterSnapshot, AdoptionHistory
from rescue.domain.models.animal import Animal
from rescue.domain.models.application import Application
from rescue.domain.models.foster_profile import FosterProfile
from rescue.domain.models.user import User
from rescue.domain.value_objects.animal_status import AnimalStatus
from rescue.domain.value_objects.application_kind import ApplicationKind
from rescue.domain.value_objects.role import Role


@dataclass
class InMemoryStore:
    animals: dict = field(default_factory=dict)
    applications: dict = field(default_factory=dict)
    foster_profiles: dict = field(default_factory=dict)
    adoption_history: dict = field(default_factory=dict)
    users: dict = field(default_factory=dict)


class _Repo:
    def __init__(self, uow: InMemoryUnitOfWork, table: dict) -> None:
        self.uow = uow
        self.table = table

    def _write(self, key, value) -> None:
        self.uow._record(self.table, key)
        self.table[key] = value

    def _versioned_update(self, key, data: dict, expected_version: int):
        current = self.table.get(key)
        if current is None or current.version != expected_version:
            return None
        if getattr(current, "deleted_at", None) is not None:
            return None
        updated = replace(current, **data, version=expected_version + 1)
        self._write(key, updated)
        return replace(updated)


class FakeAnimals(_Repo):
    async def add(self, animal: Animal) -> Animal:
        self._write(animal.id, replace(animal))
        return replace(animal)

    async def get(self, animal_id: UUID) -> Animal | None:
        # Yield so concurrent callers interleave like real I/O
        await asyncio.sleep(0)
        animal = self.table.get(animal_id)
        if animal is None or animal.deleted_at is not None:
            return None
        return replace(animal)

    def _matching(self, statuses, foster_id, species) -> list[Animal]:
        items = [a for a in self.table.values() if a.deleted_at is None]
        if statuses is not None:
            items = [a for a in items if a.adoption_status in statuses]
        if foster_id is not None:
            items = [a for a in items if a.current_foster_id == foster_id]
        if species is not None:
            items = [a for a in items if (a.species or "").lower() == species.lower()]
        return items

    async def list(self, *, statuses=None, foster_id=None, species=None, limit=None, offset=None):
        items = self._matching(statuses, foster_id, species)
        start = offset or 0
        end = start + limit if limit is not None else None
        return [replace(a) for a in items[start:end]]

    async def count(self, *, statuses=None, foster_id=None, species=None) -> int:
        return len(self._matching(statuses, foster_id, species))

    async def list_species(self, *, statuses=None) -> list[str]:
        species = {a.species for a in self._matching(statuses, None, None) if a.species}
        return sorted(value for value in species if value.strip())

    async def update(self, animal_id: UUID, data: dict, expected_version: int):
        return self._versioned_update(animal_id, data, expected_version)

    async def delete(self, animal_id: UUID) -> bool:
        animal = self.table.get(animal_id)
        if animal is None or animal.deleted_at is not None:
            return False
        self._write(
            animal_id,
            replace(animal, deleted_at=datetime.now(timezone.utc), version=animal.version + 1),
        )
        return True


class FakeApplications(_Repo):
    async def add(self, application: Application) -> Application:
        self._write(application.id, replace(application))
        return replace(application)

    async def get(self, application_id: UUID) -> Application | None:
        await asyncio.sleep(0)
        application = self.table.get(application_id)
        return replace(application) if application else None

    async def list(self, *, kind=None, status=None, limit=None, offset=None):
        items = list(self.table.values())
        if kind is not None:
            items = [a for a in items if a.kind is kind]
        if status is not None:
            items = [a for a in items if a.status is status]
        start = offset or 0
        end = start + limit if limit is not None else None
        return [replace(a) for a in items[start:end]]

    async def update(self, application_id: UUID, data: dict, expected_version: int):
        return self._versioned_update(application_id, data, expected_version)


class FakeFosterProfiles(_Repo):
    async def add(self, profile: FosterProfile) -> FosterProfile:
        if any(p.user_id == profile.user_id for p in self.table.values()):
            raise ConflictError("User already has a foster profile")
        self._write(profile.id, replace(profile))
        return replace(profile)

    async def get(self, profile_id: UUID) -> FosterProfile | None:
        profile = self.table.get(profile_id)
        return replace(profile) if profile else None

    async def get_by_user(self, user_id: UUID) -> FosterProfile | None:
        for profile in self.table.values():
            if profile.user_id == user_id:
                return replace(profile)
        return None

    async def list(self, *, active_only: bool = False) -> list[FosterProfile]:
        return [replace(p) for p in self.table.values() if p.is_active_foster or not active_only]

    async def update(self, profile_id: UUID, data: dict, expected_version: int):
        return self._versioned_update(profile_id, data, expected_version)


class FakeAdoptionHistory(_Repo):
    async def add(self, history: AdoptionHistory) -> AdoptionHistory:
        # Mirrors the partial unique index on open adoptions
        if any(
            h.animal_id == history.animal_id and h.return_date is None
            for h in self.table.values()
        ):
            raise ConflictError("Animal already has an open adoption record")
        self._write(history.id, replace(history))
        return replace(history)

    async def get(self, history_id: UUID) -> AdoptionHistory | None:
        history = self.table.get(history_id)
        return replace(history) if history else None

    async def get_open_for_animal(self, animal_id: UUID) -> AdoptionHistory | None:
        await asyncio.sleep(0)
        for history in self.table.values():
            if history.animal_id == animal_id and history.return_date is None:
                return replace(history)
        return None

    async def list_for_animal(self, animal_id: UUID) -> list[AdoptionHistory]:
        return [replace(h) for h in self.table.values() if h.animal_id == animal_id]

    async def list_open(self) -> list[AdoptionHistory]:
        return [replace(h) for h in self.table.values() if h.return_date is None]

    async def mark_returned(self, history_id: UUID, return_date: date):
        history = self.table.get(history_id)
        if history is None or history.return_date is not None:
            return None
        updated = replace(history, return_date=return_date)
        self._write(history_id, updated)
        return replace(updated)


class FakeUsers(_Repo):
    async def add(self, user: User) -> User:
        if any(u.email == user.email for u in self.table.values()):
            raise ConflictError("Email already registered")
        self._write(user.id, replace(user))
        return replace(user)

    async def get(self, user_id: UUID) -> User | None:
        user = self.table.get(user_id)
        return replace(user) if user else None

    async def get_by_email(self, email: str) -> User | None:
        for user in self.table.values():
            if user.email == email.strip().lower():
                return replace(user)
        return None

    async def get_many(self, user_ids: list[UUID]) -> list[User]:
        return [replace(u) for u in self.table.values() if u.id in set(user_ids)]

    async def update(self, user_id: UUID, data: dict, expected_version: int):
        return self._versioned_update(user_id, data, expected_version)


class InMemoryUnitOfWork:
    """Unit of work over a shared store; uncommitted writes are undone on rollback."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store
        self.events: list = []
        self.commits = 0
        self._undo: list[tuple[dict, object, object]] = []
        self.animals = FakeAnimals(self, store.animals)
        self.applications = FakeApplications(self, store.applications)
        self.foster_profiles = FakeFosterProfiles(self, store.foster_profiles)
        self.adoption_history = FakeAdoptionHistory(self, store.adoption_history)
        self.users = FakeUsers(self, store.users)

    def _record(self, table: dict, key) -> None:
        self._undo.append((table, key, table.get(key)))

    async def __aenter__(self) -> InMemoryUnitOfWork:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc:
            await self.rollback()

    async def commit(self) -> None:
        self._undo.clear()
        self.commits += 1

    async def rollback(self) -> None:
        for table, key, previous in reversed(self._undo):
            if previous is None:
                table.pop(key, None)
            else:
                table[key] = previous
        self._undo.clear()
        self.events = []

    def add_event(self, event: object) -> None:
        self.events.append(event)

    def drain_events(self) -> list:
        events, self.events = self.events, []
        return events

    # Seeding helpers write straight to the store, outside any transaction.

    def seed_user(self, *, role: Role = Role.GUEST, email: str | None = None, active=True) -> User:
        user = User.create(
            email=email or f"user{len(self.store.users) + 1}@example.org",
            first_name="Test",
            last_name="User",
            role=role,
            is_active=active,
        )
        self.store.users[user.id] = user
        return replace(user)

    def seed_foster(
        self, *, user: User | None = None, active: bool = True
    ) -> tuple[User, FosterProfile]:
        user = user or self.seed_user(role=Role.VOLUNTEER)
        profile = FosterProfile.create(user_id=user.id)
        profile.is_active_foster = active
        self.store.foster_profiles[profile.id] = profile
        return user, replace(profile)

    def seed_animal(
        self,
        status: AnimalStatus = AnimalStatus.AVAILABLE,
        *,
        foster_id: UUID | None = None,
        name: str = "Biscuit",
        species: str | None = "Dog",
    ) -> Animal:
        animal = Animal.create(name=name, species=species, adoption_status=status)
        animal.current_foster_id = foster_id
        self.store.animals[animal.id] = animal
        return replace(animal)

    def seed_application(
        self,
        kind: ApplicationKind = ApplicationKind.ADOPTION,
        *,
        email: str | None = "applicant@example.org",
        applicant_user_id: UUID | None = None,
    ) -> Application:
        application = Application.submit(
            kind=kind,
            first_name="Jamie",
            last_name="Rivera",
            primary_email=email,
            primary_phone="555-0100",
            applicant_user_id=applicant_user_id,
        )
        self.store.applications[application.id] = application
        return replace(application)

    def seed_history(
        self, animal_id: UUID, *, adoption_date: date = date(2026, 1, 10)
    ) -> AdoptionHistory:
        history = AdoptionHistory.create(
            animal_id=animal_id,
            adopter=make_adopter(),
            adoption_date=adoption_date,
        )
        self.store.adoption_history[history.id] = history
        return replace(history)


def make_adopter(**overrides) -> AdopterSnapshot:
    data = {
        "first_name": "Alex",
        "last_name": "Morgan",
        "email": "alex@example.org",
        "primary_phone": "555-0142",
        "city": "Springfield",
    }
    data.update(overrides)
    return AdopterSnapshot(**data)


@pytest.fixture()
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture()
def uow(store: InMemoryStore) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(store)


@pytest.fixture()
def uow_factory(store: InMemoryStore):
    def factory() -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(store)

    return factory


@pytest.fixture()
def adopter() -> AdopterSnapshot:
    return make_adopter()

from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from rescue.domain.models.adoption_history import AdoptionHistory


class AdoptionHistoryRepository(Protocol):
    """Append-mostly ledger: rows are inserted once and only ``return_date`` may change."""

    async def add(self, history: AdoptionHistory) -> AdoptionHistory: ...

    async def get(self, history_id: UUID) -> AdoptionHistory | None: ...

    async def get_open_for_animal(self, animal_id: UUID) -> AdoptionHistory | None: ...

    async def list_for_animal(self, animal_id: UUID) -> list[AdoptionHistory]: ...

    async def list_open(self) -> list[AdoptionHistory]: ...

    async def mark_returned(self, history_id: UUID, return_date: date) -> AdoptionHistory | None:
        """Set ``return_date`` only if it is still empty; ``None`` when it was already set."""
        ...

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID


@dataclass(frozen=True)
class StatusChangedEvent:
    entity_type: str  # 'animal' | 'application'
    entity_id: UUID
    old_status: str | None
    new_status: str
    actor_id: UUID | None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

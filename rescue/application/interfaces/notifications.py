from __future__ import annotations

from typing import Protocol

from rescue.application.events.models import StatusChangedEvent


class NotificationPublisher(Protocol):
    async def publish(self, event: StatusChangedEvent) -> None: ...

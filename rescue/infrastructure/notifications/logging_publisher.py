from __future__ import annotations

import logging

from rescue.application.events.models import StatusChangedEvent
from rescue.application.interfaces.notifications import NotificationPublisher

logger = logging.getLogger(__name__)


class LoggingNotificationPublisher(NotificationPublisher):
    async def publish(self, event: StatusChangedEvent) -> None:  # pragma: no cover
        logger.info(
            "Status changed (logging publisher): %s %s %s -> %s by=%s at=%s",
            event.entity_type,
            event.entity_id,
            event.old_status or "-",
            event.new_status,
            event.actor_id or "-",
            event.timestamp.isoformat(),
        )

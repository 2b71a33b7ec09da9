from __future__ import annotations

import logging
from typing import Iterable

from rescue.application.events.models import StatusChangedEvent
from rescue.application.interfaces.notifications import NotificationPublisher

logger = logging.getLogger(__name__)


async def dispatch_events(
    publisher: NotificationPublisher | None, events: Iterable[object]
) -> None:
    """
    Dispatch events post-commit. Each event is published independently so one
    failing delivery does not drop the rest. Safe to call in a background task.
    """
    events = list(events)
    if not events or publisher is None:
        return

    for event in events:
        try:
            if isinstance(event, StatusChangedEvent):
                await publisher.publish(event)
            else:
                logger.debug("Skipping unsupported event %s", type(event).__name__)
        except Exception as e:
            logger.error(
                "Error dispatching event %s: %s", type(event).__name__, e, exc_info=True
            )

from __future__ import annotations

import logging
from uuid import uuid4

import pytest

from rescue.application.events.dispatcher import dispatch_events
from rescue.application.events.models import StatusChangedEvent


class RecordingPublisher:
    def __init__(self, fail_on: set[str] | None = None) -> None:
        self.published: list[StatusChangedEvent] = []
        self.fail_on = fail_on or set()

    async def publish(self, event: StatusChangedEvent) -> None:
        if event.new_status in self.fail_on:
            raise RuntimeError("delivery failed")
        self.published.append(event)


def make_event(new_status: str) -> StatusChangedEvent:
    return StatusChangedEvent(
        entity_type="animal",
        entity_id=uuid4(),
        old_status="Available",
        new_status=new_status,
        actor_id=uuid4(),
    )


@pytest.mark.asyncio
async def test_failed_delivery_does_not_stop_the_rest(caplog):
    publisher = RecordingPublisher(fail_on={"Adoption Pending"})
    events = [make_event("Adoption Pending"), make_event("Available - In Foster")]
    with caplog.at_level(logging.ERROR):
        await dispatch_events(publisher, events)
    assert [e.new_status for e in publisher.published] == ["Available - In Foster"]
    assert "Error dispatching event" in caplog.text


@pytest.mark.asyncio
async def test_unrelated_events_are_skipped():
    publisher = RecordingPublisher()
    await dispatch_events(publisher, [object(), make_event("Adopted")])
    assert len(publisher.published) == 1


@pytest.mark.asyncio
async def test_no_publisher_is_a_noop():
    await dispatch_events(None, [make_event("Adopted")])

"""EventBus: envelope shape and uninitialized behavior."""

import pytest

from taskboard.domain.exceptions import EventBusNotInitializedError
from taskboard.infrastructure.messaging.event_bus import EventBus
from tests.fakes import RecordingTransport


@pytest.mark.asyncio
async def test_publish_without_transport_raises() -> None:
    bus = EventBus()
    assert not bus.is_initialized
    with pytest.raises(EventBusNotInitializedError):
        await bus.publish("task:deleted", {"id": "t1"})


@pytest.mark.asyncio
async def test_publish_wraps_payload_in_envelope() -> None:
    transport = RecordingTransport()
    bus = EventBus()
    bus.attach(transport)

    await bus.publish("task:deleted", {"id": "t1"})

    assert transport.messages == [{"event": "task:deleted", "data": {"id": "t1"}}]


@pytest.mark.asyncio
async def test_detach_makes_publish_fail_again() -> None:
    bus = EventBus(RecordingTransport())
    assert bus.is_initialized
    bus.detach()
    with pytest.raises(EventBusNotInitializedError):
        await bus.publish("task:deleted", {"id": "t1"})


@pytest.mark.asyncio
async def test_subscriber_count_zero_when_not_initialized() -> None:
    assert await EventBus().subscriber_count() == 0

"""In-process event bus for real-time fan-out.

One EventBus is constructed by the app factory and injected into services.
It wraps a broadcast transport (the WebSocket ConnectionManager) that is
attached during lifespan startup. Publishing is fire-and-forget: no
persistence, no acknowledgment, no ordering across concurrent publishes,
and no replay for clients that connect later (they re-fetch over REST).
"""

from __future__ import annotations

import logging
from typing import Any

from taskboard.application.interfaces.services import IBroadcastTransport
from taskboard.domain.exceptions import EventBusNotInitializedError

logger = logging.getLogger(__name__)


class EventBus:
    """Publish named events to every connected subscriber.

    Messages go out as {"event": <name>, "data": <payload>}. There is no
    per-user targeting; payloads that concern one user carry a userId field
    and subscribers filter on it.
    """

    def __init__(self, transport: IBroadcastTransport | None = None) -> None:
        """Initialize. Pass transport for DI/testing; otherwise attach() at startup."""
        self._transport = transport

    def attach(self, transport: IBroadcastTransport) -> None:
        """Attach the transport. Call on app startup."""
        self._transport = transport
        logger.info("Event bus attached to %s", type(transport).__name__)

    def detach(self) -> None:
        """Detach the transport. Call on app shutdown; later publishes fail."""
        if self._transport is not None:
            logger.info("Event bus detached")
        self._transport = None

    @property
    def is_initialized(self) -> bool:
        """Return True if a transport is attached."""
        return self._transport is not None

    async def publish(self, event: str, payload: dict[str, Any]) -> None:
        """Broadcast event to the current subscribers.

        Raises:
            EventBusNotInitializedError: If no transport is attached.
        """
        if self._transport is None:
            raise EventBusNotInitializedError()
        await self._transport.broadcast({"event": event, "data": payload})
        logger.debug("Published %s", event)

    async def subscriber_count(self) -> int:
        """Return the number of connected subscribers (0 when not initialized)."""
        if self._transport is None:
            return 0
        return await self._transport.get_connection_count()

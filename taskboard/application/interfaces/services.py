"""Service interfaces (ports) for the application layer.

Protocols define contracts for the real-time side of a mutation (DIP).
"""

from __future__ import annotations

from typing import Any, Protocol


# Event publisher interface (EventBus)
class IEventPublisher(Protocol):
    """Protocol for best-effort fan-out of a named event to connected clients."""

    async def publish(self, event: str, payload: dict[str, Any]) -> None:
        """Broadcast; raise TransportException when delivery cannot be attempted."""


# Broadcast transport interface (WebSocket connection manager)
class IBroadcastTransport(Protocol):
    """Protocol for the transport wrapped by the event bus."""

    async def broadcast(self, message: dict[str, Any]) -> None:
        """Send message to every currently connected client."""

    async def get_connection_count(self) -> int:
        """Return the number of connected clients."""

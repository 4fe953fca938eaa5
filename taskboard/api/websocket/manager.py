"""WebSocket connection manager.

Holds every active connection and broadcasts to all of them. There is no
room or per-user scoping. Use via app.state.ws_manager (set in lifespan);
the EventBus wraps it as its transport.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)

DEFAULT_SEND_TIMEOUT = 5.0


class ConnectionManager:
    """Manages WebSocket connections.

    The lock guards only the connection set. Broadcast snapshots the set
    under the lock and sends outside it, so connects and disconnects never
    wait on a slow client and a client that joins mid-broadcast does not
    receive that message. Sends run concurrently and each one is bounded by
    send_timeout; a client that fails or times out is dropped.
    """

    def __init__(self, send_timeout: float = DEFAULT_SEND_TIMEOUT) -> None:
        """Initialize with an empty connection set.

        Args:
            send_timeout: Seconds one send may take before the client is dropped.
        """
        self._connections: set[WebSocket] = set()
        self._lock = asyncio.Lock()
        self._send_timeout = send_timeout

    async def connect(self, websocket: WebSocket) -> None:
        """Accept and register a new connection.

        Args:
            websocket: The WebSocket instance to accept and track.
        """
        await websocket.accept()
        async with self._lock:
            self._connections.add(websocket)
        logger.debug("WebSocket connected (%d total)", len(self._connections))

    async def disconnect(self, websocket: WebSocket) -> None:
        """Remove a connection (call on disconnect).

        Args:
            websocket: The WebSocket instance to remove.
        """
        async with self._lock:
            self._connections.discard(websocket)

    async def broadcast(self, message: str | dict[str, Any]) -> None:
        """Send a message to all connected clients.

        Returns once every send has finished, failed or timed out.

        Args:
            message: String or JSON-serializable dict to send.
        """
        async with self._lock:
            snapshot = list(self._connections)
        await self._send_to_list(snapshot, message)

    async def _send_one(self, ws: WebSocket, message: str | dict[str, Any]) -> None:
        if isinstance(message, dict):
            await asyncio.wait_for(ws.send_json(message), self._send_timeout)
        else:
            await asyncio.wait_for(ws.send_text(message), self._send_timeout)

    async def _send_to_list(
        self,
        connections: list[WebSocket],
        message: str | dict[str, Any],
    ) -> None:
        """Send message to a list of connections; remove dead ones under lock."""
        results = await asyncio.gather(
            *(self._send_one(ws, message) for ws in connections),
            return_exceptions=True,
        )
        dead = [
            ws for ws, result in zip(connections, results) if isinstance(result, Exception)
        ]
        if dead:
            logger.debug("Dropping %d dead or slow WebSocket connection(s)", len(dead))
            async with self._lock:
                for ws in dead:
                    self._connections.discard(ws)

    async def get_connection_count(self) -> int:
        """Return the number of active connections (lock-safe)."""
        async with self._lock:
            return len(self._connections)

"""WebSocket connection manager.

Used by the WebSocket endpoint to register clients and by the EventBus to broadcast.
"""

from taskboard.api.websocket.manager import ConnectionManager

__all__ = ["ConnectionManager"]

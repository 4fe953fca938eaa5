"""WebSocket endpoint: one /ws channel that receives every pushed event.

The channel is unauthenticated and unscoped; events concerning a single
user carry userId and clients filter on it. Nothing is replayed on
connect; clients re-fetch over REST after (re)connecting.
"""

import logging

from fastapi import APIRouter, Request, WebSocket, WebSocketDisconnect, status

from taskboard.schemas.websocket import WebSocketStatusResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    """Register the connection with the manager and hold it open until the client leaves.

    Connection manager is on app.state.ws_manager (set in lifespan).
    Incoming messages are read and discarded. Before startup has attached
    the manager the socket is closed with 1013 (try again later).
    """
    manager = websocket.app.state.ws_manager
    if manager is None:
        await websocket.close(code=status.WS_1013_TRY_AGAIN_LATER)
        return
    await manager.connect(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.debug("WebSocket client disconnected")
    finally:
        await manager.disconnect(websocket)


@router.get("/ws/status", response_model=WebSocketStatusResponse)
async def websocket_status(request: Request) -> WebSocketStatusResponse:
    """Return the number of connected clients and whether the event bus is live."""
    event_bus = request.app.state.event_bus
    return WebSocketStatusResponse(
        total_connections=await event_bus.subscriber_count(),
        event_bus_ready=event_bus.is_initialized,
    )

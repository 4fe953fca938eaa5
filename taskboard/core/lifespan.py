"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, tables, the WebSocket
manager and the EventBus transport, DB engine dispose. No business logic.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from taskboard.api.websocket import ConnectionManager
from taskboard.core.config import get_settings
from taskboard.infrastructure.persistence.database import create_tables, dispose_engine
from taskboard.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, tables (if database_auto_create), WebSocket
    manager attached to app.state.event_bus. Until the transport is attached,
    publishes fail with EventBusNotInitializedError (swallowed by services).
    Shutdown order: detach transport, dispose SQL engine.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if settings.database_auto_create:
        await create_tables()

    manager = ConnectionManager(send_timeout=settings.ws_send_timeout_seconds)
    app.state.ws_manager = manager
    app.state.event_bus.attach(manager)
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    app.state.event_bus.detach()
    app.state.ws_manager = None
    await dispose_engine()
    logger.info("%s stopped", settings.app_name)

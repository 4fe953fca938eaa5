"""API v1: REST routes and WebSocket endpoint."""

from taskboard.api.v1.router import api_router

__all__ = ["api_router"]

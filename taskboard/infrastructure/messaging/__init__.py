"""Messaging: in-process event bus over the real-time transport."""

from taskboard.infrastructure.messaging.event_bus import EventBus

__all__ = ["EventBus"]

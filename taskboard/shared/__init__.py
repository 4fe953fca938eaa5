"""Shared utilities: actor context, telemetry, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from taskboard.shared.context import ActorContext
from taskboard.shared.utils import (
    ensure_utc,
    generate_cuid,
    parse_iso_datetime,
    utc_now,
)

__all__ = [
    "ActorContext",
    "ensure_utc",
    "generate_cuid",
    "parse_iso_datetime",
    "utc_now",
]

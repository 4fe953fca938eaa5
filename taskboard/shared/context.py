"""Authenticated actor context.

ActorContext is built once per request by the authentication dependency
(from verified token claims) and passed explicitly into every service call.
Nothing reads it from ambient state.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ActorContext:
    """Immutable identity of the user performing an operation."""

    user_id: str
    email: str | None = None

    def __post_init__(self) -> None:
        if not self.user_id:
            raise ValueError("ActorContext requires a non-empty user_id")

"""Request ID middleware.

Forwards a client-supplied request ID (or mints one) and echoes it on the
response so log lines for one mutation can be correlated. Client values
are sanitized to keep them safe for logging. Raw ASGI; WebSocket scopes
pass through untouched.
"""

import re
import uuid
from typing import Any, Callable

from starlette.requests import Request

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def _header_value(scope: dict[str, Any], name: str) -> str | None:
    want = name.lower().encode()
    for key, value in scope.get("headers", []):
        if key.lower() == want:
            return value.decode("utf-8", errors="replace")
    return None


def _sanitize(raw: str | None) -> str:
    """Keep raw if it is a safe identifier; otherwise mint a UUID4."""
    if raw and REQUEST_ID_ALLOWED_PATTERN.match(raw.strip()):
        return raw.strip()
    return uuid.uuid4().hex


def get_request_id(request: Request) -> str | None:
    """Return the request ID stored by RequestIDMiddleware, if any."""
    return getattr(request.state, "request_id", None)


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Attach a request ID to scope state and to the response headers."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = _sanitize(_header_value(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_name.encode(), request_id.encode()),
                ]
            await send(message)

        await app(scope, receive, send_with_id)

    return asgi_app

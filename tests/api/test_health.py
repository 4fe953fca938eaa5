"""Health and push-channel status endpoints."""

import pytest

from taskboard import __version__


@pytest.mark.asyncio
async def test_health(client) -> None:
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["version"] == __version__
    assert "x-request-id" in response.headers


@pytest.mark.asyncio
async def test_request_id_is_echoed(client) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["x-request-id"] == "abc123"


@pytest.mark.asyncio
async def test_ws_status_reports_bus(client) -> None:
    response = await client.get("/api/v1/ws/status")
    assert response.status_code == 200
    assert response.json() == {"total_connections": 0, "event_bus_ready": True}

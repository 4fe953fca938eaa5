"""Notification endpoints: listing, read state, ownership."""

import pytest

from tests.fakes import ALICE_ID, BOB_ID

pytestmark = [pytest.mark.requires_db, pytest.mark.usefixtures("users")]

TASK_BODY = {
    "description": "details",
    "dueDate": "2030-03-01T12:00:00Z",
    "priority": "MEDIUM",
    "assignedToId": BOB_ID,
}


async def _assign_to_bob(client, auth_headers, *titles: str) -> None:
    for title in titles:
        response = await client.post(
            "/api/v1/tasks", json={**TASK_BODY, "title": title}, headers=auth_headers(ALICE_ID)
        )
        assert response.status_code == 201


@pytest.mark.asyncio
async def test_notifications_require_authentication(client) -> None:
    assert (await client.get("/api/v1/notifications")).status_code == 401
    assert (await client.patch("/api/v1/notifications/read-all")).status_code == 401


@pytest.mark.asyncio
async def test_list_is_newest_first(client, auth_headers) -> None:
    await _assign_to_bob(client, auth_headers, "first", "second")

    response = await client.get("/api/v1/notifications", headers=auth_headers(BOB_ID))

    messages = [n["message"] for n in response.json()]
    assert messages == [
        "You have been assigned a new task: second",
        "You have been assigned a new task: first",
    ]


@pytest.mark.asyncio
async def test_mark_as_read_is_idempotent(client, auth_headers) -> None:
    await _assign_to_bob(client, auth_headers, "first")
    bob = auth_headers(BOB_ID)
    [notification] = (await client.get("/api/v1/notifications", headers=bob)).json()

    for _ in range(2):
        response = await client.patch(
            f"/api/v1/notifications/{notification['id']}/read", headers=bob
        )
        assert response.status_code == 200
        assert response.json()["isRead"] is True

    listed = await client.get("/api/v1/notifications", headers=bob)
    assert listed.headers["x-unread-count"] == "0"


@pytest.mark.asyncio
async def test_mark_as_read_by_non_owner_is_forbidden(client, auth_headers) -> None:
    await _assign_to_bob(client, auth_headers, "first")
    [notification] = (
        await client.get("/api/v1/notifications", headers=auth_headers(BOB_ID))
    ).json()

    response = await client.patch(
        f"/api/v1/notifications/{notification['id']}/read", headers=auth_headers(ALICE_ID)
    )

    assert response.status_code == 403
    listed = await client.get("/api/v1/notifications", headers=auth_headers(BOB_ID))
    assert listed.json()[0]["isRead"] is False


@pytest.mark.asyncio
async def test_mark_unknown_notification_is_404(client, auth_headers) -> None:
    response = await client.patch(
        "/api/v1/notifications/nope/read", headers=auth_headers(BOB_ID)
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_mark_all_as_read(client, auth_headers) -> None:
    await _assign_to_bob(client, auth_headers, "first", "second", "third")
    bob = auth_headers(BOB_ID)

    first = await client.patch("/api/v1/notifications/read-all", headers=bob)
    second = await client.patch("/api/v1/notifications/read-all", headers=bob)

    assert first.status_code == 200
    assert first.json() == {"updated": 3}
    assert second.json() == {"updated": 0}
    listed = await client.get("/api/v1/notifications", headers=bob)
    assert all(n["isRead"] for n in listed.json())
    assert listed.headers["x-unread-count"] == "0"

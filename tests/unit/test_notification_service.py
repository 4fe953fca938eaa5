"""NotificationService unit tests with a mocked repository."""

from dataclasses import replace
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from taskboard.application.dtos.notification import NotificationResult
from taskboard.application.use_cases.notifications import NotificationService
from taskboard.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from taskboard.shared.context import ActorContext

BOB = ActorContext(user_id="bob")


def _notification(is_read: bool = False, user_id: str = "bob") -> NotificationResult:
    return NotificationResult(
        id="n1",
        user_id=user_id,
        message="You have been assigned a new task: Write report",
        is_read=is_read,
        created_at=datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def notification_mocks():
    repo = AsyncMock()
    return NotificationService(repo), repo


@pytest.mark.asyncio
async def test_create_delegates_to_repo(notification_mocks) -> None:
    svc, repo = notification_mocks
    repo.create = AsyncMock(return_value=_notification())

    result = await svc.create("bob", "hello")

    repo.create.assert_awaited_once_with("bob", "hello")
    assert result.is_read is False


@pytest.mark.asyncio
@pytest.mark.parametrize(("user_id", "message"), [("", "hello"), ("bob", ""), ("bob", "  ")])
async def test_create_rejects_empty_values(notification_mocks, user_id, message) -> None:
    svc, repo = notification_mocks

    with pytest.raises(ValidationException):
        await svc.create(user_id, message)

    repo.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_list_by_user_uses_actor(notification_mocks) -> None:
    svc, repo = notification_mocks
    repo.list_by_user = AsyncMock(return_value=[_notification()])

    result = await svc.list_by_user(BOB)

    repo.list_by_user.assert_awaited_once_with("bob")
    assert len(result) == 1


@pytest.mark.asyncio
async def test_mark_as_read_unknown_id(notification_mocks) -> None:
    svc, repo = notification_mocks
    repo.get_by_id = AsyncMock(return_value=None)

    with pytest.raises(ResourceNotFoundException):
        await svc.mark_as_read(BOB, "missing")

    repo.mark_as_read.assert_not_awaited()


@pytest.mark.asyncio
async def test_mark_as_read_by_non_owner_is_forbidden(notification_mocks) -> None:
    svc, repo = notification_mocks
    repo.get_by_id = AsyncMock(return_value=_notification())

    with pytest.raises(AuthorizationException):
        await svc.mark_as_read(ActorContext(user_id="alice"), "n1")

    repo.mark_as_read.assert_not_awaited()


@pytest.mark.asyncio
async def test_mark_as_read_flips_unread(notification_mocks) -> None:
    svc, repo = notification_mocks
    unread = _notification()
    repo.get_by_id = AsyncMock(return_value=unread)
    repo.mark_as_read = AsyncMock(return_value=replace(unread, is_read=True))

    result = await svc.mark_as_read(BOB, "n1")

    assert result.is_read is True
    repo.mark_as_read.assert_awaited_once_with("n1")


@pytest.mark.asyncio
async def test_mark_as_read_already_read_is_noop(notification_mocks) -> None:
    svc, repo = notification_mocks
    repo.get_by_id = AsyncMock(return_value=_notification(is_read=True))

    result = await svc.mark_as_read(BOB, "n1")

    assert result.is_read is True
    repo.mark_as_read.assert_not_awaited()


@pytest.mark.asyncio
async def test_mark_all_as_read_returns_count(notification_mocks) -> None:
    svc, repo = notification_mocks
    repo.mark_all_as_read = AsyncMock(return_value=3)

    assert await svc.mark_all_as_read(BOB) == 3
    repo.mark_all_as_read.assert_awaited_once_with("bob")

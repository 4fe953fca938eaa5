"""Pytest configuration and fixtures for taskboard.

Environment is set before taskboard is imported so Settings validation
passes. Repository and API tests run against an in-memory SQLite database
(aiosqlite + StaticPool, one shared connection per test). API tests call
the ASGI app through httpx without running the lifespan, so the test
attaches a RecordingTransport to the app's EventBus itself.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-taskboard")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("DATABASE_AUTO_CREATE", "true")

from collections.abc import AsyncIterator, Callable  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from taskboard.infrastructure.persistence import models  # noqa: E402,F401
from taskboard.infrastructure.persistence.database import (  # noqa: E402
    Base,
    enable_sqlite_foreign_keys,
    get_db,
)
from taskboard.infrastructure.persistence.models import User  # noqa: E402
from taskboard.main import create_app  # noqa: E402
from tests.fakes import (  # noqa: E402
    ALICE_ID,
    BOB_ID,
    CAROL_ID,
    RecordingTransport,
    make_token,
)


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Fresh in-memory database with all tables."""
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(eng)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Database session for repository tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def users(session_factory: async_sessionmaker[AsyncSession]) -> dict[str, User]:
    """Seed alice, bob and carol (users are owned by the auth service in production)."""
    seeded = {
        "alice": User(id=ALICE_ID, name="Alice", email="alice@example.com"),
        "bob": User(id=BOB_ID, name="Bob", email="bob@example.com"),
        "carol": User(id=CAROL_ID, name="Carol", email="carol@example.com"),
    }
    async with session_factory() as session:
        session.add_all(seeded.values())
        await session.commit()
    return seeded


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def app(
    session_factory: async_sessionmaker[AsyncSession],
    transport: RecordingTransport,
) -> FastAPI:
    """App with get_db bound to the test database and a recording event transport."""
    application = create_app()

    async def _get_test_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_db] = _get_test_db
    application.state.event_bus.attach(transport)
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers() -> Callable[[str], dict[str, str]]:
    """Return a factory: user id -> Authorization header with a valid token."""

    def _headers(user_id: str) -> dict[str, str]:
        token = make_token({"sub": user_id, "email": f"{user_id}@example.com"})
        return {"Authorization": f"Bearer {token}"}

    return _headers

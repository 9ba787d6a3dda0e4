"""Shared test fixtures.

Every test gets a fresh in-memory SQLite database with the schema created
from the ORM models and the challenge catalogue seeded. Redis is not
initialized, so rate limiting and event publishing are pass-through.

On in-memory SQLite a session owns the single connection until it closes,
so a test uses either `store` or `client`, never both.
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ["FC_DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["FC_LOG_FORMAT"] = "console"
os.environ["FC_LOG_LEVEL"] = "WARNING"

from fitchallenge.challenges.seed import seed_challenges  # noqa: E402
from fitchallenge.config import get_settings  # noqa: E402
from fitchallenge.database import close_db, get_session, init_db  # noqa: E402
from fitchallenge.main import create_app  # noqa: E402
from fitchallenge.store import SqlEntityStore  # noqa: E402


async def _start_database(url: str) -> None:
    await init_db(url, create_tables=True)
    sessions = get_session()
    await seed_challenges(SqlEntityStore(await anext(sessions)))
    await sessions.aclose()


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[None, None]:
    """Fresh schema + seeded challenges for one test."""
    get_settings.cache_clear()
    await _start_database(get_settings().database_url)
    yield
    await close_db()


@pytest_asyncio.fixture
async def store(database: None) -> AsyncGenerator[SqlEntityStore, None]:
    """Entity store on a direct session, for service-level tests."""
    sessions = get_session()
    yield SqlEntityStore(await anext(sessions))
    await sessions.aclose()


@pytest_asyncio.fixture
async def client(database: None) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP test client against the app (lifespan not run)."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture(params=["memory", "file"])
async def sqlite_client(request: pytest.FixtureRequest, tmp_path: Path) -> AsyncGenerator[AsyncClient, None]:
    """Client on in-memory SQLite (one shared connection) or a file database (pooled connections)."""
    if request.param == "memory":
        url = "sqlite+aiosqlite:///:memory:"
    else:
        url = f"sqlite+aiosqlite:///{tmp_path / 'fitchallenge.db'}"
    await _start_database(url)
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await close_db()

"""Async SQLAlchemy engine and session management."""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import nullcontext
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from fitchallenge.db.base import Base

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None
# Only set for single-connection databases: one session owns the connection at a time.
_connection_lock: asyncio.Lock | None = None


def is_sqlite_memory(url: str) -> bool:
    """True for in-memory SQLite URLs, which live on a single connection."""
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and (
        parsed.database in (None, "", ":memory:") or parsed.query.get("mode") == "memory"
    )


def _engine_options(url: str) -> dict[str, Any]:
    """Pool options per backend. In-memory SQLite shares one connection."""
    if is_sqlite_memory(url):
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    if url.startswith("sqlite"):
        return {"connect_args": {"timeout": 30}}
    options: dict[str, Any] = {
        "pool_size": 20,
        "max_overflow": 10,
        "pool_pre_ping": True,
    }
    if "+asyncpg" in url:
        options["connect_args"] = {"statement_cache_size": 0}
    return options


def _serialize_sqlite_writers(engine: AsyncEngine) -> None:
    """Start every SQLite transaction with BEGIN IMMEDIATE.

    SQLite has no row locks and FOR UPDATE compiles to nothing. Taking the
    database write lock when the transaction starts makes each locked
    read-modify-write run alone, across connections and processes.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection: Any, _record: Any) -> None:  # noqa: ANN401
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn: Any) -> None:  # noqa: ANN401
        conn.exec_driver_sql("BEGIN IMMEDIATE")


async def init_db(url: str, create_tables: bool = False) -> None:
    """Initialize the database engine and session factory."""
    global _engine, _session_factory, _connection_lock  # noqa: PLW0603
    _engine = create_async_engine(url, echo=False, **_engine_options(url))
    if url.startswith("sqlite"):
        _serialize_sqlite_writers(_engine)
    _connection_lock = asyncio.Lock() if is_sqlite_memory(url) else None
    _session_factory = async_sessionmaker(
        _engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    if create_tables:
        async with _engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose of the database engine."""
    global _engine, _session_factory, _connection_lock  # noqa: PLW0603
    if _engine:
        await _engine.dispose()
        _engine = None
        _session_factory = None
        _connection_lock = None


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session (FastAPI dependency)."""
    if _session_factory is None:
        msg = "Database not initialized. Call init_db() first."
        raise RuntimeError(msg)
    guard = _connection_lock if _connection_lock is not None else nullcontext()
    async with guard, _session_factory() as session:
        yield session

"""Shared FastAPI dependencies."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fitchallenge.database import get_session
from fitchallenge.store import EntityStore, SqlEntityStore


async def get_store(
    db: AsyncSession = Depends(get_session),  # noqa: B008
) -> EntityStore:
    """Entity store bound to the request's session.

    Handlers get the store passed in explicitly; the session (and any
    uncommitted work on it) is closed by get_session when the request ends.
    """
    return SqlEntityStore(db)

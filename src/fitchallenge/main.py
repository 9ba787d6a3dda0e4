"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from fitchallenge.activity.router import router as activity_router
from fitchallenge.challenges.router import router as challenges_router
from fitchallenge.challenges.seed import seed_challenges
from fitchallenge.config import get_settings
from fitchallenge.database import close_db, get_session, init_db
from fitchallenge.errors import PersistenceError
from fitchallenge.groups.router import router as groups_router
from fitchallenge.health.router import router as health_router
from fitchallenge.middleware import setup_middleware
from fitchallenge.redis_client import close_redis, init_redis
from fitchallenge.store import SqlEntityStore
from fitchallenge.submissions.router import router as submissions_router
from fitchallenge.users.router import router as users_router

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle."""
    settings = get_settings()
    await init_db(settings.database_url, create_tables=settings.create_tables)
    await init_redis(settings.redis_url)

    if settings.seed_challenges:
        try:
            sessions = get_session()
            await seed_challenges(SqlEntityStore(await anext(sessions)))
            await sessions.aclose()
        except PersistenceError:
            logger.warning("challenge_seeding_failed", exc_info=True)

    yield

    await close_db()
    await close_redis()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Fit Challenge API",
        description="Backend API for daily fitness challenges, streaks, groups and weekly rankings",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)
    app.include_router(health_router, tags=["Health"])
    app.include_router(users_router)
    app.include_router(challenges_router)
    app.include_router(submissions_router)
    app.include_router(groups_router)
    app.include_router(activity_router)

    return app


app = create_app()

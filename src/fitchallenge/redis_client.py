"""Redis connection pool and best-effort event publishing."""

from __future__ import annotations

import json
from typing import Any

import redis.asyncio as redis
import structlog
from redis.exceptions import RedisError

logger = structlog.get_logger()

_pool: redis.Redis | None = None


async def init_redis(url: str) -> None:
    """Initialize the Redis connection pool."""
    global _pool  # noqa: PLW0603
    _pool = redis.from_url(  # type: ignore[no-untyped-call]
        url,
        encoding="utf-8",
        decode_responses=True,
        max_connections=50,
    )


async def close_redis() -> None:
    """Close the Redis connection pool."""
    global _pool  # noqa: PLW0603
    if _pool:
        await _pool.aclose()
        _pool = None


def get_optional_redis() -> redis.Redis | None:
    """Get the Redis client, or None when it was never initialized."""
    return _pool


async def publish_event(channel: str, payload: dict[str, Any]) -> bool:
    """Publish a JSON event on a pub/sub channel.

    Delivery is best-effort: a missing or unreachable Redis is logged and
    reported as False, never raised to the caller.
    """
    client = get_optional_redis()
    if client is None:
        return False
    try:
        await client.publish(channel, json.dumps(payload, default=str))
    except (RedisError, OSError):
        logger.warning("event_publish_failed", channel=channel, exc_info=True)
        return False
    return True

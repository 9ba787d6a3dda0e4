"""Built-in challenge catalogue, inserted on first start."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from fitchallenge.db.models import Challenge

if TYPE_CHECKING:
    from fitchallenge.store import EntityStore

logger = logging.getLogger(__name__)

CHALLENGE_SEED_DATA: list[dict] = [
    {
        "day": 1,
        "title": "10-Second Plank Challenge",
        "description": "Hold a basic plank for 10 seconds to build core strength.",
        "video_url": "https://www.youtube.com/embed/MHcmC5QeIN8",
        "duration": "1 min",
        "difficulty": 1,
        "points": 100,
        "is_active": True,
    },
    {
        "day": 2,
        "title": "20 Squats Challenge",
        "description": "Complete 20 squats to build lower-body strength.",
        "video_url": "https://www.youtube.com/embed/GbqgaOhIizc",
        "duration": "3 min",
        "difficulty": 2,
        "points": 150,
        "is_active": True,
    },
    {
        "day": 3,
        "title": "30-Second Jumping Jacks",
        "description": "Do jumping jacks for 30 seconds for a full-body cardio burst.",
        "video_url": "https://www.youtube.com/embed/3iN33mGIdts",
        "duration": "2 min",
        "difficulty": 1,
        "points": 120,
        "is_active": True,
    },
]


async def seed_challenges(store: EntityStore) -> int:
    """Insert the catalogue when no challenges exist. Returns number inserted."""
    if await store.count_challenges() > 0:
        return 0

    now = datetime.now(timezone.utc)
    for data in CHALLENGE_SEED_DATA:
        await store.add_challenge(Challenge(**data, created_at=now))
    await store.commit()
    logger.info("Seeded %d challenges", len(CHALLENGE_SEED_DATA))
    return len(CHALLENGE_SEED_DATA)

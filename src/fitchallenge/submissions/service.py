"""Submission recording, listing, reactions and comments.

Rules:
- Type is one of video, photo, text, emoji; content is a non-empty string
  (a URL for uploaded media, inline text or emoji otherwise)
- Points are flat: 100 on success, 50 on failure (the challenge's own
  points field is not consulted)
- Recording and the stats update commit together
- Reactions and comments are appended; core fields never change
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

import structlog

from fitchallenge.activity.service import record_activity
from fitchallenge.db.models import Submission
from fitchallenge.errors import NotFoundError, ValidationError
from fitchallenge.gamification.stats import points_for
from fitchallenge.gamification.stats_service import apply_result
from fitchallenge.redis_client import publish_event

if TYPE_CHECKING:
    from fitchallenge.store import EntityStore

logger = structlog.get_logger()

SUBMISSION_TYPES = ("video", "photo", "text", "emoji")
REACTION_KINDS = ("heart", "fire", "clap")


async def record_submission(
    store: EntityStore,
    user_id: int,
    challenge_id: int,
    challenge_day: int,
    submission_type: str,
    content: str,
    is_success: bool,
    group_id: int | None = None,
) -> Submission:
    """
    Persist a challenge attempt and fold its result into the user's stats.

    Raises:
        ValidationError: Unknown type or empty content.
        NotFoundError: User, challenge or given group does not exist.
    """
    if submission_type not in SUBMISSION_TYPES:
        msg = f"type must be one of: {', '.join(SUBMISSION_TYPES)}"
        raise ValidationError(msg)
    if not content or not content.strip():
        msg = "content is required"
        raise ValidationError(msg)

    if await store.get_user(user_id) is None:
        raise NotFoundError("User", user_id)
    challenge = await store.get_challenge(challenge_id)
    if challenge is None:
        raise NotFoundError("Challenge", challenge_id)
    if group_id is not None and await store.get_group(group_id) is None:
        raise NotFoundError("Group", group_id)

    points = points_for(is_success)
    submission = await store.add_submission(Submission(
        user_id=user_id,
        challenge_id=challenge_id,
        challenge_day=challenge_day,
        type=submission_type,
        content=content,
        is_success=is_success,
        points=points,
        group_id=group_id,
        reactions=[],
        comments=[],
        created_at=datetime.now(timezone.utc),
    ))

    verdict = "completed" if is_success else "attempted"
    await record_activity(
        store, user_id, "challenge_completed",
        f"Day {challenge_day} {verdict}: {challenge.title}",
        related_id=str(challenge_id), group_id=group_id,
    )

    await apply_result(store, user_id, is_success, points, group_id=group_id)
    await store.commit()

    logger.info(
        "submission_recorded",
        submission_id=submission.id,
        user_id=user_id,
        challenge_id=challenge_id,
        is_success=is_success,
        points=points,
    )
    await publish_event("pubsub:submission", {
        "submission_id": submission.id,
        "user_id": user_id,
        "challenge_day": challenge_day,
        "is_success": is_success,
        "points": points,
        "group_id": group_id,
    })
    return submission


async def list_user_submissions(store: EntityStore, user_id: int) -> list[Submission]:
    """A user's submissions, newest first."""
    return await store.list_user_submissions(user_id)


async def list_group_submissions(store: EntityStore, group_id: int) -> list[Submission]:
    """Submissions tagged with a group, newest first."""
    if await store.get_group(group_id) is None:
        raise NotFoundError("Group", group_id)
    return await store.list_group_submissions(group_id)


async def _locked_submission(store: EntityStore, submission_id: int, user_id: int) -> Submission:
    submission = await store.lock_submission(submission_id)
    if submission is None:
        raise NotFoundError("Submission", submission_id)
    if await store.get_user(user_id) is None:
        raise NotFoundError("User", user_id)
    return submission


async def add_reaction(
    store: EntityStore,
    submission_id: int,
    user_id: int,
    kind: str,
) -> Submission:
    """Append a {userId, type} reaction to a submission."""
    if kind not in REACTION_KINDS:
        msg = f"reaction must be one of: {', '.join(REACTION_KINDS)}"
        raise ValidationError(msg)

    submission = await _locked_submission(store, submission_id, user_id)
    submission.reactions = [*(submission.reactions or []), {"userId": user_id, "type": kind}]
    await store.commit()
    return submission


async def add_comment(
    store: EntityStore,
    submission_id: int,
    user_id: int,
    text: str,
) -> Submission:
    """Append a timestamped comment to a submission."""
    if not text or not text.strip():
        msg = "comment content is required"
        raise ValidationError(msg)

    submission = await _locked_submission(store, submission_id, user_id)
    submission.comments = [
        *(submission.comments or []),
        {
            "userId": user_id,
            "content": text.strip(),
            "createdAt": datetime.now(timezone.utc).isoformat(),
        },
    ]
    await store.commit()
    return submission

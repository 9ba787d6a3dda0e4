"""Challenge catalogue endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fitchallenge.challenges.schemas import ChallengeResponse
from fitchallenge.challenges.service import get_challenge, get_challenge_by_day, list_challenges
from fitchallenge.dependencies import get_store
from fitchallenge.store import EntityStore

router = APIRouter(prefix="/api/challenges", tags=["Challenges"])


@router.get("", response_model=list[ChallengeResponse])
async def list_challenges_endpoint(
    store: EntityStore = Depends(get_store),
) -> list[ChallengeResponse]:
    challenges = await list_challenges(store)
    return [ChallengeResponse.model_validate(c) for c in challenges]


@router.get("/day/{day}", response_model=ChallengeResponse)
async def get_challenge_by_day_endpoint(
    day: int,
    store: EntityStore = Depends(get_store),
) -> ChallengeResponse:
    """The challenge scheduled for a program day."""
    challenge = await get_challenge_by_day(store, day)
    return ChallengeResponse.model_validate(challenge)


@router.get("/{challenge_id}", response_model=ChallengeResponse)
async def get_challenge_endpoint(
    challenge_id: int,
    store: EntityStore = Depends(get_store),
) -> ChallengeResponse:
    challenge = await get_challenge(store, challenge_id)
    return ChallengeResponse.model_validate(challenge)

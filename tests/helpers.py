"""API helpers shared by integration tests."""

from __future__ import annotations

from httpx import AsyncClient


async def create_user(client: AsyncClient, email: str = "runner@example.com", name: str = "Runner") -> dict:
    """Register a user through the API and return its JSON."""
    response = await client.post("/api/users", json={"email": email, "name": name})
    assert response.status_code == 200, response.text
    return response.json()


async def day_one_challenge(client: AsyncClient) -> dict:
    response = await client.get("/api/challenges/day/1")
    assert response.status_code == 200
    return response.json()


async def submit(
    client: AsyncClient,
    user_id: int,
    challenge: dict,
    is_success: bool = True,
    group_id: int | None = None,
) -> dict:
    """Record a text submission for a challenge and return its JSON."""
    body = {
        "userId": user_id,
        "challengeId": challenge["id"],
        "challengeDay": challenge["day"],
        "type": "text",
        "content": "done!",
        "isSuccess": is_success,
    }
    if group_id is not None:
        body["groupId"] = group_id
    response = await client.post("/api/submissions", json=body)
    assert response.status_code == 200, response.text
    return response.json()

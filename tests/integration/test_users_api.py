"""User endpoint tests."""

import pytest
from httpx import AsyncClient

from tests.helpers import create_user


@pytest.mark.asyncio
async def test_create_user_starts_fresh(client: AsyncClient) -> None:
    user = await create_user(client, "alice@example.com", "Alice")

    assert user["email"] == "alice@example.com"
    assert user["name"] == "Alice"
    assert user["currentDay"] == 1
    assert user["currentStreak"] == 0
    assert user["longestStreak"] == 0
    assert user["totalPoints"] == 0
    assert user["totalChallenges"] == 0
    assert user["successRate"] == 0
    assert user["badges"] == []
    assert user["groupIds"] == []
    assert user["createdAt"] is not None
    assert user["lastLoginAt"] is not None


@pytest.mark.asyncio
async def test_get_user_by_id(client: AsyncClient) -> None:
    user = await create_user(client)
    response = await client.get(f"/api/users/{user['id']}")
    assert response.status_code == 200
    assert response.json()["email"] == user["email"]


@pytest.mark.asyncio
async def test_get_user_by_email(client: AsyncClient) -> None:
    user = await create_user(client, "bob@example.com", "Bob")
    response = await client.get("/api/users/email/bob@example.com")
    assert response.status_code == 200
    assert response.json()["id"] == user["id"]


@pytest.mark.asyncio
async def test_unknown_user_is_404(client: AsyncClient) -> None:
    assert (await client.get("/api/users/424242")).status_code == 404
    response = await client.get("/api/users/email/nobody@example.com")
    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


@pytest.mark.asyncio
async def test_duplicate_email_rejected(client: AsyncClient) -> None:
    await create_user(client, "dup@example.com", "First")
    response = await client.post("/api/users", json={"email": "dup@example.com", "name": "Second"})
    assert response.status_code == 400
    assert "already exists" in response.json()["detail"]


@pytest.mark.asyncio
async def test_blank_name_rejected(client: AsyncClient) -> None:
    response = await client.post("/api/users", json={"email": "blank@example.com", "name": "   "})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_invalid_email_rejected(client: AsyncClient) -> None:
    response = await client.post("/api/users", json={"email": "not-an-email", "name": "X"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_user_partial(client: AsyncClient) -> None:
    user = await create_user(client)
    response = await client.put(
        f"/api/users/{user['id']}",
        json={"name": "Renamed", "currentDay": 3},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Renamed"
    assert data["currentDay"] == 3
    assert data["email"] == user["email"]
    assert data["totalPoints"] == 0


@pytest.mark.asyncio
async def test_update_ignores_aggregate_fields(client: AsyncClient) -> None:
    user = await create_user(client)
    response = await client.put(f"/api/users/{user['id']}", json={"totalPoints": 99999})
    assert response.status_code == 200
    assert response.json()["totalPoints"] == 0


@pytest.mark.asyncio
async def test_update_rejects_day_below_one(client: AsyncClient) -> None:
    user = await create_user(client)
    response = await client.put(f"/api/users/{user['id']}", json={"currentDay": 0})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_unknown_user_is_404(client: AsyncClient) -> None:
    response = await client.put("/api/users/424242", json={"name": "Ghost"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_record_login(client: AsyncClient) -> None:
    user = await create_user(client)
    response = await client.post(f"/api/users/{user['id']}/login")
    assert response.status_code == 200
    assert response.json()["lastLoginAt"] is not None


@pytest.mark.asyncio
async def test_record_login_unknown_user(client: AsyncClient) -> None:
    response = await client.post("/api/users/424242/login")
    assert response.status_code == 404

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import update

from bank.core.security import REFRESH_TOKEN
from bank.db.models import Session as SessionModel


@pytest.fixture()
async def login(client):
    await client.post(
        "/api/users",
        json={
            "username": "alice",
            "password": "secret123",
            "full_name": "Alice",
            "email": "alice@example.com",
        },
    )
    resp = await client.post("/api/users/login", json={"username": "alice", "password": "secret123"})
    return resp.json()


@pytest.mark.asyncio
@pytest.mark.integration
async def test_refresh_token_renews_access_token(client, login):
    resp = await client.post("/api/sessions", json={"refresh_token": login["refresh_token"]})

    assert resp.status_code == 200
    access_token = resp.json()["access_token"]
    accounts = await client.get("/api/accounts", headers={"Authorization": f"Bearer {access_token}"})
    assert accounts.status_code == 200


@pytest.mark.asyncio
@pytest.mark.integration
async def test_access_token_cannot_renew(client, login):
    resp = await client.post("/api/sessions", json={"refresh_token": login["access_token"]})

    assert resp.status_code == 401


@pytest.mark.asyncio
@pytest.mark.integration
async def test_unknown_session_is_unauthorized(client, app, login):
    token, _ = app.state.container.token_maker.create_token("alice", timedelta(minutes=5), REFRESH_TOKEN)

    resp = await client.post("/api/sessions", json={"refresh_token": token})

    assert resp.status_code == 401


@pytest.mark.asyncio
@pytest.mark.integration
async def test_blocked_session_is_forbidden(client, database, login):
    async with database.session() as session:
        await session.execute(
            update(SessionModel).where(SessionModel.id == login["session_id"]).values(is_blocked=True)
        )

    resp = await client.post("/api/sessions", json={"refresh_token": login["refresh_token"]})

    assert resp.status_code == 403


@pytest.mark.asyncio
@pytest.mark.integration
async def test_expired_session_is_forbidden(client, database, login):
    async with database.session() as session:
        await session.execute(
            update(SessionModel)
            .where(SessionModel.id == login["session_id"])
            .values(expires_at=datetime.now(timezone.utc) - timedelta(minutes=1))
        )

    resp = await client.post("/api/sessions", json={"refresh_token": login["refresh_token"]})

    assert resp.status_code == 403


@pytest.mark.asyncio
@pytest.mark.integration
async def test_missing_or_bad_bearer_is_unauthorized(client):
    missing = await client.get("/api/accounts")
    garbage = await client.get("/api/accounts", headers={"Authorization": "Bearer nope"})

    assert missing.status_code == 401
    assert garbage.status_code == 401

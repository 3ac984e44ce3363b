import pytest


def user_payload(username="alice", email=None, password="secret123"):
    return {
        "username": username,
        "password": password,
        "full_name": username.title(),
        "email": email or f"{username}@example.com",
    }


@pytest.mark.asyncio
@pytest.mark.integration
async def test_register_returns_user_and_tokens(client):
    resp = await client.post("/api/users", json=user_payload())

    assert resp.status_code == 201
    data = resp.json()
    assert data["user"]["username"] == "alice"
    assert data["user"]["email"] == "alice@example.com"
    assert "hashed_password" not in data["user"]
    assert data["access_token"]
    assert data["refresh_token"]
    assert data["token_type"] == "bearer"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_duplicate_username_and_email_conflict(client):
    assert (await client.post("/api/users", json=user_payload())).status_code == 201

    same_name = await client.post("/api/users", json=user_payload(email="other@example.com"))
    same_email = await client.post("/api/users", json=user_payload(username="alice2", email="alice@example.com"))

    assert same_name.status_code == 409
    assert same_email.status_code == 409


@pytest.mark.asyncio
@pytest.mark.integration
@pytest.mark.parametrize(
    "override",
    [
        {"username": "a!"},
        {"password": "short"},
        {"email": "not-an-email"},
        {"full_name": ""},
    ],
)
async def test_register_validates_fields(client, override):
    payload = {**user_payload(), **override}

    resp = await client.post("/api/users", json=payload)

    assert resp.status_code == 422


@pytest.mark.asyncio
@pytest.mark.integration
async def test_login(client):
    await client.post("/api/users", json=user_payload())

    ok = await client.post("/api/users/login", json={"username": "alice", "password": "secret123"})
    wrong = await client.post("/api/users/login", json={"username": "alice", "password": "secret124"})
    missing = await client.post("/api/users/login", json={"username": "nobody", "password": "secret123"})

    assert ok.status_code == 200
    assert ok.json()["user"]["username"] == "alice"
    assert wrong.status_code == 401
    assert missing.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_access_token_from_login_opens_protected_routes(client):
    await client.post("/api/users", json=user_payload())
    login = await client.post("/api/users/login", json={"username": "alice", "password": "secret123"})
    token = login.json()["access_token"]

    resp = await client.get("/api/accounts", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
@pytest.mark.integration
async def test_health(client):
    resp = await client.get("/api/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"

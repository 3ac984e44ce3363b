import pytest


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_and_get_account(client, seed, auth_headers):
    await seed.user("alice")

    created = await client.post("/api/accounts", json={"currency": "USD"}, headers=auth_headers("alice"))

    assert created.status_code == 201
    body = created.json()
    assert body["owner"] == "alice"
    assert body["balance"] == "0"
    assert body["currency"] == "USD"

    fetched = await client.get(f"/api/accounts/{body['id']}", headers=auth_headers("alice"))
    assert fetched.status_code == 200
    assert fetched.json()["id"] == body["id"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_account_rejections(client, seed, auth_headers):
    await seed.user("alice")
    headers = auth_headers("alice")
    await client.post("/api/accounts", json={"currency": "USD"}, headers=headers)

    duplicate = await client.post("/api/accounts", json={"currency": "USD"}, headers=headers)
    unsupported = await client.post("/api/accounts", json={"currency": "GBP"}, headers=headers)
    ghost_owner = await client.post("/api/accounts", json={"currency": "EUR"}, headers=auth_headers("ghost"))

    assert duplicate.status_code == 409
    assert unsupported.status_code == 400
    assert ghost_owner.status_code == 400


@pytest.mark.asyncio
@pytest.mark.integration
async def test_get_account_checks_owner(client, seed, auth_headers):
    await seed.user("alice")
    account = await seed.account("alice", "USD", "10")

    other = await client.get(f"/api/accounts/{account.id}", headers=auth_headers("bob"))
    missing = await client.get("/api/accounts/9999", headers=auth_headers("alice"))

    assert other.status_code == 401
    assert missing.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_accounts_is_paginated_and_scoped(client, seed, auth_headers):
    await seed.user("alice")
    await seed.user("bob")
    usd = await seed.account("alice", "USD")
    eur = await seed.account("alice", "EUR")
    rmb = await seed.account("alice", "RMB")
    await seed.account("bob", "USD")

    first = await client.get("/api/accounts?page_id=1&page_size=2", headers=auth_headers("alice"))
    second = await client.get("/api/accounts?page_id=2&page_size=2", headers=auth_headers("alice"))
    too_big = await client.get("/api/accounts?page_size=1000", headers=auth_headers("alice"))

    assert [a["id"] for a in first.json()] == [usd.id, eur.id]
    assert [a["id"] for a in second.json()] == [rmb.id]
    assert too_big.status_code == 422

from datetime import timedelta
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from bank.core.config import DatabaseSettings, SecuritySettings, Settings
from bank.db.models import Account as AccountModel
from bank.db.models import User as UserModel
from bank.infrastructure.database import Database
from bank.main import create_app
from bank.modules.accounts import Account
from bank.modules.accounts.service import AccountService

TEST_SECRET = "test-secret-key-0123456789"


class Seeder:
    """Writes fixture rows straight through the ORM."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def user(self, username: str) -> str:
        async with self.database.session() as session:
            session.add(
                UserModel(
                    username=username,
                    hashed_password="not-a-bcrypt-hash",
                    full_name=username.title(),
                    email=f"{username}@example.com",
                )
            )
        return username

    async def account(self, owner: str, currency: str = "USD", balance: str = "0") -> Account:
        async with self.database.session() as session:
            model = AccountModel(owner=owner, currency=currency, balance=balance)
            session.add(model)
            await session.flush()
            account_id = model.id
        return await self.get_account(account_id)

    async def get_account(self, account_id: int) -> Account:
        async with self.database.session() as session:
            return await AccountService.with_session(session).get_account(account_id)

    async def count(self, model) -> int:
        async with self.database.session() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return result.scalar_one()


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        environment="test",
        create_tables_on_startup=False,
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'bank.db'}"),
        security=SecuritySettings(secret_key=TEST_SECRET),
    )


@pytest.fixture()
async def app(settings) -> AsyncGenerator[FastAPI, None]:
    application = create_app(settings)
    container = application.state.container
    await container.database.create_all()
    yield application
    await container.shutdown()


@pytest.fixture()
def database(app) -> Database:
    return app.state.container.database


@pytest.fixture()
def seed(database) -> Seeder:
    return Seeder(database)


@pytest.fixture()
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture()
def auth_headers(app):
    """Build a bearer header for ``username`` without going through login."""
    token_maker = app.state.container.token_maker

    def _headers(username: str) -> dict[str, str]:
        token, _ = token_maker.create_token(username, timedelta(minutes=15))
        return {"Authorization": f"Bearer {token}"}

    return _headers

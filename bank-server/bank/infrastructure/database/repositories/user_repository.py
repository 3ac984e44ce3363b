"""SQLAlchemy implementation of the user repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bank.db.models import User as UserModel
from bank.modules.users.exceptions import EmailAlreadyExistsError, UsernameAlreadyExistsError
from bank.modules.users.models import User
from bank.modules.users.repository import UserRepository


class SqlUserRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def create_user(
        self,
        *,
        username: str,
        hashed_password: str,
        full_name: str,
        email: str,
    ) -> User:
        model = UserModel(
            username=username,
            hashed_password=hashed_password,
            full_name=full_name,
            email=email,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # lost a race with a concurrent registration
            await self._session.rollback()
            if await self.get_by_username(username) is not None:
                raise UsernameAlreadyExistsError(username) from exc
            raise EmailAlreadyExistsError(email) from exc
        await self._session.refresh(model)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: UserModel | None) -> User | None:
        if model is None:
            return None
        return User(
            username=model.username,
            full_name=model.full_name,
            email=model.email,
            hashed_password=model.hashed_password,
            password_changed_at=model.password_changed_at,
            created_at=model.created_at,
        )

"""Domain services for user registration and login."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from bank.core.security import hash_password, verify_password
from bank.infrastructure.database.repositories.user_repository import SqlUserRepository

from .exceptions import (
    EmailAlreadyExistsError,
    UserNotFoundError,
    UsernameAlreadyExistsError,
    WrongPasswordError,
)
from .models import User, UserCreateInput
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "UserService":
        return cls(SqlUserRepository(session))

    async def create_user(self, payload: UserCreateInput) -> User:
        if await self._repository.get_by_username(payload.username) is not None:
            raise UsernameAlreadyExistsError(payload.username)
        if await self._repository.get_by_email(payload.email) is not None:
            raise EmailAlreadyExistsError(payload.email)

        user = await self._repository.create_user(
            username=payload.username,
            hashed_password=hash_password(payload.password),
            full_name=payload.full_name,
            email=payload.email,
        )
        logger.info("User %s registered", user.username)
        return user

    async def get_user(self, username: str) -> User:
        user = await self._repository.get_by_username(username)
        if user is None:
            raise UserNotFoundError(username)
        return user

    async def check_password(self, username: str, password: str) -> User:
        user = await self.get_user(username)
        if not verify_password(password, user.hashed_password):
            logger.info("Failed login for %s", username)
            raise WrongPasswordError(username)
        return user

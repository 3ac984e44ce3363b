"""User related dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bank.modules.users.service import UserService

from .database import get_db_session


def get_user_service(db: AsyncSession = Depends(get_db_session)) -> UserService:
    return UserService.with_session(db)


__all__ = ["get_user_service"]

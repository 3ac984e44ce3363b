"""Account related dependency providers."""

from fastapi import Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from bank.infrastructure.database.repositories.account_repository import SqlAccountRepository
from bank.modules.accounts import Account, AccountNotFoundError
from bank.modules.accounts.service import AccountService

from .auth import get_current_username
from .database import get_db_session


def get_account_repository(db: AsyncSession = Depends(get_db_session)) -> SqlAccountRepository:
    return SqlAccountRepository(db)


def get_account_service(repository: SqlAccountRepository = Depends(get_account_repository)) -> AccountService:
    return AccountService(repository)


async def get_owned_account(
    account_id: int = Path(..., ge=1),
    username: str = Depends(get_current_username),
    service: AccountService = Depends(get_account_service),
) -> Account:
    """Load the account in the path and make sure the caller owns it."""
    try:
        account = await service.get_account(account_id)
    except AccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="account not found") from exc
    if account.owner != username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="account doesn't belong to the authenticated user",
        )
    return account


__all__ = [
    "get_account_repository",
    "get_account_service",
    "get_owned_account",
]

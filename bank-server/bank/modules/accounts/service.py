"""Domain services for account management."""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from bank.infrastructure.database.repositories.account_repository import SqlAccountRepository

from .exceptions import AccountNotFoundError, UnsupportedCurrencyError
from .models import Account, AccountListInput, Currency
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Encapsulates core account use cases."""

    def __init__(self, repository: AccountRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AccountService":
        return cls(SqlAccountRepository(session))

    async def create_account(self, owner: str, currency: str) -> Account:
        if not Currency.is_supported(currency):
            raise UnsupportedCurrencyError(currency)
        account = await self._repository.create_account(owner=owner, balance="0", currency=currency)
        logger.info("Account %s opened for %s in %s", account.id, owner, currency)
        return account

    async def get_account(self, account_id: int) -> Account:
        account = await self._repository.get_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    async def list_accounts(self, payload: AccountListInput) -> Sequence[Account]:
        return await self._repository.list_accounts(payload.owner, payload.page_size, payload.offset)

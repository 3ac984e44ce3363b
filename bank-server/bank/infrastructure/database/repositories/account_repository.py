"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bank.db.models import Account as AccountModel
from bank.modules.accounts.exceptions import CurrencyAlreadyExistsError, OwnerNotFoundError
from bank.modules.accounts.models import Account
from bank.modules.accounts.repository import AccountRepository


class SqlAccountRepository(AccountRepository):
    """Account repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, account_id: int) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def list_accounts(self, owner: str, limit: int, offset: int) -> Sequence[Account]:
        stmt = (
            select(AccountModel)
            .where(AccountModel.owner == owner)
            .order_by(AccountModel.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_account(self, *, owner: str, balance: str, currency: str) -> Account:
        model = AccountModel(owner=owner, balance=balance, currency=currency)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            if await self._owner_holds_currency(owner, currency):
                raise CurrencyAlreadyExistsError(currency) from exc
            raise OwnerNotFoundError(owner) from exc
        await self._session.refresh(model)
        return self._to_domain(model)

    async def lock_by_id(self, account_id: int) -> Account | None:
        # populate_existing: never trust a copy cached in the identity map
        stmt = (
            select(AccountModel)
            .where(AccountModel.id == account_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def set_balance(self, account_id: int, balance: str) -> Account | None:
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .values(balance=balance)
            .execution_options(synchronize_session="fetch")
            .returning(AccountModel)
        )
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalars().first())

    async def _owner_holds_currency(self, owner: str, currency: str) -> bool:
        stmt = select(AccountModel.id).where(
            AccountModel.owner == owner,
            AccountModel.currency == currency,
        )
        result = await self._session.execute(stmt)
        return result.first() is not None

    @staticmethod
    def _to_domain(model: AccountModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=model.id,
            owner=model.owner,
            balance=model.balance,
            currency=model.currency,
            created_at=model.created_at,
        )

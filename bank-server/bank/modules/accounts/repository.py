"""Repository protocol for accounts."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Account


class AccountRepository(Protocol):
    """Abstract repository interface for account persistence."""

    async def get_by_id(self, account_id: int) -> Account | None:
        ...

    async def list_accounts(self, owner: str, limit: int, offset: int) -> Sequence[Account]:
        ...

    async def create_account(self, *, owner: str, balance: str, currency: str) -> Account:
        ...

    async def lock_by_id(self, account_id: int) -> Account | None:
        """Read the current row and hold its mutation lock until the transaction ends."""
        ...

    async def set_balance(self, account_id: int, balance: str) -> Account | None:
        ...


class AccountReader(Protocol):
    """Read-only account lookup consumed by transfer validation."""

    async def get_account(self, account_id: int) -> Account:
        ...

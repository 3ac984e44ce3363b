"""Repository protocol for transfer records."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Transfer


class TransferRepository(Protocol):
    async def create(self, *, from_account_id: int, to_account_id: int, amount: str) -> Transfer:
        ...

    async def list_for_account(self, account_id: int, limit: int, offset: int) -> Sequence[Transfer]:
        """Transfers in which the account is either side, oldest first."""
        ...

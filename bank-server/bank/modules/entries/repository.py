"""Repository protocol for ledger entries."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Entry


class EntryRepository(Protocol):
    """Append-only storage of ledger lines."""

    async def create(self, *, account_id: int, amount: str) -> Entry:
        ...

    async def list_by_account(self, account_id: int, limit: int, offset: int) -> Sequence[Entry]:
        ...

"""Read side of the ledger."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from bank.infrastructure.database.repositories.entry_repository import SqlEntryRepository

from .models import Entry
from .repository import EntryRepository


class EntryService:
    def __init__(self, repository: EntryRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "EntryService":
        return cls(SqlEntryRepository(session))

    async def list_entries(self, account_id: int, limit: int = 10, offset: int = 0) -> Sequence[Entry]:
        return await self._repository.list_by_account(account_id, limit, offset)

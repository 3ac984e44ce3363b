"""SQLAlchemy implementation of the entry repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bank.db.models import Entry as EntryModel
from bank.modules.entries.models import Entry


class SqlEntryRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, *, account_id: int, amount: str) -> Entry:
        model = EntryModel(account_id=account_id, amount=amount)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def list_by_account(self, account_id: int, limit: int, offset: int) -> Sequence[Entry]:
        stmt = (
            select(EntryModel)
            .where(EntryModel.account_id == account_id)
            .order_by(EntryModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: EntryModel) -> Entry:
        return Entry(
            id=model.id,
            account_id=model.account_id,
            amount=model.amount,
            created_at=model.created_at,
        )

"""SQLAlchemy implementation of the transfer repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from bank.db.models import Transfer as TransferModel
from bank.modules.transfers.models import Transfer


class SqlTransferRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, *, from_account_id: int, to_account_id: int, amount: str) -> Transfer:
        model = TransferModel(
            from_account_id=from_account_id,
            to_account_id=to_account_id,
            amount=amount,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def list_for_account(self, account_id: int, limit: int, offset: int) -> Sequence[Transfer]:
        stmt = (
            select(TransferModel)
            .where(
                or_(
                    TransferModel.from_account_id == account_id,
                    TransferModel.to_account_id == account_id,
                )
            )
            .order_by(TransferModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: TransferModel) -> Transfer:
        return Transfer(
            id=model.id,
            from_account_id=model.from_account_id,
            to_account_id=model.to_account_id,
            amount=model.amount,
            created_at=model.created_at,
        )

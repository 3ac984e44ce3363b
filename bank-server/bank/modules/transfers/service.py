"""Transfer use cases exposed to the HTTP layer."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bank.infrastructure.database import Database
from bank.infrastructure.database.repositories.transfer_repository import SqlTransferRepository
from bank.modules.accounts.exceptions import AccountNotFoundError
from bank.modules.accounts.service import AccountService

from .errors import TransferError, TransferErrorKind
from .executor import TransferExecutor
from .models import Transfer, TransferRequest, TransferResult
from .repository import TransferRepository
from .validator import TransferValidator

logger = logging.getLogger(__name__)


class TransferService:
    """Runs the validator and, when it admits the request, the executor.

    Validation reads through a short-lived session that is closed before the
    executor opens its unit of work, so a request never holds two pooled
    connections at once. Every failure leaves as a :class:`TransferError`.
    """

    def __init__(self, database: Database, executor: Optional[TransferExecutor] = None) -> None:
        self._database = database
        self._executor = executor or TransferExecutor(database)

    async def transfer(self, request: TransferRequest) -> TransferResult:
        try:
            async with self._database.session() as session:
                validator = TransferValidator(AccountService.with_session(session))
                validated = await validator.validate(
                    request.username,
                    request.from_account_id,
                    request.to_account_id,
                    request.amount,
                )
        except AccountNotFoundError as exc:
            logger.info("Transfer rejected: account %s not found", exc)
            raise TransferError(TransferErrorKind.ACCOUNT_NOT_FOUND) from exc
        except SQLAlchemyError as exc:
            logger.exception("Account lookup failed during transfer validation")
            raise TransferError(TransferErrorKind.INTERNAL) from exc
        return await self._executor.execute(validated)


class TransferHistoryService:
    def __init__(self, repository: TransferRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "TransferHistoryService":
        return cls(SqlTransferRepository(session))

    async def list_transfers(self, account_id: int, limit: int = 10, offset: int = 0) -> Sequence[Transfer]:
        return await self._repository.list_for_account(account_id, limit, offset)

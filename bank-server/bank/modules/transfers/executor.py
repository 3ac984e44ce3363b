"""Atomic application of validated transfers."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bank.core.money import ZERO, add, format_amount, negate, parse_amount, subtract
from bank.infrastructure.database import Database
from bank.infrastructure.database.repositories.account_repository import SqlAccountRepository
from bank.infrastructure.database.repositories.entry_repository import SqlEntryRepository
from bank.infrastructure.database.repositories.transfer_repository import SqlTransferRepository
from bank.modules.accounts.models import Account

from .errors import TransferError, TransferErrorKind
from .models import TransferResult
from .validator import ValidatedTransfer

logger = logging.getLogger(__name__)


class TransferExecutor:
    """Applies a transfer inside one unit of work.

    Account rows are locked in ascending id order, whichever side of the
    transfer they are on, so two transfers over the same pair of accounts in
    opposite directions never wait on each other in a cycle. Balances are
    re-read under the lock; a debit that would go below zero aborts the whole
    unit of work.
    """

    def __init__(self, database: Database) -> None:
        self._database = database

    async def execute(self, transfer: ValidatedTransfer) -> TransferResult:
        if not isinstance(transfer, ValidatedTransfer):
            raise TypeError("TransferExecutor.execute expects a ValidatedTransfer")
        if not transfer.amount > ZERO:
            logger.warning(
                "Transfer %s -> %s refused: non-positive amount %s",
                transfer.from_account_id,
                transfer.to_account_id,
                transfer.amount,
            )
            raise TransferError(TransferErrorKind.NEGATIVE_AMOUNT)

        try:
            async with self._database.unit_of_work() as session:
                result = await self._apply(session, transfer)
        except TransferError:
            raise
        except IntegrityError as exc:
            logger.warning(
                "Transfer %s -> %s rolled back: account vanished",
                transfer.from_account_id,
                transfer.to_account_id,
            )
            raise TransferError(TransferErrorKind.ACCOUNT_NOT_FOUND) from exc
        except (SQLAlchemyError, InvalidOperation, ValueError) as exc:
            logger.exception(
                "Transfer %s -> %s failed",
                transfer.from_account_id,
                transfer.to_account_id,
            )
            raise TransferError(TransferErrorKind.INTERNAL) from exc

        logger.info(
            "Transfer %s committed: %s -> %s amount %s",
            result.transfer.id,
            result.transfer.from_account_id,
            result.transfer.to_account_id,
            result.transfer.amount,
        )
        return result

    async def _apply(self, session: AsyncSession, transfer: ValidatedTransfer) -> TransferResult:
        accounts = SqlAccountRepository(session)
        entries = SqlEntryRepository(session)
        transfers = SqlTransferRepository(session)

        from_id = transfer.from_account_id
        to_id = transfer.to_account_id
        amount = transfer.amount

        locked = await self._lock_accounts(accounts, sorted({from_id, to_id}))
        balances: dict[int, Decimal] = {
            account_id: parse_amount(account.balance) for account_id, account in locked.items()
        }

        debited = subtract(balances[from_id], amount)
        balances[from_id] = debited
        balances[to_id] = add(balances[to_id], amount)
        for account_id, balance in [(from_id, debited), *balances.items()]:
            if balance < ZERO:
                logger.warning(
                    "Transfer %s -> %s rolled back: account %s would go below zero",
                    from_id,
                    to_id,
                    account_id,
                )
                raise TransferError(TransferErrorKind.INSUFFICIENT_BALANCE)

        updated: dict[int, Account] = {}
        for account_id in sorted(balances):
            account = await accounts.set_balance(account_id, format_amount(balances[account_id]))
            if account is None:
                logger.warning("Transfer aborted: account %s no longer exists", account_id)
                raise TransferError(TransferErrorKind.ACCOUNT_NOT_FOUND)
            updated[account_id] = account

        from_entry = await entries.create(account_id=from_id, amount=format_amount(negate(amount)))
        to_entry = await entries.create(account_id=to_id, amount=format_amount(amount))
        record = await transfers.create(
            from_account_id=from_id,
            to_account_id=to_id,
            amount=format_amount(amount),
        )

        return TransferResult(
            transfer=record,
            from_account=updated[from_id],
            to_account=updated[to_id],
            from_entry=from_entry,
            to_entry=to_entry,
        )

    @staticmethod
    async def _lock_accounts(accounts: SqlAccountRepository, account_ids: list[int]) -> dict[int, Account]:
        locked: dict[int, Account] = {}
        for account_id in account_ids:
            account = await accounts.lock_by_id(account_id)
            if account is None:
                logger.warning("Transfer aborted: account %s no longer exists", account_id)
                raise TransferError(TransferErrorKind.ACCOUNT_NOT_FOUND)
            locked[account_id] = account
        return locked


__all__ = ["TransferExecutor"]

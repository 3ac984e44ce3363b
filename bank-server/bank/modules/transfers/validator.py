"""Pre-mutation admission checks for transfers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from bank.core.money import ZERO, parse_amount
from bank.modules.accounts.repository import AccountReader

from .errors import TransferError, TransferErrorKind

logger = logging.getLogger(__name__)

_ISSUED_BY_VALIDATOR = object()


@dataclass(slots=True, frozen=True)
class ValidatedTransfer:
    """A transfer that passed :class:`TransferValidator`.

    Only the validator can build one; the executor accepts nothing else.
    Anything built through ``__init__``, ``dataclasses.replace`` included,
    carries no issuer and is rejected.
    """

    from_account_id: int
    to_account_id: int
    amount: Decimal
    _issuer: object = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self._issuer is not _ISSUED_BY_VALIDATOR:
            raise TypeError("ValidatedTransfer instances are issued by TransferValidator.validate")

    @classmethod
    def _issue(cls, from_account_id: int, to_account_id: int, amount: Decimal) -> ValidatedTransfer:
        issued = object.__new__(cls)
        object.__setattr__(issued, "from_account_id", from_account_id)
        object.__setattr__(issued, "to_account_id", to_account_id)
        object.__setattr__(issued, "amount", amount)
        object.__setattr__(issued, "_issuer", _ISSUED_BY_VALIDATOR)
        return issued


class TransferValidator:
    """Read-only checks run, in a fixed order, before any money moves.

    Account lookups go through ``accounts`` and their errors propagate
    unchanged. The snapshot read here may be stale by the time the executor
    runs; the executor re-checks the balance under lock.
    """

    def __init__(self, accounts: AccountReader) -> None:
        self._accounts = accounts

    async def validate(
        self,
        username: str,
        from_account_id: int,
        to_account_id: int,
        amount: str,
    ) -> ValidatedTransfer:
        try:
            value = parse_amount(amount)
        except ValueError as exc:
            logger.info("Transfer rejected: invalid amount %r", amount)
            raise TransferError(TransferErrorKind.INVALID_AMOUNT) from exc

        if value <= ZERO:
            logger.info("Transfer rejected: non-positive amount %s", amount)
            raise TransferError(TransferErrorKind.NEGATIVE_AMOUNT)

        source = await self._accounts.get_account(from_account_id)
        if source.owner != username:
            logger.info("Transfer rejected: %s does not own account %s", username, from_account_id)
            raise TransferError(TransferErrorKind.INVALID_OWNER)

        try:
            balance = parse_amount(source.balance)
        except ValueError as exc:
            logger.error("Account %s holds an unreadable balance %r", source.id, source.balance)
            raise TransferError(TransferErrorKind.INTERNAL) from exc
        if balance < value:
            logger.info("Transfer rejected: account %s balance below %s", from_account_id, amount)
            raise TransferError(TransferErrorKind.INSUFFICIENT_BALANCE)

        destination = await self._accounts.get_account(to_account_id)
        if source.currency != destination.currency:
            logger.info(
                "Transfer rejected: currency mismatch %s %s vs %s %s",
                from_account_id,
                source.currency,
                to_account_id,
                destination.currency,
            )
            raise TransferError(TransferErrorKind.CURRENCY_MISMATCH)

        return ValidatedTransfer._issue(from_account_id, to_account_id, value)


__all__ = ["TransferValidator", "ValidatedTransfer"]

"""Closed set of transfer failure kinds."""

from __future__ import annotations

from enum import Enum


class TransferErrorKind(str, Enum):
    INVALID_AMOUNT = "invalid_amount"
    NEGATIVE_AMOUNT = "negative_amount"
    INVALID_OWNER = "invalid_owner"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    CURRENCY_MISMATCH = "currency_mismatch"
    ACCOUNT_NOT_FOUND = "account_not_found"
    INTERNAL = "internal"


_DEFAULT_MESSAGES: dict[TransferErrorKind, str] = {
    TransferErrorKind.INVALID_AMOUNT: "amount is not a valid decimal",
    TransferErrorKind.NEGATIVE_AMOUNT: "amount must be positive",
    TransferErrorKind.INVALID_OWNER: "from account doesn't belong to the authenticated user",
    TransferErrorKind.INSUFFICIENT_BALANCE: "insufficient balance",
    TransferErrorKind.CURRENCY_MISMATCH: "account currency mismatch",
    TransferErrorKind.ACCOUNT_NOT_FOUND: "account not found",
    TransferErrorKind.INTERNAL: "internal error",
}


class TransferError(Exception):
    """A transfer was rejected or could not be applied.

    ``kind`` is always one of :class:`TransferErrorKind`; callers dispatch on it
    rather than on the exception type or message.
    """

    def __init__(self, kind: TransferErrorKind, message: str | None = None) -> None:
        self.kind = TransferErrorKind(kind)
        self.message = message or _DEFAULT_MESSAGES[self.kind]
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"TransferError({self.kind.value!r}, {self.message!r})"

"""Translation of domain errors into HTTP responses."""

from __future__ import annotations

from fastapi import HTTPException, status

from bank.modules.transfers import TransferError, TransferErrorKind

TRANSFER_ERROR_STATUS: dict[TransferErrorKind, int] = {
    TransferErrorKind.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    TransferErrorKind.NEGATIVE_AMOUNT: status.HTTP_400_BAD_REQUEST,
    TransferErrorKind.INVALID_OWNER: status.HTTP_401_UNAUTHORIZED,
    TransferErrorKind.INSUFFICIENT_BALANCE: status.HTTP_400_BAD_REQUEST,
    TransferErrorKind.CURRENCY_MISMATCH: status.HTTP_400_BAD_REQUEST,
    TransferErrorKind.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    TransferErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def transfer_error_to_http(exc: TransferError) -> HTTPException:
    status_code = TRANSFER_ERROR_STATUS[exc.kind]
    if exc.kind is TransferErrorKind.INTERNAL:
        return HTTPException(status_code=status_code, detail="internal error")
    return HTTPException(status_code=status_code, detail=exc.message)


__all__ = ["TRANSFER_ERROR_STATUS", "transfer_error_to_http"]

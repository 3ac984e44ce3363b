"""Funds transfer core: validation, atomic execution and history.

Import the validator, executor and services from their own modules.
"""

from .errors import TransferError, TransferErrorKind
from .models import Transfer, TransferResult

__all__ = [
    "Transfer",
    "TransferError",
    "TransferErrorKind",
    "TransferResult",
]

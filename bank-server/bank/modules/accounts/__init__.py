"""Account domain models and errors.

Services live in ``bank.modules.accounts.service`` and are imported from there.
"""

from .exceptions import (
    AccountError,
    AccountNotFoundError,
    CurrencyAlreadyExistsError,
    OwnerNotFoundError,
    UnsupportedCurrencyError,
)
from .models import Account, AccountListInput, Currency

__all__ = [
    "Account",
    "AccountListInput",
    "Currency",
    "AccountError",
    "AccountNotFoundError",
    "CurrencyAlreadyExistsError",
    "OwnerNotFoundError",
    "UnsupportedCurrencyError",
]

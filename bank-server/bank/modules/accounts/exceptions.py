"""Account domain specific exceptions."""


class AccountError(Exception):
    """Base class for account domain errors."""


class AccountNotFoundError(AccountError):
    """Raised when the requested account cannot be found."""


class CurrencyAlreadyExistsError(AccountError):
    """Raised when the owner already holds an account in the requested currency."""


class OwnerNotFoundError(AccountError):
    """Raised when the account owner is not a registered user."""


class UnsupportedCurrencyError(AccountError):
    """Raised when the requested currency is not one the bank operates in."""

"""User domain models and errors.

Services live in ``bank.modules.users.service``.
"""

from .exceptions import (
    EmailAlreadyExistsError,
    UserError,
    UserNotFoundError,
    UsernameAlreadyExistsError,
    WrongPasswordError,
)
from .models import User, UserCreateInput

__all__ = [
    "User",
    "UserCreateInput",
    "UserError",
    "UsernameAlreadyExistsError",
    "EmailAlreadyExistsError",
    "UserNotFoundError",
    "WrongPasswordError",
]

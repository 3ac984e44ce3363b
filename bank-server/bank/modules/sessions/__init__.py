"""Login session models and errors.

Services live in ``bank.modules.sessions.service``.
"""

from .exceptions import (
    BlockedSessionError,
    ExpiredSessionError,
    InvalidRefreshTokenError,
    InvalidUserError,
    MismatchedRefreshTokenError,
    SessionError,
    SessionNotFoundError,
)
from .models import LoginSession, RenewedAccessToken, SessionTokens

__all__ = [
    "LoginSession",
    "RenewedAccessToken",
    "SessionTokens",
    "SessionError",
    "SessionNotFoundError",
    "BlockedSessionError",
    "InvalidUserError",
    "MismatchedRefreshTokenError",
    "ExpiredSessionError",
    "InvalidRefreshTokenError",
]

"""Session domain specific exceptions."""


class SessionError(Exception):
    """Base class for session errors."""


class SessionNotFoundError(SessionError):
    """Raised when no session matches the refresh token id."""


class BlockedSessionError(SessionError):
    """Raised when the session has been blocked."""


class InvalidUserError(SessionError):
    """Raised when the session belongs to a different user than the token."""


class MismatchedRefreshTokenError(SessionError):
    """Raised when the presented refresh token is not the one stored for the session."""


class ExpiredSessionError(SessionError):
    """Raised when the session is past its expiry time."""


class InvalidRefreshTokenError(SessionError):
    """Raised when the refresh token cannot be verified."""

"""User domain specific exceptions."""


class UserError(Exception):
    """Base class for user domain errors."""


class UsernameAlreadyExistsError(UserError):
    """Raised when the username is already registered."""


class EmailAlreadyExistsError(UserError):
    """Raised when another user already registered the email address."""


class UserNotFoundError(UserError):
    """Raised when no user has the given username."""


class WrongPasswordError(UserError):
    """Raised when the password does not match the stored hash."""

"""Password hashing and JWT helpers."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

ACCESS_TOKEN = "access"
REFRESH_TOKEN = "refresh"


class TokenError(Exception):
    """Base class for token verification failures."""


class InvalidTokenError(TokenError):
    """Raised when a token cannot be decoded or carries unexpected claims."""


class ExpiredTokenError(TokenError):
    """Raised when a token is past its expiry time."""


def hash_password(password: str) -> str:
    """Hash plain text password using bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain text password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


@dataclass(slots=True, frozen=True)
class TokenPayload:
    id: uuid.UUID
    username: str
    token_type: str
    issued_at: datetime
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class TokenMaker:
    """Issues and verifies signed tokens for a single secret."""

    secret_key: str
    algorithm: str = "HS256"

    def create_token(
        self,
        username: str,
        duration: timedelta,
        token_type: str = ACCESS_TOKEN,
    ) -> tuple[str, TokenPayload]:
        issued_at = datetime.now(timezone.utc).replace(microsecond=0)
        payload = TokenPayload(
            id=uuid.uuid4(),
            username=username,
            token_type=token_type,
            issued_at=issued_at,
            expires_at=issued_at + duration,
        )
        claims = {
            "jti": str(payload.id),
            "sub": payload.username,
            "type": payload.token_type,
            "iat": int(payload.issued_at.timestamp()),
            "exp": int(payload.expires_at.timestamp()),
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm), payload

    def verify_token(self, token: str, token_type: str = ACCESS_TOKEN) -> TokenPayload:
        try:
            claims = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise ExpiredTokenError("token has expired") from exc
        except JWTError as exc:
            raise InvalidTokenError("token is invalid") from exc

        username = claims.get("sub")
        if not username or claims.get("type") != token_type:
            raise InvalidTokenError("token is invalid")
        try:
            return TokenPayload(
                id=uuid.UUID(str(claims.get("jti"))),
                username=username,
                token_type=token_type,
                issued_at=datetime.fromtimestamp(claims["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidTokenError("token is invalid") from exc


__all__ = [
    "ACCESS_TOKEN",
    "REFRESH_TOKEN",
    "ExpiredTokenError",
    "InvalidTokenError",
    "TokenError",
    "TokenMaker",
    "TokenPayload",
    "hash_password",
    "verify_password",
]

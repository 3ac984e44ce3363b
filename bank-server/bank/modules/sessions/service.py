"""Access and refresh token issuance backed by stored sessions."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from bank.core.config import SecuritySettings
from bank.core.security import ACCESS_TOKEN, REFRESH_TOKEN, TokenError, TokenMaker, TokenPayload
from bank.infrastructure.database.repositories.session_repository import SqlSessionRepository

from .exceptions import (
    BlockedSessionError,
    ExpiredSessionError,
    InvalidRefreshTokenError,
    InvalidUserError,
    MismatchedRefreshTokenError,
    SessionNotFoundError,
)
from .models import RenewedAccessToken, SessionTokens
from .repository import SessionRepository

logger = logging.getLogger(__name__)


class SessionService:
    """Issues token pairs at login and renews access tokens from refresh tokens.

    The refresh token's ``jti`` doubles as the stored session id.
    """

    def __init__(
        self,
        repository: SessionRepository,
        token_maker: TokenMaker,
        settings: SecuritySettings,
    ) -> None:
        self._repository = repository
        self._token_maker = token_maker
        self._access_ttl = timedelta(minutes=settings.access_token_expire_minutes)
        self._refresh_ttl = timedelta(minutes=settings.refresh_token_expire_minutes)

    @classmethod
    def with_session(
        cls,
        session: AsyncSession,
        token_maker: TokenMaker,
        settings: SecuritySettings,
    ) -> "SessionService":
        return cls(SqlSessionRepository(session), token_maker, settings)

    async def create(self, username: str, user_agent: str = "", client_ip: str = "") -> SessionTokens:
        access_token, access_payload = self._token_maker.create_token(username, self._access_ttl, ACCESS_TOKEN)
        refresh_token, refresh_payload = self._token_maker.create_token(username, self._refresh_ttl, REFRESH_TOKEN)

        session = await self._repository.create(
            session_id=str(refresh_payload.id),
            username=username,
            refresh_token=refresh_token,
            user_agent=user_agent,
            client_ip=client_ip,
            expires_at=refresh_payload.expires_at,
        )
        logger.info("Session %s opened for %s", session.id, username)
        return SessionTokens(
            session_id=session.id,
            access_token=access_token,
            access_token_expires_at=access_payload.expires_at,
            refresh_token=refresh_token,
            refresh_token_expires_at=refresh_payload.expires_at,
        )

    async def renew_access_token(self, refresh_token: str) -> RenewedAccessToken:
        try:
            payload = self._token_maker.verify_token(refresh_token, REFRESH_TOKEN)
        except TokenError as exc:
            raise InvalidRefreshTokenError(str(exc)) from exc

        session = await self._repository.get(str(payload.id))
        if session is None:
            raise SessionNotFoundError(str(payload.id))
        if session.is_blocked:
            raise BlockedSessionError(session.id)
        if session.username != payload.username:
            raise InvalidUserError(session.id)
        if session.refresh_token != refresh_token:
            raise MismatchedRefreshTokenError(session.id)
        if datetime.now(timezone.utc) > session.expires_at:
            raise ExpiredSessionError(session.id)

        access_token, access_payload = self._token_maker.create_token(
            payload.username, self._access_ttl, ACCESS_TOKEN
        )
        return RenewedAccessToken(
            access_token=access_token,
            access_token_expires_at=access_payload.expires_at,
        )

    def verify_access_token(self, token: str) -> TokenPayload:
        """Return the payload of a valid access token; raises ``TokenError`` otherwise."""
        return self._token_maker.verify_token(token, ACCESS_TOKEN)

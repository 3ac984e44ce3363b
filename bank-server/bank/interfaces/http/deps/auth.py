"""Bearer token authentication."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bank.core.container import ApplicationContainer
from bank.core.security import ExpiredTokenError, TokenError
from bank.modules.sessions.service import SessionService

from .database import get_container, get_db_session

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_session_service(
    db: AsyncSession = Depends(get_db_session),
    container: ApplicationContainer = Depends(get_container),
) -> SessionService:
    return SessionService.with_session(db, container.token_maker, container.settings.security)


async def get_current_username(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    sessions: SessionService = Depends(get_session_service),
) -> str:
    """Resolve the authenticated username from the bearer access token."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="authorization header is not provided",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        payload = sessions.verify_access_token(credentials.credentials)
    except ExpiredTokenError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="access token has expired",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
    except TokenError as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid access token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
    return payload.username


__all__ = ["bearer_scheme", "get_current_username", "get_session_service"]

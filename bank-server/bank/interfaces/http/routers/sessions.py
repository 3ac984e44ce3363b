"""Access token renewal."""
from fastapi import APIRouter, Depends, HTTPException, status

from bank.interfaces.http.deps import get_session_service
from bank.modules.sessions import (
    BlockedSessionError,
    ExpiredSessionError,
    InvalidRefreshTokenError,
    InvalidUserError,
    MismatchedRefreshTokenError,
    SessionNotFoundError,
)
from bank.modules.sessions.service import SessionService
from bank.schemas import RenewAccessTokenRequest, RenewAccessTokenResponse

router = APIRouter()


@router.post("", response_model=RenewAccessTokenResponse, summary="Renew an access token")
async def renew_access_token(
    payload: RenewAccessTokenRequest,
    sessions: SessionService = Depends(get_session_service),
) -> RenewAccessTokenResponse:
    try:
        renewed = await sessions.renew_access_token(payload.refresh_token)
    except (InvalidRefreshTokenError, SessionNotFoundError) as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid refresh token") from exc
    except BlockedSessionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="blocked session") from exc
    except InvalidUserError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="incorrect session user") from exc
    except MismatchedRefreshTokenError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="mismatched session token") from exc
    except ExpiredSessionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="expired session") from exc

    return RenewAccessTokenResponse(
        access_token=renewed.access_token,
        access_token_expires_at=renewed.access_token_expires_at,
    )

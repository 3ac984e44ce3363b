"""User registration and login endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from bank.interfaces.http.deps import get_db_session, get_session_service, get_user_service
from bank.modules.sessions import SessionTokens
from bank.modules.sessions.service import SessionService
from bank.modules.users import (
    EmailAlreadyExistsError,
    User,
    UserCreateInput,
    UserNotFoundError,
    UsernameAlreadyExistsError,
    WrongPasswordError,
)
from bank.modules.users.service import UserService
from bank.schemas import LoginRequest, LoginResponse, UserCreate, UserResponse

router = APIRouter()


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else ""


def _login_response(tokens: SessionTokens, user: User) -> LoginResponse:
    return LoginResponse(
        session_id=tokens.session_id,
        access_token=tokens.access_token,
        access_token_expires_at=tokens.access_token_expires_at,
        refresh_token=tokens.refresh_token,
        refresh_token_expires_at=tokens.refresh_token_expires_at,
        user=UserResponse.model_validate(user),
    )


@router.post("", response_model=LoginResponse, status_code=status.HTTP_201_CREATED, summary="Register a user")
async def create_user(
    payload: UserCreate,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
    users: UserService = Depends(get_user_service),
    sessions: SessionService = Depends(get_session_service),
) -> LoginResponse:
    try:
        user = await users.create_user(
            UserCreateInput(
                username=payload.username,
                password=payload.password,
                full_name=payload.full_name,
                email=payload.email,
            )
        )
    except UsernameAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="username already exists") from exc
    except EmailAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="email already exists") from exc

    tokens = await sessions.create(
        user.username,
        user_agent=request.headers.get("user-agent", ""),
        client_ip=_client_ip(request),
    )
    await db.commit()
    return _login_response(tokens, user)


@router.post("/login", response_model=LoginResponse, summary="Log in and open a session")
async def login_user(
    payload: LoginRequest,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
    users: UserService = Depends(get_user_service),
    sessions: SessionService = Depends(get_session_service),
) -> LoginResponse:
    try:
        user = await users.check_password(payload.username, payload.password)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="user not found") from exc
    except WrongPasswordError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="incorrect password") from exc

    tokens = await sessions.create(
        user.username,
        user_agent=request.headers.get("user-agent", ""),
        client_ip=_client_ip(request),
    )
    await db.commit()
    return _login_response(tokens, user)

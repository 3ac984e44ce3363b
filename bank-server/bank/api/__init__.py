from fastapi import APIRouter

from bank.interfaces.http.routers import accounts, sessions, transfers, users


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(users.router, prefix="/users", tags=["users"])
    router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
    router.include_router(accounts.router, prefix="/accounts", tags=["accounts"])
    router.include_router(transfers.router, prefix="/transfers", tags=["transfers"])
    return router


__all__ = [
    "create_api_router",
]

"""Reusable FastAPI dependencies."""

from .account import get_account_service, get_owned_account
from .auth import get_current_username, get_session_service
from .database import get_container, get_database, get_db_session
from .transfer import get_transfer_history_service, get_transfer_service
from .user import get_user_service

__all__ = [
    "get_container",
    "get_database",
    "get_db_session",
    "get_account_service",
    "get_owned_account",
    "get_current_username",
    "get_session_service",
    "get_transfer_service",
    "get_transfer_history_service",
    "get_user_service",
]

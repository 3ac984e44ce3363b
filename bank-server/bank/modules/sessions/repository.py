"""Repository protocol for login sessions."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .models import LoginSession


class SessionRepository(Protocol):
    async def create(
        self,
        *,
        session_id: str,
        username: str,
        refresh_token: str,
        user_agent: str,
        client_ip: str,
        expires_at: datetime,
    ) -> LoginSession:
        ...

    async def get(self, session_id: str) -> LoginSession | None:
        ...

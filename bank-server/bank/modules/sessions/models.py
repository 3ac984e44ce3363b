"""Domain models for login sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class LoginSession:
    id: str
    username: str
    refresh_token: str = field(repr=False)
    user_agent: str
    client_ip: str
    is_blocked: bool
    expires_at: datetime
    created_at: Optional[datetime] = None


@dataclass(slots=True, frozen=True)
class SessionTokens:
    session_id: str
    access_token: str
    access_token_expires_at: datetime
    refresh_token: str
    refresh_token_expires_at: datetime


@dataclass(slots=True, frozen=True)
class RenewedAccessToken:
    access_token: str
    access_token_expires_at: datetime

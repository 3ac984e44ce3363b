"""SQLAlchemy implementation of the session repository."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bank.db.models import Session as SessionModel
from bank.modules.sessions.models import LoginSession


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlSessionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

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
        model = SessionModel(
            id=session_id,
            username=username,
            refresh_token=refresh_token,
            user_agent=user_agent,
            client_ip=client_ip,
            is_blocked=False,
            expires_at=expires_at,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def get(self, session_id: str) -> LoginSession | None:
        stmt = select(SessionModel).where(SessionModel.id == session_id)
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model else None

    @staticmethod
    def _to_domain(model: SessionModel) -> LoginSession:
        return LoginSession(
            id=model.id,
            username=model.username,
            refresh_token=model.refresh_token,
            user_agent=model.user_agent,
            client_ip=model.client_ip,
            is_blocked=model.is_blocked,
            expires_at=_as_utc(model.expires_at),
            created_at=_as_utc(model.created_at),
        )

"""Async SQLAlchemy engine, sessions and units of work."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from bank.core.config import DatabaseSettings
from bank.infrastructure.database.base import Base

logger = logging.getLogger(__name__)

# Connection execution option asking SQLite for the write lock at BEGIN time.
WRITE_LOCK_OPTION = "bank_write_lock"


def _configure_sqlite(engine: AsyncEngine, busy_timeout: float) -> None:
    """Let the engine, not the driver, emit BEGIN so a unit of work can take the write lock up front."""

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute(f"PRAGMA busy_timeout = {int(busy_timeout * 1000)}")
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn: Any) -> None:
        if conn.get_execution_options().get(WRITE_LOCK_OPTION):
            conn.exec_driver_sql("BEGIN IMMEDIATE")
        else:
            conn.exec_driver_sql("BEGIN")


def _build_engine(settings: DatabaseSettings, *, debug: bool = False) -> AsyncEngine:
    engine_kwargs: dict[str, Any] = {
        "echo": settings.echo or debug,
    }
    if settings.pool_size is not None:
        engine_kwargs["pool_size"] = settings.pool_size
    if settings.max_overflow is not None:
        engine_kwargs["max_overflow"] = settings.max_overflow

    engine = create_async_engine(settings.url, **engine_kwargs)
    if engine.dialect.name == "sqlite":
        _configure_sqlite(engine, settings.sqlite_busy_timeout)
    return engine


class Database:
    """Explicitly constructed handle over one engine and its session factory."""

    def __init__(self, settings: DatabaseSettings, *, debug: bool = False) -> None:
        self.engine = _build_engine(settings, debug=debug)
        self._session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Plain session; commits on success, rolls back on error."""
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[AsyncSession]:
        """All-or-nothing transaction.

        Commits when the block exits normally and rolls back on any exception,
        task cancellation included. On SQLite the write lock is held from BEGIN.
        """
        async with self._session_factory() as session:
            async with session.begin():
                await session.connection(execution_options={WRITE_LOCK_OPTION: True})
                yield session

    async def create_all(self) -> None:
        """Create database tables in development mode (migrations preferred)."""
        from bank.db import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured on %s", self.dialect_name)

    async def dispose(self) -> None:
        await self.engine.dispose()


__all__ = ["Database", "WRITE_LOCK_OPTION"]

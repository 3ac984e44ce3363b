"""Explicitly constructed holder for the process-wide collaborators."""

from __future__ import annotations

from dataclasses import dataclass

from bank.core.config import Settings
from bank.core.security import TokenMaker
from bank.infrastructure.database import Database


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    database: Database
    token_maker: TokenMaker

    @classmethod
    def build(cls, settings: Settings) -> "ApplicationContainer":
        return cls(
            settings=settings,
            database=Database(settings.database, debug=settings.debug),
            token_maker=TokenMaker(settings.security.secret_key, settings.security.algorithm),
        )

    async def startup(self) -> None:
        if self.settings.create_tables_on_startup:
            await self.database.create_all()

    async def shutdown(self) -> None:
        await self.database.dispose()


__all__ = ["ApplicationContainer"]

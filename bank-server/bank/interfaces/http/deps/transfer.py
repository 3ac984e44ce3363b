"""Transfer related dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bank.infrastructure.database import Database
from bank.modules.transfers.service import TransferHistoryService, TransferService

from .database import get_database, get_db_session


def get_transfer_service(database: Database = Depends(get_database)) -> TransferService:
    return TransferService(database)


def get_transfer_history_service(db: AsyncSession = Depends(get_db_session)) -> TransferHistoryService:
    return TransferHistoryService.with_session(db)


__all__ = ["get_transfer_service", "get_transfer_history_service"]

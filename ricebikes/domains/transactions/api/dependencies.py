"""
Transactions API Dependencies
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ricebikes.core.container import get_container
from ricebikes.database.async_db import get_async_db
from ricebikes.domains.transactions.application import TransactionsService, TransactionSummaryService

DbSession = Annotated[AsyncSession, Depends(get_async_db)]


def get_transactions_service(db: DbSession) -> TransactionsService:
    """Get TransactionsService bound to the request session."""
    return get_container().create_transactions_service(db)


def get_summary_service(db: DbSession) -> TransactionSummaryService:
    """Get TransactionSummaryService bound to the request session."""
    return get_container().create_summary_service(db)


__all__ = ["get_transactions_service", "get_summary_service"]

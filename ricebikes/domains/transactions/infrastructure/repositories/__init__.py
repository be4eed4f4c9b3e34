from .summary_repository import SQLAlchemyTransactionSummaryRepository
from .transaction_repository import SQLAlchemyTransactionRepository

__all__ = ["SQLAlchemyTransactionRepository", "SQLAlchemyTransactionSummaryRepository"]

"""
Transactions Domain Container.
"""

import logging
from typing import TYPE_CHECKING

from ricebikes.domains.transactions.application import TransactionsService, TransactionSummaryService
from ricebikes.domains.transactions.infrastructure.repositories import (
    SQLAlchemyTransactionRepository,
    SQLAlchemyTransactionSummaryRepository,
)

if TYPE_CHECKING:
    from ricebikes.core.container.base import BaseContainer

logger = logging.getLogger(__name__)


class TransactionsContainer:
    """
    Transactions domain container.
    """

    def __init__(self, base: "BaseContainer"):
        self._base = base

    # ==================== REPOSITORIES ====================

    def create_transaction_repository(self, db) -> SQLAlchemyTransactionRepository:
        """Create Transaction Repository."""
        return SQLAlchemyTransactionRepository(session=db)

    def create_summary_repository(self, db) -> SQLAlchemyTransactionSummaryRepository:
        """Create Transaction Summary Repository."""
        return SQLAlchemyTransactionSummaryRepository(session=db)

    # ==================== SERVICES ====================

    def create_transactions_service(self, db) -> TransactionsService:
        """Create TransactionsService with dependencies."""
        return TransactionsService(
            transaction_repository=self.create_transaction_repository(db),
            notifier=self._base.get_notification_trigger(),
        )

    def create_summary_service(self, db) -> TransactionSummaryService:
        """Create TransactionSummaryService with dependencies."""
        return TransactionSummaryService(
            summary_repository=self.create_summary_repository(db),
            exclude_special=self._base.settings.SUMMARY_EXCLUDE_SPECIAL_TRANSACTIONS,
        )

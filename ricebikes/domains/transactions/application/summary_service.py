"""
Transaction Summary Service
"""

import logging
from http import HTTPStatus

from ricebikes.core.service_response import ServiceResponse
from ricebikes.domains.transactions.application.dto import TransactionsSummaryDTO
from ricebikes.domains.transactions.application.ports import ITransactionSummaryRepository

logger = logging.getLogger(__name__)


class TransactionSummaryService:
    """
    Dashboard counters.

    Args:
        summary_repository: Aggregate query implementation
        exclude_special: Also drop refurb, employee and retrospec
            transactions from the incomplete count
    """

    def __init__(self, summary_repository: ITransactionSummaryRepository, exclude_special: bool = False):
        self.summary_repo = summary_repository
        self.exclude_special = exclude_special

    async def get_transactions_summary(self) -> ServiceResponse:
        try:
            summary = await self.summary_repo.get_summary(exclude_special=self.exclude_special)
            return ServiceResponse.ok("Transaction summary retrieved", TransactionsSummaryDTO.from_entity(summary))
        except Exception as e:
            logger.error(f"Error computing transaction summary: {e}", exc_info=True)
            return ServiceResponse.failure(
                "An error occurred while retrieving the transaction summary.",
                None,
                HTTPStatus.INTERNAL_SERVER_ERROR,
            )

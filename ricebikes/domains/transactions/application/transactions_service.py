"""
Transactions Service

CRUD over the ledger plus the state-change notifications that go with it.
"""

import logging
from datetime import UTC, datetime
from http import HTTPStatus
from typing import Any
from uuid import UUID

from ricebikes.core.domain import DomainException, EntityNotFoundException
from ricebikes.core.service_response import ServiceResponse
from ricebikes.domains.transactions.application.dto import TransactionDTO
from ricebikes.domains.transactions.application.ports import ITransactionRepository, ITransactionUpdateNotifier
from ricebikes.domains.transactions.domain.entities import Transaction

logger = logging.getLogger(__name__)

NOT_FOUND = "Transaction not found"


class TransactionsService:
    """
    Transaction operations returning ServiceResponse envelopes.
    """

    def __init__(
        self,
        transaction_repository: ITransactionRepository,
        notifier: ITransactionUpdateNotifier | None = None,
    ):
        self.transaction_repo = transaction_repository
        self.notifier = notifier

    async def find_all(self, after_id: int | None = None, page_limit: int = 50) -> ServiceResponse:
        """Page of transactions below ``after_id``; an empty page is a 404."""
        try:
            transactions = await self.transaction_repo.find_all(after_id, page_limit)
            if not transactions:
                return ServiceResponse.failure("No transactions found", None, HTTPStatus.NOT_FOUND)
            return ServiceResponse.ok("Transactions found", [TransactionDTO.from_entity(t) for t in transactions])
        except Exception as e:
            logger.error(f"Error finding all transactions: {e}", exc_info=True)
            return ServiceResponse.failure(
                "An error occurred while retrieving transactions.", None, HTTPStatus.INTERNAL_SERVER_ERROR
            )

    async def find_by_id(self, transaction_id: UUID) -> ServiceResponse:
        try:
            transaction = await self.transaction_repo.find_by_id(transaction_id)
            if transaction is None:
                return ServiceResponse.failure(NOT_FOUND, None, HTTPStatus.NOT_FOUND)
            return ServiceResponse.ok("Transaction found", TransactionDTO.from_entity(transaction))
        except Exception as e:
            logger.error(f"Error finding transaction {transaction_id}: {e}", exc_info=True)
            return ServiceResponse.failure(
                "An error occurred while finding transaction.", None, HTTPStatus.INTERNAL_SERVER_ERROR
            )

    async def create(self, transaction: Transaction) -> ServiceResponse:
        try:
            if transaction.date_created is None:
                transaction.date_created = datetime.now(UTC)
            created = await self.transaction_repo.create(transaction)
            logger.info(f"Created transaction #{created.transaction_num} ({created.transaction_type})")
            return ServiceResponse.ok(
                "Transaction created successfully", TransactionDTO.from_entity(created), HTTPStatus.CREATED
            )
        except DomainException as e:
            return ServiceResponse.from_exception(e)
        except Exception as e:
            logger.error(f"Error creating transaction: {e}", exc_info=True)
            return ServiceResponse.failure(
                "An error occurred while creating transaction.", None, HTTPStatus.INTERNAL_SERVER_ERROR
            )

    async def update(self, transaction_id: UUID, changes: dict[str, Any]) -> ServiceResponse:
        """
        Partial update.

        Completing a transaction stamps ``date_completed`` unless one is given.
        Reservation, completion and retrospec payment send notifications.
        """
        try:
            current = await self.transaction_repo.find_by_id(transaction_id)
            if current is None:
                return ServiceResponse.failure(NOT_FOUND, None, HTTPStatus.NOT_FOUND)

            changes = dict(changes)
            if changes.get("is_completed") and not current.is_completed and changes.get("date_completed") is None:
                changes["date_completed"] = datetime.now(UTC)

            updated = await self.transaction_repo.update(transaction_id, changes)
        except EntityNotFoundException:
            return ServiceResponse.failure(NOT_FOUND, None, HTTPStatus.NOT_FOUND)
        except DomainException as e:
            return ServiceResponse.from_exception(e)
        except Exception as e:
            logger.error(f"Error updating transaction {transaction_id}: {e}", exc_info=True)
            return ServiceResponse.failure(
                "An error occurred while updating transaction.", None, HTTPStatus.INTERNAL_SERVER_ERROR
            )

        await self._notify_update(current, updated)
        return ServiceResponse.ok("Transaction updated successfully", TransactionDTO.from_entity(updated))

    async def delete(self, transaction_id: UUID) -> ServiceResponse:
        try:
            deleted = await self.transaction_repo.delete(transaction_id)
            if deleted is None:
                return ServiceResponse.failure(NOT_FOUND, None, HTTPStatus.NOT_FOUND)
            return ServiceResponse.ok("Transaction deleted successfully", TransactionDTO.from_entity(deleted))
        except Exception as e:
            logger.error(f"Error deleting transaction {transaction_id}: {e}", exc_info=True)
            return ServiceResponse.failure(
                "An error occurred while deleting transaction.", None, HTTPStatus.INTERNAL_SERVER_ERROR
            )

    async def _notify_update(self, old: Transaction, new: Transaction) -> None:
        if self.notifier is None:
            return
        try:
            await self.notifier.handle_transaction_update(old, new)
        except Exception as e:
            logger.warning(f"Failed to send transaction update notification: {e}")

"""
Transactions Repository Interfaces
"""

from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from ricebikes.domains.transactions.domain.entities import Transaction, TransactionsSummary


@runtime_checkable
class ITransactionRepository(Protocol):
    """
    Interface for transaction persistence.
    """

    async def find_all(self, after_id: int, page_limit: int) -> list[Transaction]:
        """Page of transactions with transaction_num below after_id."""
        ...

    async def find_by_id(self, transaction_id: UUID) -> Transaction | None:
        """Find a transaction by its public ID."""
        ...

    async def exists(self, transaction_id: UUID) -> bool:
        """Check if a transaction exists."""
        ...

    async def create(self, transaction: Transaction) -> Transaction:
        """Insert a transaction."""
        ...

    async def update(self, transaction_id: UUID, changes: dict[str, Any]) -> Transaction:
        """Apply a partial update; raises EntityNotFoundException for unknown IDs."""
        ...

    async def delete(self, transaction_id: UUID) -> Transaction | None:
        """Delete a transaction, returning the removed record."""
        ...


@runtime_checkable
class ITransactionSummaryRepository(Protocol):
    """
    Interface for the dashboard counters.
    """

    async def get_summary(self, exclude_special: bool = False) -> TransactionsSummary:
        """Compute every counter in a single query."""
        ...


@runtime_checkable
class ITransactionUpdateNotifier(Protocol):
    """
    Receives transaction state changes.
    """

    async def handle_transaction_update(self, old: Transaction, new: Transaction) -> None:
        ...


__all__ = ["ITransactionRepository", "ITransactionSummaryRepository", "ITransactionUpdateNotifier"]

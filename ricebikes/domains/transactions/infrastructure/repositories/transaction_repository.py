"""
Transaction Repository Implementation

SQLAlchemy implementation of ITransactionRepository.
"""

import logging
import uuid
from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ricebikes.core.domain import EntityNotFoundException, ValidationException
from ricebikes.domains.transactions.application.ports import ITransactionRepository
from ricebikes.domains.transactions.domain.entities import Transaction
from ricebikes.models.db.transactions import TransactionModel

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {
        "transaction_type",
        "customer_id",
        "total_cost",
        "description",
        "is_completed",
        "is_paid",
        "is_refurb",
        "is_urgent",
        "is_nuclear",
        "is_beer_bike",
        "is_employee",
        "is_reserved",
        "is_waiting_on_email",
        "date_completed",
    }
)


class SQLAlchemyTransactionRepository(ITransactionRepository):
    """
    SQLAlchemy implementation of the transaction repository.

    Also satisfies the workflow domain's ITransactionLookup.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self, after_id: int | None, page_limit: int) -> list[Transaction]:
        """Urgent first, then beer-bike, then oldest first."""
        query = select(TransactionModel)
        if after_id is not None:
            query = query.where(TransactionModel.transaction_num < after_id)
        query = query.order_by(
            TransactionModel.is_urgent.desc(),
            TransactionModel.is_beer_bike.desc(),
            TransactionModel.transaction_num.asc(),
        ).limit(page_limit)

        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def find_by_id(self, transaction_id: UUID) -> Transaction | None:
        model = await self._get_model(transaction_id)
        return self._to_entity(model) if model else None

    async def exists(self, transaction_id: UUID) -> bool:
        result = await self.session.execute(
            select(func.count()).select_from(TransactionModel).where(TransactionModel.transaction_id == transaction_id)
        )
        return result.scalar_one() > 0

    async def create(self, transaction: Transaction) -> Transaction:
        model = self._to_model(transaction)
        self.session.add(model)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ValidationException("Referenced customer does not exist", field="customer_id") from e
        await self.session.refresh(model)
        return self._to_entity(model)

    async def update(self, transaction_id: UUID, changes: dict[str, Any]) -> Transaction:
        model = await self._get_model(transaction_id)
        if model is None:
            raise EntityNotFoundException("Transaction", transaction_id, "Transaction not found")

        for key, value in changes.items():
            if key in UPDATABLE_FIELDS:
                setattr(model, key, value)
            else:
                logger.debug(f"Ignoring non-updatable transaction field: {key}")

        await self.session.commit()
        await self.session.refresh(model)
        return self._to_entity(model)

    async def delete(self, transaction_id: UUID) -> Transaction | None:
        model = await self._get_model(transaction_id)
        if model is None:
            return None

        deleted = self._to_entity(model)
        await self.session.delete(model)
        await self.session.commit()
        return deleted

    # -------------------------------------------------------------------------

    async def _get_model(self, transaction_id: UUID) -> TransactionModel | None:
        result = await self.session.execute(
            select(TransactionModel).where(TransactionModel.transaction_id == transaction_id)
        )
        return result.scalar_one_or_none()

    def _to_entity(self, model: TransactionModel) -> Transaction:
        return Transaction(
            transaction_num=model.transaction_num,
            transaction_id=model.transaction_id,
            date_created=model.date_created,
            transaction_type=model.transaction_type,
            customer_id=model.customer_id,
            total_cost=model.total_cost,
            description=model.description,
            is_completed=model.is_completed,
            is_paid=model.is_paid,
            is_refurb=model.is_refurb,
            is_urgent=model.is_urgent,
            is_nuclear=model.is_nuclear,
            is_beer_bike=model.is_beer_bike,
            is_employee=model.is_employee,
            is_reserved=model.is_reserved,
            is_waiting_on_email=model.is_waiting_on_email,
            date_completed=model.date_completed,
        )

    def _to_model(self, transaction: Transaction) -> TransactionModel:
        return TransactionModel(
            transaction_id=transaction.transaction_id or uuid.uuid4(),
            date_created=transaction.date_created,
            transaction_type=transaction.transaction_type,
            customer_id=transaction.customer_id,
            total_cost=transaction.total_cost,
            description=transaction.description,
            is_completed=transaction.is_completed,
            is_paid=transaction.is_paid,
            is_refurb=transaction.is_refurb,
            is_urgent=transaction.is_urgent,
            is_nuclear=transaction.is_nuclear,
            is_beer_bike=transaction.is_beer_bike,
            is_employee=transaction.is_employee,
            is_reserved=transaction.is_reserved,
            is_waiting_on_email=transaction.is_waiting_on_email,
            date_completed=transaction.date_completed,
        )

"""
Transactions DTOs
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ricebikes.domains.transactions.domain.entities import Transaction, TransactionsSummary


class TransactionDTO(BaseModel):
    transaction_num: int | None = None
    transaction_id: UUID | None = None
    date_created: datetime | None = None
    transaction_type: str
    customer_id: UUID
    total_cost: float
    description: str | None = None
    is_completed: bool
    is_paid: bool
    is_refurb: bool
    is_urgent: bool
    is_nuclear: bool | None = None
    is_beer_bike: bool
    is_employee: bool
    is_reserved: bool
    is_waiting_on_email: bool
    date_completed: datetime | None = None

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionDTO":
        return cls(
            transaction_num=transaction.transaction_num,
            transaction_id=transaction.transaction_id,
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


class TransactionsSummaryDTO(BaseModel):
    quantity_incomplete: int
    quantity_beer_bike_incomplete: int
    quantity_waiting_on_pickup: int
    quantity_waiting_on_safety_check: int

    @classmethod
    def from_entity(cls, summary: TransactionsSummary) -> "TransactionsSummaryDTO":
        return cls(
            quantity_incomplete=summary.quantity_incomplete,
            quantity_beer_bike_incomplete=summary.quantity_beer_bike_incomplete,
            quantity_waiting_on_pickup=summary.quantity_waiting_on_pickup,
            quantity_waiting_on_safety_check=summary.quantity_waiting_on_safety_check,
        )

"""
Transaction model - the shop's ledger of repairs and sales.

``transaction_num`` is the serial key used for pagination,
``transaction_id`` is the public UUID that workflow steps reference.
"""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, utc_now


class TransactionModel(Base):
    """
    Transaction row.

    Attributes:
        transaction_num: Serial primary key.
        transaction_id: Public UUID.
        transaction_type: Free text ("inpatient", "retrospec", ...).
        customer_id: FK to Customers.
        total_cost: Running total.
        is_*: Status flags used by the dashboard summary.
        date_completed: Set when the transaction is completed.
    """

    __tablename__ = "Transactions"

    transaction_num: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    transaction_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        unique=True,
        nullable=False,
        default=uuid.uuid4,
    )
    date_created: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)
    transaction_type: Mapped[str] = mapped_column(String, nullable=False)
    customer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("Customers.customer_id"),
        nullable=False,
        index=True,
    )
    total_cost: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Status flags
    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_paid: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_refurb: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_urgent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_nuclear: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    is_beer_bike: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_employee: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_reserved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_waiting_on_email: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    date_completed: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "transaction_num": self.transaction_num,
            "transaction_id": str(self.transaction_id),
            "transaction_type": self.transaction_type,
            "customer_id": str(self.customer_id),
            "total_cost": self.total_cost,
            "is_completed": self.is_completed,
            "is_paid": self.is_paid,
        }

    def __repr__(self) -> str:
        return (
            f"<TransactionModel(transaction_num={self.transaction_num}, "
            f"type='{self.transaction_type}', completed={self.is_completed})>"
        )

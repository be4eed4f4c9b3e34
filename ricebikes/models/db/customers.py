"""
Customer model - owners of transactions.
"""

import uuid

from sqlalchemy import CHAR, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class CustomerModel(Base):
    __tablename__ = "Customers"

    customer_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str] = mapped_column(String, nullable=False)
    last_name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False)
    phone: Mapped[str | None] = mapped_column(CHAR(10), nullable=True)

    def __repr__(self) -> str:
        return f"<CustomerModel(customer_id={self.customer_id}, email='{self.email}')>"

"""
Transactions API Schemas
"""

from datetime import datetime

from pydantic import BaseModel, Field


class CreateTransactionRequest(BaseModel):
    transaction_type: str = Field(..., min_length=1)
    customer_id: str
    total_cost: float = Field(0.0, ge=0)
    description: str | None = None
    is_completed: bool = False
    is_paid: bool = False
    is_refurb: bool = False
    is_urgent: bool = False
    is_nuclear: bool | None = None
    is_beer_bike: bool = False
    is_employee: bool = False
    is_reserved: bool = False
    is_waiting_on_email: bool = False


class UpdateTransactionRequest(BaseModel):
    """Partial update; only fields present in the body are applied."""

    transaction_type: str | None = Field(None, min_length=1)
    total_cost: float | None = Field(None, ge=0)
    description: str | None = None
    is_completed: bool | None = None
    is_paid: bool | None = None
    is_refurb: bool | None = None
    is_urgent: bool | None = None
    is_nuclear: bool | None = None
    is_beer_bike: bool | None = None
    is_employee: bool | None = None
    is_reserved: bool | None = None
    is_waiting_on_email: bool | None = None
    date_completed: datetime | None = None

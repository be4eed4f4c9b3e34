"""
Transaction entities.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

RETROSPEC_TYPE = "retrospec"


@dataclass
class Transaction:
    """
    A repair, retail sale, bike sale or beer-bike job.

    ``transaction_num`` is the serial key, ``transaction_id`` the public UUID.
    """

    transaction_type: str
    customer_id: UUID
    total_cost: float = 0.0
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
    date_created: datetime | None = None
    date_completed: datetime | None = None
    transaction_id: UUID | None = None
    transaction_num: int | None = None

    @property
    def is_retrospec(self) -> bool:
        return self.transaction_type.lower() == RETROSPEC_TYPE


@dataclass(frozen=True)
class TransactionsSummary:
    """Dashboard counters; recomputed on every request."""

    quantity_incomplete: int = 0
    quantity_beer_bike_incomplete: int = 0
    quantity_waiting_on_pickup: int = 0
    # Not tracked yet; always zero.
    quantity_waiting_on_safety_check: int = 0

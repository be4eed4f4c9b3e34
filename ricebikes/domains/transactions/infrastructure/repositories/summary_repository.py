"""
Transaction Summary Repository

Counts dashboard tiles with aggregate FILTER clauses in one round trip.
"""

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ricebikes.domains.transactions.application.ports import ITransactionSummaryRepository
from ricebikes.domains.transactions.domain.entities import RETROSPEC_TYPE, TransactionsSummary
from ricebikes.models.db.transactions import TransactionModel


class SQLAlchemyTransactionSummaryRepository(ITransactionSummaryRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def build_summary_query(self, exclude_special: bool = False):
        """
        Build the SELECT computing every counter.

        With ``exclude_special`` the incomplete count also skips refurbs,
        employee jobs and retrospec sales.
        """
        t = TransactionModel
        incomplete = [t.is_completed.is_(False), t.is_beer_bike.is_(False)]
        if exclude_special:
            incomplete += [
                t.is_refurb.is_(False),
                t.is_employee.is_(False),
                func.lower(t.transaction_type) != RETROSPEC_TYPE,
            ]

        return select(
            func.count().filter(and_(*incomplete)).label("quantity_incomplete"),
            func.count()
            .filter(and_(t.is_completed.is_(False), t.is_beer_bike.is_(True)))
            .label("quantity_beer_bike_incomplete"),
            func.count()
            .filter(and_(t.is_completed.is_(True), t.is_paid.is_(False)))
            .label("quantity_waiting_on_pickup"),
        ).select_from(t)

    async def get_summary(self, exclude_special: bool = False) -> TransactionsSummary:
        result = await self.session.execute(self.build_summary_query(exclude_special))
        row = result.one()
        return TransactionsSummary(
            quantity_incomplete=int(row.quantity_incomplete or 0),
            quantity_beer_bike_incomplete=int(row.quantity_beer_bike_incomplete or 0),
            quantity_waiting_on_pickup=int(row.quantity_waiting_on_pickup or 0),
            quantity_waiting_on_safety_check=0,
        )

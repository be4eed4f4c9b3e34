"""
Transactions API Routes

/transactions CRUD and the /summary/transactions dashboard counters.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ricebikes.api.responses import handle_service_response
from ricebikes.core.validators import parse_uuid
from ricebikes.domains.transactions.api.dependencies import get_summary_service, get_transactions_service
from ricebikes.domains.transactions.api.schemas import CreateTransactionRequest, UpdateTransactionRequest
from ricebikes.domains.transactions.application import TransactionsService, TransactionSummaryService
from ricebikes.domains.transactions.domain.entities import Transaction

router = APIRouter(prefix="/transactions", tags=["Transactions"])
summary_router = APIRouter(prefix="/summary", tags=["Summary"])

TransactionsServiceDep = Annotated[TransactionsService, Depends(get_transactions_service)]
SummaryServiceDep = Annotated[TransactionSummaryService, Depends(get_summary_service)]

DEFAULT_PAGE_LIMIT = 50
MAX_PAGE_LIMIT = 500


def _parse_uuid(value: str, label: str = "transaction ID") -> UUID:
    try:
        return parse_uuid(value, label)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


# =============================================================================
# Summary
# =============================================================================


@summary_router.get("/transactions")
async def get_transactions_summary(service: SummaryServiceDep):
    """Counts of incomplete, beer-bike, awaiting-pickup and awaiting-safety-check transactions."""
    return handle_service_response(await service.get_transactions_summary())


# =============================================================================
# Transactions
# =============================================================================


@router.get("")
async def list_transactions(
    service: TransactionsServiceDep,
    after_id: Annotated[int | None, Query(ge=1)] = None,
    page_limit: Annotated[int, Query(ge=1, le=MAX_PAGE_LIMIT)] = DEFAULT_PAGE_LIMIT,
):
    return handle_service_response(await service.find_all(after_id, page_limit))


@router.get("/{transaction_id}")
async def get_transaction(transaction_id: str, service: TransactionsServiceDep):
    return handle_service_response(await service.find_by_id(_parse_uuid(transaction_id)))


@router.post("")
async def create_transaction(request: CreateTransactionRequest, service: TransactionsServiceDep):
    transaction = Transaction(
        **request.model_dump(exclude={"customer_id"}),
        customer_id=_parse_uuid(request.customer_id, "customer ID"),
    )
    return handle_service_response(await service.create(transaction))


@router.patch("/{transaction_id}")
async def update_transaction(transaction_id: str, request: UpdateTransactionRequest, service: TransactionsServiceDep):
    tid = _parse_uuid(transaction_id)
    return handle_service_response(await service.update(tid, request.model_dump(exclude_unset=True)))


@router.delete("/{transaction_id}")
async def delete_transaction(transaction_id: str, service: TransactionsServiceDep):
    return handle_service_response(await service.delete(_parse_uuid(transaction_id)))

"""
Aggregates every domain router.
"""

from fastapi import APIRouter

from ricebikes.domains.transactions.api import router as transactions_router
from ricebikes.domains.transactions.api import summary_router
from ricebikes.domains.workflow.api import router as workflow_router

api_router = APIRouter()

api_router.include_router(workflow_router)
api_router.include_router(summary_router)
api_router.include_router(transactions_router)

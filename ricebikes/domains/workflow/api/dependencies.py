"""
Workflow API Dependencies
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ricebikes.core.container import get_container
from ricebikes.database.async_db import get_async_db
from ricebikes.domains.workflow.application import WorkflowStepsService

DbSession = Annotated[AsyncSession, Depends(get_async_db)]


def get_workflow_steps_service(db: DbSession) -> WorkflowStepsService:
    """Get WorkflowStepsService bound to the request session."""
    return get_container().create_workflow_steps_service(db)


__all__ = ["DbSession", "get_workflow_steps_service"]

"""
Workflow Domain Container.
"""

import logging
from typing import TYPE_CHECKING

from ricebikes.domains.transactions.infrastructure.repositories import SQLAlchemyTransactionRepository
from ricebikes.domains.workflow.application import WorkflowInitializer, WorkflowStepsService
from ricebikes.domains.workflow.infrastructure.repositories import SQLAlchemyWorkflowStepRepository

if TYPE_CHECKING:
    from ricebikes.core.container.base import BaseContainer

logger = logging.getLogger(__name__)


class WorkflowContainer:
    """
    Workflow domain container.

    Creates workflow repositories and services bound to a request session.
    """

    def __init__(self, base: "BaseContainer"):
        self._base = base

    # ==================== REPOSITORIES ====================

    def create_workflow_step_repository(self, db) -> SQLAlchemyWorkflowStepRepository:
        """Create WorkflowStep Repository."""
        return SQLAlchemyWorkflowStepRepository(session=db)

    # ==================== SERVICES ====================

    def create_workflow_initializer(self, db) -> WorkflowInitializer:
        """Create WorkflowInitializer with dependencies."""
        return WorkflowInitializer(
            step_repository=self.create_workflow_step_repository(db),
            transaction_repository=SQLAlchemyTransactionRepository(session=db),
        )

    def create_workflow_steps_service(self, db) -> WorkflowStepsService:
        """Create WorkflowStepsService with dependencies."""
        initializer = self.create_workflow_initializer(db)
        return WorkflowStepsService(
            step_repository=initializer.step_repo,
            transaction_repository=initializer.transaction_repo,
            notifier=self._base.get_notification_trigger(),
            initializer=initializer,
        )

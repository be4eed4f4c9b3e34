"""
Workflow Initializer

Seeds the fixed step sequence of a workflow for a transaction.
"""

import logging
from uuid import UUID

from ricebikes.core.domain import ConflictException, EntityNotFoundException, ValidationException
from ricebikes.domains.workflow.application.ports import ITransactionLookup, IWorkflowStepRepository
from ricebikes.domains.workflow.domain.entities import WorkflowStep
from ricebikes.domains.workflow.domain.step_templates import build_workflow_steps
from ricebikes.domains.workflow.domain.value_objects import WorkflowType

logger = logging.getLogger(__name__)


class WorkflowInitializer:
    """
    Creates the steps of a workflow once per (transaction, workflow type).

    A second initialization of the same pair is a conflict, whether it is
    caught by the existence check or by the unique constraint on insert.
    """

    def __init__(
        self,
        step_repository: IWorkflowStepRepository,
        transaction_repository: ITransactionLookup,
    ):
        self.step_repo = step_repository
        self.transaction_repo = transaction_repository

    async def initialize(
        self,
        transaction_id: UUID,
        workflow_type: WorkflowType,
        created_by: UUID | None,
    ) -> list[WorkflowStep]:
        """
        Seed the workflow.

        Raises:
            EntityNotFoundException: Transaction does not exist.
            ValidationException: Missing user or unsupported workflow type.
            ConflictException: The workflow already has steps.
        """
        if not await self.transaction_repo.exists(transaction_id):
            raise EntityNotFoundException("Transaction", transaction_id, "Transaction not found")

        if not created_by:
            raise ValidationException("User ID is required for workflow initialization", field="created_by")

        steps = build_workflow_steps(transaction_id, workflow_type, created_by)

        existing = await self.step_repo.find_by_transaction_and_type(transaction_id, workflow_type)
        if existing:
            raise ConflictException("Workflow already exists for this transaction", entity_type="WorkflowStep")

        try:
            created = await self.step_repo.create_many(steps)
        except ConflictException as e:
            # Lost a race with a concurrent initializer
            raise ConflictException(
                "Workflow already exists for this transaction", entity_type="WorkflowStep", details=e.details
            ) from e

        logger.info(f"Initialized {workflow_type.value} workflow for transaction {transaction_id} ({len(created)} steps)")
        return created

"""
Workflow Steps Service

Application service behind the /workflow-steps endpoints. Every operation
returns a ServiceResponse; domain exceptions become failed envelopes and
anything unexpected is logged and reported as a 500.
"""

import logging
from http import HTTPStatus
from uuid import UUID

from ricebikes.core.domain import DomainException, EntityNotFoundException
from ricebikes.core.service_response import ServiceResponse
from ricebikes.domains.workflow.application.dto import (
    CreateWorkflowStepData,
    UpdateWorkflowStepData,
    WorkflowProgressDTO,
    WorkflowStepDTO,
    WorkflowStepFilters,
)
from ricebikes.domains.workflow.application.ports import (
    IStepCompletionNotifier,
    ITransactionLookup,
    IWorkflowStepRepository,
)
from ricebikes.domains.workflow.application.workflow_initializer import WorkflowInitializer
from ricebikes.domains.workflow.domain.entities import WorkflowStep
from ricebikes.domains.workflow.domain.progress import calculate_progress
from ricebikes.domains.workflow.domain.value_objects import WorkflowType

logger = logging.getLogger(__name__)

STEP_NOT_FOUND = "Workflow step not found"


def _to_dtos(steps: list[WorkflowStep]) -> list[WorkflowStepDTO]:
    return [WorkflowStepDTO.from_entity(s) for s in steps]


class WorkflowStepsService:
    """
    Workflow step operations.

    Args:
        step_repository: Step persistence
        transaction_repository: Transaction existence checks
        notifier: Optional receiver of step completion events
        initializer: Workflow initializer; built from the repositories when omitted
    """

    def __init__(
        self,
        step_repository: IWorkflowStepRepository,
        transaction_repository: ITransactionLookup,
        notifier: IStepCompletionNotifier | None = None,
        initializer: WorkflowInitializer | None = None,
    ):
        self.step_repo = step_repository
        self.transaction_repo = transaction_repository
        self.notifier = notifier
        self.initializer = initializer or WorkflowInitializer(step_repository, transaction_repository)

    # =========================================================================
    # Queries
    # =========================================================================

    async def get_workflow_steps(self, filters: WorkflowStepFilters | None = None) -> ServiceResponse:
        try:
            steps = await self.step_repo.find(filters)
            if not steps:
                return ServiceResponse.ok("No workflow steps found", [])
            return ServiceResponse.ok("Workflow steps retrieved successfully", _to_dtos(steps))
        except Exception as e:
            logger.error(f"Error retrieving workflow steps: {e}", exc_info=True)
            return ServiceResponse.failure(
                "Failed to retrieve workflow steps", None, HTTPStatus.INTERNAL_SERVER_ERROR
            )

    async def get_workflow_steps_by_transaction(
        self,
        transaction_id: UUID,
        workflow_type: WorkflowType,
    ) -> ServiceResponse:
        try:
            steps = await self.step_repo.find_by_transaction_and_type(transaction_id, workflow_type)
            if not steps:
                return ServiceResponse.ok("No workflow steps found for this transaction", [])
            return ServiceResponse.ok("Workflow steps retrieved successfully", _to_dtos(steps))
        except Exception as e:
            logger.error(f"Error retrieving workflow steps for transaction {transaction_id}: {e}", exc_info=True)
            return ServiceResponse.failure(
                "Failed to retrieve workflow steps", None, HTTPStatus.INTERNAL_SERVER_ERROR
            )

    async def get_workflow_step_by_id(self, step_id: UUID) -> ServiceResponse:
        try:
            step = await self.step_repo.find_by_id(step_id)
            if step is None:
                return ServiceResponse.failure(STEP_NOT_FOUND, None, HTTPStatus.NOT_FOUND)
            return ServiceResponse.ok("Workflow step retrieved successfully", WorkflowStepDTO.from_entity(step))
        except Exception as e:
            logger.error(f"Error retrieving workflow step {step_id}: {e}", exc_info=True)
            return ServiceResponse.failure("Failed to retrieve workflow step", None, HTTPStatus.INTERNAL_SERVER_ERROR)

    async def get_workflow_progress(self, transaction_id: UUID, workflow_type: WorkflowType) -> ServiceResponse:
        """Progress of one workflow; 404 when it was never initialized."""
        try:
            steps = await self.step_repo.find_by_transaction_and_type(transaction_id, workflow_type)
            if not steps:
                return ServiceResponse.failure(
                    "No workflow found for this transaction and type", None, HTTPStatus.NOT_FOUND
                )
            progress = calculate_progress(steps)
            return ServiceResponse.ok(
                "Workflow progress retrieved successfully", WorkflowProgressDTO.from_progress(progress)
            )
        except Exception as e:
            logger.error(f"Error calculating workflow progress for {transaction_id}: {e}", exc_info=True)
            return ServiceResponse.failure(
                "Failed to retrieve workflow progress", None, HTTPStatus.INTERNAL_SERVER_ERROR
            )

    # =========================================================================
    # Commands
    # =========================================================================

    async def create_workflow_step(self, data: CreateWorkflowStepData) -> ServiceResponse:
        try:
            if not await self.transaction_repo.exists(data.transaction_id):
                return ServiceResponse.failure("Transaction not found", None, HTTPStatus.NOT_FOUND)

            step = WorkflowStep(
                transaction_id=data.transaction_id,
                workflow_type=data.workflow_type,
                step_name=data.step_name,
                step_order=data.step_order,
                created_by=data.created_by,
            )
            created = await self.step_repo.create(step)
            return ServiceResponse.ok(
                "Workflow step created successfully", WorkflowStepDTO.from_entity(created), HTTPStatus.CREATED
            )
        except DomainException as e:
            return ServiceResponse.from_exception(e)
        except Exception as e:
            logger.error(f"Error creating workflow step: {e}", exc_info=True)
            return ServiceResponse.failure("Failed to create workflow step", None, HTTPStatus.INTERNAL_SERVER_ERROR)

    async def initialize_workflow(
        self,
        transaction_id: UUID,
        workflow_type: WorkflowType,
        created_by: UUID | None,
    ) -> ServiceResponse:
        try:
            steps = await self.initializer.initialize(transaction_id, workflow_type, created_by)
            return ServiceResponse.ok(
                f"{workflow_type.value} workflow initialized successfully", _to_dtos(steps), HTTPStatus.CREATED
            )
        except DomainException as e:
            return ServiceResponse.from_exception(e)
        except Exception as e:
            logger.error(f"Error initializing {workflow_type.value} workflow: {e}", exc_info=True)
            return ServiceResponse.failure("Failed to initialize workflow", None, HTTPStatus.INTERNAL_SERVER_ERROR)

    async def initialize_bike_sales_workflow(self, transaction_id: UUID, created_by: UUID | None) -> ServiceResponse:
        return await self.initialize_workflow(transaction_id, WorkflowType.BIKE_SALES, created_by)

    async def initialize_repair_process_workflow(
        self,
        transaction_id: UUID,
        created_by: UUID | None,
    ) -> ServiceResponse:
        return await self.initialize_workflow(transaction_id, WorkflowType.REPAIR_PROCESS, created_by)

    async def update_workflow_step(self, step_id: UUID, data: UpdateWorkflowStepData) -> ServiceResponse:
        try:
            updated = await self.step_repo.update(step_id, data.is_completed, data.completed_by)
            return ServiceResponse.ok("Workflow step updated successfully", WorkflowStepDTO.from_entity(updated))
        except EntityNotFoundException:
            return ServiceResponse.failure(STEP_NOT_FOUND, None, HTTPStatus.NOT_FOUND)
        except DomainException as e:
            return ServiceResponse.from_exception(e)
        except Exception as e:
            logger.error(f"Error updating workflow step {step_id}: {e}", exc_info=True)
            return ServiceResponse.failure("Failed to update workflow step", None, HTTPStatus.INTERNAL_SERVER_ERROR)

    async def complete_workflow_step(self, step_id: UUID, completed_by: UUID | None = None) -> ServiceResponse:
        try:
            completed = await self.step_repo.update(step_id, True, completed_by)
        except EntityNotFoundException:
            return ServiceResponse.failure(STEP_NOT_FOUND, None, HTTPStatus.NOT_FOUND)
        except Exception as e:
            logger.error(f"Error completing workflow step {step_id}: {e}", exc_info=True)
            return ServiceResponse.failure("Failed to complete workflow step", None, HTTPStatus.INTERNAL_SERVER_ERROR)

        await self._notify_completion(completed)
        return ServiceResponse.ok("Workflow step completed successfully", WorkflowStepDTO.from_entity(completed))

    async def uncomplete_workflow_step(self, step_id: UUID) -> ServiceResponse:
        try:
            step = await self.step_repo.update(step_id, False)
            return ServiceResponse.ok("Workflow step marked as incomplete", WorkflowStepDTO.from_entity(step))
        except EntityNotFoundException:
            return ServiceResponse.failure(STEP_NOT_FOUND, None, HTTPStatus.NOT_FOUND)
        except Exception as e:
            logger.error(f"Error uncompleting workflow step {step_id}: {e}", exc_info=True)
            return ServiceResponse.failure(
                "Failed to uncomplete workflow step", None, HTTPStatus.INTERNAL_SERVER_ERROR
            )

    async def reset_workflow_steps(self, transaction_id: UUID, workflow_type: WorkflowType) -> ServiceResponse:
        try:
            if not await self.transaction_repo.exists(transaction_id):
                return ServiceResponse.failure("Transaction not found", None, HTTPStatus.NOT_FOUND)

            existing = await self.step_repo.find_by_transaction_and_type(transaction_id, workflow_type)
            if not existing:
                return ServiceResponse.failure(
                    "No workflow steps found for this transaction", None, HTTPStatus.NOT_FOUND
                )

            steps = await self.step_repo.reset_all(transaction_id, workflow_type)
            return ServiceResponse.ok("All workflow steps reset to incomplete", _to_dtos(steps))
        except Exception as e:
            logger.error(f"Error resetting workflow steps for {transaction_id}: {e}", exc_info=True)
            return ServiceResponse.failure("Failed to reset workflow steps", None, HTTPStatus.INTERNAL_SERVER_ERROR)

    async def delete_workflow_step(self, step_id: UUID) -> ServiceResponse:
        try:
            deleted = await self.step_repo.delete(step_id)
            if deleted is None:
                return ServiceResponse.failure(STEP_NOT_FOUND, None, HTTPStatus.NOT_FOUND)
            return ServiceResponse.ok("Workflow step deleted successfully", None)
        except Exception as e:
            logger.error(f"Error deleting workflow step {step_id}: {e}", exc_info=True)
            return ServiceResponse.failure("Failed to delete workflow step", None, HTTPStatus.INTERNAL_SERVER_ERROR)

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _notify_completion(self, step: WorkflowStep) -> None:
        """Best-effort completion notification; errors are logged only."""
        if self.notifier is None:
            return
        try:
            transaction = await self.transaction_repo.find_by_id(step.transaction_id)
            await self.notifier.handle_step_completion(step, transaction)
        except Exception as e:
            logger.warning(f"Failed to send workflow step completion notification: {e}")


__all__ = ["WorkflowStepsService"]

"""
Workflow Repository Interfaces

Protocol definitions for the data the workflow services depend on.
"""

from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from ricebikes.domains.workflow.application.dto import WorkflowStepFilters
from ricebikes.domains.workflow.domain.entities import WorkflowStep
from ricebikes.domains.workflow.domain.value_objects import WorkflowType


@runtime_checkable
class IWorkflowStepRepository(Protocol):
    """
    Interface for workflow step persistence.
    """

    async def find(self, filters: WorkflowStepFilters | None = None) -> list[WorkflowStep]:
        """Find steps matching the filters, ordered by step_order then created_at."""
        ...

    async def find_by_transaction_and_type(
        self,
        transaction_id: UUID,
        workflow_type: WorkflowType,
    ) -> list[WorkflowStep]:
        """Ordered steps of one workflow; empty when none exist."""
        ...

    async def find_by_id(self, step_id: UUID) -> WorkflowStep | None:
        """Find a step by ID."""
        ...

    async def create(self, step: WorkflowStep) -> WorkflowStep:
        """Persist a single step."""
        ...

    async def create_many(self, steps: list[WorkflowStep]) -> list[WorkflowStep]:
        """Persist a batch of steps in one commit, all or nothing."""
        ...

    async def update(
        self,
        step_id: UUID,
        is_completed: bool | None = None,
        completed_by: UUID | None = None,
    ) -> WorkflowStep:
        """Change completion state; raises EntityNotFoundException for unknown IDs."""
        ...

    async def delete(self, step_id: UUID) -> WorkflowStep | None:
        """Delete a step, returning the removed record."""
        ...

    async def reset_all(self, transaction_id: UUID, workflow_type: WorkflowType) -> list[WorkflowStep]:
        """Mark every step of a workflow incomplete."""
        ...


@runtime_checkable
class ITransactionLookup(Protocol):
    """
    Read access to transactions needed by the workflow services.
    """

    async def exists(self, transaction_id: UUID) -> bool:
        """Check whether a transaction exists."""
        ...

    async def find_by_id(self, transaction_id: UUID) -> Any | None:
        """Find a transaction by its public ID."""
        ...


@runtime_checkable
class IStepCompletionNotifier(Protocol):
    """
    Receives step completion events.
    """

    async def handle_step_completion(self, step: WorkflowStep, transaction: Any | None = None) -> None:
        ...


__all__ = ["IWorkflowStepRepository", "ITransactionLookup", "IStepCompletionNotifier"]

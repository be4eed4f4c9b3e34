"""
WorkflowStep entity.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from .value_objects import WorkflowType


@dataclass
class WorkflowStep:
    """
    A single step of a transaction's workflow.

    ``step_id`` and the timestamps are None until the step is persisted.
    """

    transaction_id: UUID
    workflow_type: WorkflowType
    step_name: str
    step_order: int
    created_by: UUID
    is_completed: bool = False
    completed_by: UUID | None = None
    completed_at: datetime | None = None
    step_id: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def complete(self, completed_by: UUID | None = None) -> None:
        if not self.is_completed or self.completed_at is None:
            self.completed_at = datetime.now(UTC)
        self.is_completed = True
        if completed_by is not None:
            self.completed_by = completed_by

    def uncomplete(self) -> None:
        self.is_completed = False
        self.completed_at = None
        self.completed_by = None

"""
Workflow DTOs

Inputs accepted by the workflow services and the serialized shapes they return.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ricebikes.domains.workflow.domain.entities import WorkflowStep
from ricebikes.domains.workflow.domain.progress import WorkflowProgress
from ricebikes.domains.workflow.domain.value_objects import WorkflowType


@dataclass
class WorkflowStepFilters:
    """Optional filters for listing steps; None means unfiltered."""

    transaction_id: UUID | None = None
    workflow_type: WorkflowType | None = None
    is_completed: bool | None = None
    step_order: int | None = None


@dataclass
class CreateWorkflowStepData:
    transaction_id: UUID
    workflow_type: WorkflowType
    step_name: str
    step_order: int
    created_by: UUID | None


@dataclass
class UpdateWorkflowStepData:
    is_completed: bool | None = None
    completed_by: UUID | None = None


class WorkflowStepDTO(BaseModel):
    step_id: UUID
    transaction_id: UUID
    workflow_type: WorkflowType
    step_name: str
    step_order: int
    is_completed: bool
    created_by: UUID
    completed_by: UUID | None = None
    created_at: datetime | None = None
    completed_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, step: WorkflowStep) -> "WorkflowStepDTO":
        return cls(
            step_id=step.step_id,
            transaction_id=step.transaction_id,
            workflow_type=step.workflow_type,
            step_name=step.step_name,
            step_order=step.step_order,
            is_completed=step.is_completed,
            created_by=step.created_by,
            completed_by=step.completed_by,
            created_at=step.created_at,
            completed_at=step.completed_at,
            updated_at=step.updated_at,
        )


class StepSummaryDTO(BaseModel):
    step_id: UUID | None
    step_name: str
    step_order: int
    is_completed: bool
    completed_at: datetime | None = None


class WorkflowProgressDTO(BaseModel):
    total_steps: int
    completed_steps: int
    progress_percentage: int
    current_step: WorkflowStepDTO | None = None
    is_workflow_complete: bool
    steps_summary: list[StepSummaryDTO]

    @classmethod
    def from_progress(cls, progress: WorkflowProgress) -> "WorkflowProgressDTO":
        return cls(
            total_steps=progress.total_steps,
            completed_steps=progress.completed_steps,
            progress_percentage=progress.progress_percentage,
            current_step=WorkflowStepDTO.from_entity(progress.current_step) if progress.current_step else None,
            is_workflow_complete=progress.is_workflow_complete,
            steps_summary=[
                StepSummaryDTO(
                    step_id=s.step_id,
                    step_name=s.step_name,
                    step_order=s.step_order,
                    is_completed=s.is_completed,
                    completed_at=s.completed_at,
                )
                for s in progress.steps_summary
            ],
        )

"""
Fixed step sequences used to seed a workflow.
"""

from uuid import UUID

from ricebikes.core.domain import ValidationException

from .entities import WorkflowStep
from .value_objects import BikeSalesStep, RepairProcessStep, WorkflowType

STEP_SEQUENCES: dict[WorkflowType, list[str]] = {
    WorkflowType.BIKE_SALES: BikeSalesStep.values(),
    WorkflowType.REPAIR_PROCESS: RepairProcessStep.values(),
}


def supported_workflow_types() -> list[WorkflowType]:
    return list(STEP_SEQUENCES)


def build_workflow_steps(transaction_id: UUID, workflow_type: WorkflowType, created_by: UUID) -> list[WorkflowStep]:
    """
    Build the unsaved steps for a workflow, ordered from 1.

    Raises:
        ValidationException: If the workflow type has no fixed sequence.
    """
    names = STEP_SEQUENCES.get(workflow_type)
    if names is None:
        raise ValidationException("Unsupported workflow type", field="workflow_type")

    return [
        WorkflowStep(
            transaction_id=transaction_id,
            workflow_type=workflow_type,
            step_name=name,
            step_order=order,
            created_by=created_by,
        )
        for order, name in enumerate(names, start=1)
    ]

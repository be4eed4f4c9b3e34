from .dto import (
    CreateWorkflowStepData,
    StepSummaryDTO,
    UpdateWorkflowStepData,
    WorkflowProgressDTO,
    WorkflowStepDTO,
    WorkflowStepFilters,
)
from .ports import IStepCompletionNotifier, ITransactionLookup, IWorkflowStepRepository
from .workflow_initializer import WorkflowInitializer
from .workflow_steps_service import WorkflowStepsService

__all__ = [
    "CreateWorkflowStepData",
    "UpdateWorkflowStepData",
    "WorkflowStepFilters",
    "WorkflowStepDTO",
    "StepSummaryDTO",
    "WorkflowProgressDTO",
    "IWorkflowStepRepository",
    "ITransactionLookup",
    "IStepCompletionNotifier",
    "WorkflowInitializer",
    "WorkflowStepsService",
]

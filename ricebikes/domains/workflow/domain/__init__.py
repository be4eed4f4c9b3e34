from .entities import WorkflowStep
from .progress import StepSummary, WorkflowProgress, calculate_progress
from .step_templates import STEP_SEQUENCES, build_workflow_steps, supported_workflow_types
from .value_objects import BikeSalesStep, RepairProcessStep, WorkflowType

__all__ = [
    "WorkflowStep",
    "WorkflowType",
    "BikeSalesStep",
    "RepairProcessStep",
    "WorkflowProgress",
    "StepSummary",
    "calculate_progress",
    "STEP_SEQUENCES",
    "build_workflow_steps",
    "supported_workflow_types",
]

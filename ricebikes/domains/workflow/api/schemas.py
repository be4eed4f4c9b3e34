"""
Workflow API Schemas

Request bodies for the /workflow-steps endpoints. IDs arrive as strings and
are checked against the UUID pattern by the routes.
"""

from pydantic import BaseModel, Field

from ricebikes.domains.workflow.domain.value_objects import WorkflowType


class CreateWorkflowStepRequest(BaseModel):
    transaction_id: str
    workflow_type: WorkflowType
    step_name: str = Field(..., min_length=1, max_length=100)
    step_order: int = Field(..., ge=1)
    created_by: str | None = None


class InitializeWorkflowRequest(BaseModel):
    created_by: str | None = Field(None, description="User seeding the workflow")


class UpdateWorkflowStepRequest(BaseModel):
    is_completed: bool | None = None
    completed_by: str | None = None


class CompleteWorkflowStepRequest(BaseModel):
    completed_by: str | None = None


class ResetWorkflowStepsRequest(BaseModel):
    workflow_type: WorkflowType

"""
Workflow API Routes

Endpoints under /workflow-steps. Routes validate identifiers and delegate to
WorkflowStepsService; the envelope's statusCode becomes the HTTP status.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ricebikes.api.responses import handle_service_response
from ricebikes.core.validators import parse_uuid
from ricebikes.domains.workflow.api.dependencies import get_workflow_steps_service
from ricebikes.domains.workflow.api.schemas import (
    CompleteWorkflowStepRequest,
    CreateWorkflowStepRequest,
    InitializeWorkflowRequest,
    ResetWorkflowStepsRequest,
    UpdateWorkflowStepRequest,
)
from ricebikes.domains.workflow.application import (
    CreateWorkflowStepData,
    UpdateWorkflowStepData,
    WorkflowStepFilters,
    WorkflowStepsService,
)
from ricebikes.domains.workflow.domain.value_objects import WorkflowType

router = APIRouter(prefix="/workflow-steps", tags=["Workflow Steps"])

WorkflowStepsServiceDep = Annotated[WorkflowStepsService, Depends(get_workflow_steps_service)]


def _parse_uuid(value: str, label: str) -> UUID:
    """Parse a UUID (v1-v5) or reject the request with 400."""
    try:
        return parse_uuid(value, label)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


def _parse_optional_uuid(value: str | None, label: str) -> UUID | None:
    return _parse_uuid(value, label) if value is not None else None


# =============================================================================
# Queries
# =============================================================================


@router.get("")
async def list_workflow_steps(
    service: WorkflowStepsServiceDep,
    transaction_id: str | None = None,
    workflow_type: WorkflowType | None = None,
    is_completed: bool | None = None,
    step_order: Annotated[int | None, Query(ge=1)] = None,
):
    """List workflow steps, optionally filtered."""
    filters = WorkflowStepFilters(
        transaction_id=_parse_optional_uuid(transaction_id, "transaction ID"),
        workflow_type=workflow_type,
        is_completed=is_completed,
        step_order=step_order,
    )
    return handle_service_response(await service.get_workflow_steps(filters))


@router.get("/transaction/{transaction_id}/{workflow_type}")
async def get_steps_by_transaction(transaction_id: str, workflow_type: WorkflowType, service: WorkflowStepsServiceDep):
    """Ordered steps of one workflow."""
    tid = _parse_uuid(transaction_id, "transaction ID")
    return handle_service_response(await service.get_workflow_steps_by_transaction(tid, workflow_type))


@router.get("/progress/{transaction_id}/{workflow_type}")
async def get_workflow_progress(transaction_id: str, workflow_type: WorkflowType, service: WorkflowStepsServiceDep):
    """Progress summary of one workflow."""
    tid = _parse_uuid(transaction_id, "transaction ID")
    return handle_service_response(await service.get_workflow_progress(tid, workflow_type))


@router.get("/{step_id}")
async def get_workflow_step(step_id: str, service: WorkflowStepsServiceDep):
    sid = _parse_uuid(step_id, "step ID")
    return handle_service_response(await service.get_workflow_step_by_id(sid))


# =============================================================================
# Commands
# =============================================================================


@router.post("")
async def create_workflow_step(request: CreateWorkflowStepRequest, service: WorkflowStepsServiceDep):
    """Create a single step."""
    data = CreateWorkflowStepData(
        transaction_id=_parse_uuid(request.transaction_id, "transaction ID"),
        workflow_type=request.workflow_type,
        step_name=request.step_name,
        step_order=request.step_order,
        created_by=_parse_optional_uuid(request.created_by, "user ID"),
    )
    return handle_service_response(await service.create_workflow_step(data))


@router.post("/initialize/bike-sales/{transaction_id}")
async def initialize_bike_sales(transaction_id: str, request: InitializeWorkflowRequest, service: WorkflowStepsServiceDep):
    """Seed the BikeSpec, Build, Creation, Checkout sequence."""
    tid = _parse_uuid(transaction_id, "transaction ID")
    created_by = _parse_optional_uuid(request.created_by, "user ID")
    return handle_service_response(await service.initialize_bike_sales_workflow(tid, created_by))


@router.post("/initialize/repair-process/{transaction_id}")
async def initialize_repair_process(
    transaction_id: str,
    request: InitializeWorkflowRequest,
    service: WorkflowStepsServiceDep,
):
    """Seed the Assessment, Parts Ordering, Repair Work, Quality Check sequence."""
    tid = _parse_uuid(transaction_id, "transaction ID")
    created_by = _parse_optional_uuid(request.created_by, "user ID")
    return handle_service_response(await service.initialize_repair_process_workflow(tid, created_by))


@router.post("/complete/{step_id}")
async def complete_workflow_step(
    step_id: str,
    service: WorkflowStepsServiceDep,
    request: CompleteWorkflowStepRequest | None = None,
):
    sid = _parse_uuid(step_id, "step ID")
    completed_by = _parse_optional_uuid(request.completed_by if request else None, "user ID")
    return handle_service_response(await service.complete_workflow_step(sid, completed_by))


@router.post("/uncomplete/{step_id}")
async def uncomplete_workflow_step(step_id: str, service: WorkflowStepsServiceDep):
    sid = _parse_uuid(step_id, "step ID")
    return handle_service_response(await service.uncomplete_workflow_step(sid))


@router.post("/reset/{transaction_id}")
async def reset_workflow_steps(transaction_id: str, request: ResetWorkflowStepsRequest, service: WorkflowStepsServiceDep):
    """Mark every step of the workflow incomplete."""
    tid = _parse_uuid(transaction_id, "transaction ID")
    return handle_service_response(await service.reset_workflow_steps(tid, request.workflow_type))


@router.put("/{step_id}")
async def update_workflow_step(step_id: str, request: UpdateWorkflowStepRequest, service: WorkflowStepsServiceDep):
    sid = _parse_uuid(step_id, "step ID")
    data = UpdateWorkflowStepData(
        is_completed=request.is_completed,
        completed_by=_parse_optional_uuid(request.completed_by, "user ID"),
    )
    return handle_service_response(await service.update_workflow_step(sid, data))


@router.delete("/{step_id}")
async def delete_workflow_step(step_id: str, service: WorkflowStepsServiceDep):
    sid = _parse_uuid(step_id, "step ID")
    return handle_service_response(await service.delete_workflow_step(sid))

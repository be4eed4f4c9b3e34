"""
API tests for the /workflow-steps endpoints.

The service dependency is overridden with an AsyncMock so requests never
reach the database; the tests cover routing, identifier validation and the
response envelope.
"""

import uuid
from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from ricebikes.core.service_response import ServiceResponse
from ricebikes.domains.workflow.api.dependencies import get_workflow_steps_service
from ricebikes.domains.workflow.application import WorkflowStepDTO, WorkflowStepsService
from ricebikes.domains.workflow.domain.value_objects import WorkflowType


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def mock_service(fastapi_app):
    service = AsyncMock(spec=WorkflowStepsService)
    fastapi_app.dependency_overrides[get_workflow_steps_service] = lambda: service
    return service


@pytest.fixture
def step_dto(transaction_id, user_id) -> WorkflowStepDTO:
    now = datetime.now(UTC)
    return WorkflowStepDTO(
        step_id=uuid.uuid4(),
        transaction_id=transaction_id,
        workflow_type=WorkflowType.BIKE_SALES,
        step_name="Build",
        step_order=2,
        is_completed=True,
        created_by=user_id,
        completed_by=user_id,
        created_at=now,
        completed_at=now,
        updated_at=now,
    )


# ============================================================================
# Queries
# ============================================================================


@pytest.mark.integration
@pytest.mark.api
def test_list_steps_empty(api_client, mock_service):
    mock_service.get_workflow_steps.return_value = ServiceResponse.ok("No workflow steps found", [])

    response = api_client.get("/workflow-steps", params={"is_completed": "false"})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "No workflow steps found",
        "responseObject": [],
        "statusCode": 200,
    }
    filters = mock_service.get_workflow_steps.await_args.args[0]
    assert filters.is_completed is False
    assert filters.transaction_id is None


@pytest.mark.integration
@pytest.mark.api
def test_list_steps_bad_transaction_filter(api_client, mock_service):
    response = api_client.get("/workflow-steps", params={"transaction_id": "abc"})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid transaction ID format"
    mock_service.get_workflow_steps.assert_not_awaited()


@pytest.mark.integration
@pytest.mark.api
def test_get_step_serializes_dto(api_client, mock_service, step_dto):
    # Arrange
    mock_service.get_workflow_step_by_id.return_value = ServiceResponse.ok(
        "Workflow step retrieved successfully", step_dto
    )

    # Act
    response = api_client.get(f"/workflow-steps/{step_dto.step_id}")

    # Assert
    body = response.json()
    assert response.status_code == 200
    assert body["responseObject"]["step_id"] == str(step_dto.step_id)
    assert body["responseObject"]["workflow_type"] == "bike_sales"
    mock_service.get_workflow_step_by_id.assert_awaited_once_with(step_dto.step_id)


@pytest.mark.integration
@pytest.mark.api
def test_get_step_malformed_id(api_client, mock_service):
    response = api_client.get("/workflow-steps/12345")

    body = response.json()
    assert response.status_code == 400
    assert body["success"] is False
    assert body["statusCode"] == 400
    assert body["message"] == "Invalid step ID format"
    mock_service.get_workflow_step_by_id.assert_not_awaited()


@pytest.mark.integration
@pytest.mark.api
def test_get_step_id_with_trailing_newline(api_client, mock_service):
    response = api_client.get(f"/workflow-steps/{uuid.uuid4()}%0A")

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid step ID format"
    mock_service.get_workflow_step_by_id.assert_not_awaited()


@pytest.mark.integration
@pytest.mark.api
def test_get_step_not_found(api_client, mock_service):
    mock_service.get_workflow_step_by_id.return_value = ServiceResponse.failure("Workflow step not found", None, 404)

    response = api_client.get(f"/workflow-steps/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json()["statusCode"] == 404


@pytest.mark.integration
@pytest.mark.api
def test_steps_by_transaction_unknown_workflow_type(api_client, mock_service, transaction_id):
    response = api_client.get(f"/workflow-steps/transaction/{transaction_id}/assembly_line")

    assert response.status_code == 400
    assert response.json()["message"].startswith("Invalid input")
    mock_service.get_workflow_steps_by_transaction.assert_not_awaited()


@pytest.mark.integration
@pytest.mark.api
def test_progress_route(api_client, mock_service, transaction_id):
    mock_service.get_workflow_progress.return_value = ServiceResponse.failure(
        "No workflow found for this transaction and type", None, 404
    )

    response = api_client.get(f"/workflow-steps/progress/{transaction_id}/bike_sales")

    assert response.status_code == 404
    mock_service.get_workflow_progress.assert_awaited_once_with(transaction_id, WorkflowType.BIKE_SALES)


# ============================================================================
# Commands
# ============================================================================


@pytest.mark.integration
@pytest.mark.api
def test_create_step_validation_error(api_client, mock_service, transaction_id):
    response = api_client.post(
        "/workflow-steps",
        json={"transaction_id": str(transaction_id), "workflow_type": "bike_sales", "step_name": "", "step_order": 0},
    )

    body = response.json()
    assert response.status_code == 400
    assert body["success"] is False
    assert {e["field"] for e in body["responseObject"]} == {"body.step_name", "body.step_order"}
    mock_service.create_workflow_step.assert_not_awaited()


@pytest.mark.integration
@pytest.mark.api
def test_create_step(api_client, mock_service, step_dto, transaction_id, user_id):
    # Arrange
    mock_service.create_workflow_step.return_value = ServiceResponse.ok(
        "Workflow step created successfully", step_dto, 201
    )

    # Act
    response = api_client.post(
        "/workflow-steps",
        json={
            "transaction_id": str(transaction_id),
            "workflow_type": "bike_sales",
            "step_name": "Build",
            "step_order": 2,
            "created_by": str(user_id),
        },
    )

    # Assert
    assert response.status_code == 201
    data = mock_service.create_workflow_step.await_args.args[0]
    assert data.transaction_id == transaction_id
    assert data.created_by == user_id


@pytest.mark.integration
@pytest.mark.api
def test_initialize_bike_sales(api_client, mock_service, transaction_id, user_id):
    mock_service.initialize_bike_sales_workflow.return_value = ServiceResponse.ok(
        "bike_sales workflow initialized successfully", [], 201
    )

    response = api_client.post(
        f"/workflow-steps/initialize/bike-sales/{transaction_id}", json={"created_by": str(user_id)}
    )

    assert response.status_code == 201
    mock_service.initialize_bike_sales_workflow.assert_awaited_once_with(transaction_id, user_id)


@pytest.mark.integration
@pytest.mark.api
def test_initialize_repair_process_conflict(api_client, mock_service, transaction_id, user_id):
    mock_service.initialize_repair_process_workflow.return_value = ServiceResponse.failure(
        "Workflow already exists for this transaction", None, 409
    )

    response = api_client.post(
        f"/workflow-steps/initialize/repair-process/{transaction_id}", json={"created_by": str(user_id)}
    )

    assert response.status_code == 409
    assert response.json()["message"] == "Workflow already exists for this transaction"


@pytest.mark.integration
@pytest.mark.api
def test_initialize_malformed_user(api_client, mock_service, transaction_id):
    response = api_client.post(f"/workflow-steps/initialize/bike-sales/{transaction_id}", json={"created_by": "bob"})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid user ID format"
    mock_service.initialize_bike_sales_workflow.assert_not_awaited()


@pytest.mark.integration
@pytest.mark.api
def test_complete_without_body(api_client, mock_service, step_dto):
    mock_service.complete_workflow_step.return_value = ServiceResponse.ok(
        "Workflow step completed successfully", step_dto
    )

    response = api_client.post(f"/workflow-steps/complete/{step_dto.step_id}")

    assert response.status_code == 200
    mock_service.complete_workflow_step.assert_awaited_once_with(step_dto.step_id, None)


@pytest.mark.integration
@pytest.mark.api
def test_uncomplete(api_client, mock_service, step_dto):
    mock_service.uncomplete_workflow_step.return_value = ServiceResponse.ok(
        "Workflow step marked as incomplete", step_dto
    )

    response = api_client.post(f"/workflow-steps/uncomplete/{step_dto.step_id}")

    assert response.status_code == 200
    assert response.json()["message"] == "Workflow step marked as incomplete"


@pytest.mark.integration
@pytest.mark.api
def test_reset_requires_workflow_type(api_client, mock_service, transaction_id):
    response = api_client.post(f"/workflow-steps/reset/{transaction_id}", json={})

    assert response.status_code == 400
    mock_service.reset_workflow_steps.assert_not_awaited()


@pytest.mark.integration
@pytest.mark.api
def test_reset(api_client, mock_service, transaction_id):
    mock_service.reset_workflow_steps.return_value = ServiceResponse.ok("All workflow steps reset to incomplete", [])

    response = api_client.post(f"/workflow-steps/reset/{transaction_id}", json={"workflow_type": "repair_process"})

    assert response.status_code == 200
    mock_service.reset_workflow_steps.assert_awaited_once_with(transaction_id, WorkflowType.REPAIR_PROCESS)


@pytest.mark.integration
@pytest.mark.api
def test_update_step(api_client, mock_service, step_dto, user_id):
    mock_service.update_workflow_step.return_value = ServiceResponse.ok("Workflow step updated successfully", step_dto)

    response = api_client.put(
        f"/workflow-steps/{step_dto.step_id}", json={"is_completed": True, "completed_by": str(user_id)}
    )

    assert response.status_code == 200
    data = mock_service.update_workflow_step.await_args.args[1]
    assert data.is_completed is True
    assert data.completed_by == user_id


@pytest.mark.integration
@pytest.mark.api
def test_delete_step(api_client, mock_service):
    step_id = uuid.uuid4()
    mock_service.delete_workflow_step.return_value = ServiceResponse.ok("Workflow step deleted successfully", None)

    response = api_client.delete(f"/workflow-steps/{step_id}")

    assert response.status_code == 200
    assert response.json()["responseObject"] is None


@pytest.mark.integration
@pytest.mark.api
def test_unknown_route_uses_envelope(api_client):
    response = api_client.get("/bikes")

    assert response.status_code == 404
    assert response.json()["success"] is False

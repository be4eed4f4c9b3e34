"""
Unit tests for the fixed workflow step sequences.
"""

import uuid

import pytest

from ricebikes.core.domain import ValidationException
from ricebikes.domains.workflow.domain.step_templates import build_workflow_steps, supported_workflow_types
from ricebikes.domains.workflow.domain.value_objects import WorkflowType


@pytest.mark.unit
def test_bike_sales_sequence(transaction_id, user_id):
    steps = build_workflow_steps(transaction_id, WorkflowType.BIKE_SALES, user_id)

    assert [(s.step_order, s.step_name) for s in steps] == [
        (1, "BikeSpec"),
        (2, "Build"),
        (3, "Creation"),
        (4, "Checkout"),
    ]
    assert all(not s.is_completed for s in steps)
    assert all(s.transaction_id == transaction_id and s.created_by == user_id for s in steps)


@pytest.mark.unit
def test_repair_process_sequence(transaction_id, user_id):
    steps = build_workflow_steps(transaction_id, WorkflowType.REPAIR_PROCESS, user_id)

    assert [s.step_name for s in steps] == ["Assessment", "Parts Ordering", "Repair Work", "Quality Check"]
    assert [s.step_order for s in steps] == [1, 2, 3, 4]


@pytest.mark.unit
@pytest.mark.parametrize("workflow_type", [WorkflowType.ORDER_FULFILLMENT, WorkflowType.CUSTOM_WORKFLOW])
def test_unsupported_workflow_types_raise(workflow_type):
    with pytest.raises(ValidationException) as exc_info:
        build_workflow_steps(uuid.uuid4(), workflow_type, uuid.uuid4())

    assert exc_info.value.message == "Unsupported workflow type"


@pytest.mark.unit
def test_supported_workflow_types():
    assert supported_workflow_types() == [WorkflowType.BIKE_SALES, WorkflowType.REPAIR_PROCESS]

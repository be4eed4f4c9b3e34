"""
Unit tests for the workflow step repository.

The session is mocked; rows are MagicMocks carrying WorkflowStepModel columns.
"""

import uuid
from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from ricebikes.core.domain import ConflictException, EntityNotFoundException, ValidationException
from ricebikes.domains.workflow.application.dto import WorkflowStepFilters
from ricebikes.domains.workflow.domain.entities import WorkflowStep
from ricebikes.domains.workflow.domain.value_objects import WorkflowType
from ricebikes.domains.workflow.infrastructure.repositories import (
    SQLAlchemyWorkflowStepRepository,
    translate_integrity_error,
)


class FakePgError(Exception):
    def __init__(self, sqlstate):
        super().__init__(f"sqlstate {sqlstate}")
        self.sqlstate = sqlstate


def _integrity_error(sqlstate):
    return IntegrityError("INSERT INTO \"WorkflowSteps\" ...", {}, FakePgError(sqlstate))


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def sample_step_model(transaction_id, user_id):
    """Sample SQLAlchemy workflow step row."""
    model = MagicMock()
    model.step_id = uuid.uuid4()
    model.transaction_id = transaction_id
    model.workflow_type = "bike_sales"
    model.step_name = "Build"
    model.step_order = 2
    model.is_completed = False
    model.created_by = user_id
    model.completed_by = None
    model.completed_at = None
    model.created_at = datetime.now(UTC)
    model.updated_at = datetime.now(UTC)
    return model


@pytest.fixture
def repository(mock_async_session):
    return SQLAlchemyWorkflowStepRepository(mock_async_session)


def _rows_result(rows):
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    return result


def _single_result(row):
    result = MagicMock()
    result.scalar_one_or_none.return_value = row
    return result


# ============================================================================
# Integrity error translation
# ============================================================================


@pytest.mark.unit
@pytest.mark.repository
def test_unique_violation_becomes_conflict():
    assert isinstance(translate_integrity_error(_integrity_error("23505")), ConflictException)


@pytest.mark.unit
@pytest.mark.repository
def test_foreign_key_violation_becomes_validation_error():
    assert isinstance(translate_integrity_error(_integrity_error("23503")), ValidationException)


@pytest.mark.unit
@pytest.mark.repository
def test_other_integrity_errors_pass_through():
    error = _integrity_error("23514")
    assert translate_integrity_error(error) is error


# ============================================================================
# Queries
# ============================================================================


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_find_maps_rows(repository, mock_async_session, sample_step_model):
    # Arrange
    mock_async_session.execute.return_value = _rows_result([sample_step_model])

    # Act
    steps = await repository.find(WorkflowStepFilters(is_completed=False, step_order=2))

    # Assert
    assert len(steps) == 1
    assert steps[0].workflow_type == WorkflowType.BIKE_SALES
    assert steps[0].step_name == "Build"
    mock_async_session.execute.assert_called_once()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_find_orders_by_step_order(repository, mock_async_session):
    mock_async_session.execute.return_value = _rows_result([])

    await repository.find()

    query = mock_async_session.execute.call_args.args[0]
    assert "ORDER BY" in str(query)
    assert "step_order" in str(query).split("ORDER BY")[1]


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_find_by_id_not_found(repository, mock_async_session):
    mock_async_session.execute.return_value = _single_result(None)

    assert await repository.find_by_id(uuid.uuid4()) is None


# ============================================================================
# Create
# ============================================================================


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_create_assigns_id(repository, mock_async_session, transaction_id, user_id):
    # Arrange
    step = WorkflowStep(transaction_id, WorkflowType.BIKE_SALES, "BikeSpec", 1, user_id)

    # Act
    created = await repository.create(step)

    # Assert
    assert created.step_id is not None
    assert created.is_completed is False
    assert created.created_at is not None
    mock_async_session.add.assert_called_once()
    mock_async_session.commit.assert_awaited_once()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_create_requires_creator(repository, mock_async_session, transaction_id):
    step = WorkflowStep(transaction_id, WorkflowType.BIKE_SALES, "BikeSpec", 1, None)

    with pytest.raises(ValidationException):
        await repository.create(step)

    mock_async_session.add.assert_not_called()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_create_duplicate_order_conflicts(repository, mock_async_session, transaction_id, user_id):
    # Arrange
    mock_async_session.commit.side_effect = _integrity_error("23505")
    step = WorkflowStep(transaction_id, WorkflowType.BIKE_SALES, "BikeSpec", 1, user_id)

    # Act / Assert
    with pytest.raises(ConflictException):
        await repository.create(step)
    mock_async_session.rollback.assert_awaited_once()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_create_many_single_commit_sorted(repository, mock_async_session, transaction_id, user_id):
    # Arrange
    steps = [
        WorkflowStep(transaction_id, WorkflowType.REPAIR_PROCESS, "Repair Work", 3, user_id),
        WorkflowStep(transaction_id, WorkflowType.REPAIR_PROCESS, "Assessment", 1, user_id),
    ]

    # Act
    created = await repository.create_many(steps)

    # Assert
    assert [s.step_order for s in created] == [1, 3]
    mock_async_session.add_all.assert_called_once()
    mock_async_session.commit.assert_awaited_once()


# ============================================================================
# Update / Delete / Reset
# ============================================================================


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_update_complete_stamps_time(repository, mock_async_session, sample_step_model, user_id):
    # Arrange
    mock_async_session.execute.return_value = _single_result(sample_step_model)

    # Act
    step = await repository.update(sample_step_model.step_id, is_completed=True, completed_by=user_id)

    # Assert
    assert step.is_completed is True
    assert step.completed_at is not None
    assert step.completed_by == user_id
    mock_async_session.commit.assert_awaited_once()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_update_uncomplete_clears_fields(repository, mock_async_session, sample_step_model, user_id):
    # Arrange
    sample_step_model.is_completed = True
    sample_step_model.completed_by = user_id
    sample_step_model.completed_at = datetime.now(UTC)
    mock_async_session.execute.return_value = _single_result(sample_step_model)

    # Act
    step = await repository.update(sample_step_model.step_id, is_completed=False)

    # Assert
    assert step.is_completed is False
    assert step.completed_at is None
    assert step.completed_by is None


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_update_completed_by_alone_is_ignored(repository, mock_async_session, sample_step_model, user_id):
    # Arrange
    mock_async_session.execute.return_value = _single_result(sample_step_model)

    # Act
    step = await repository.update(sample_step_model.step_id, is_completed=None, completed_by=user_id)

    # Assert
    assert step.is_completed is False
    assert step.completed_by is None
    assert step.completed_at is None
    assert sample_step_model.completed_by is None


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_update_missing_step(repository, mock_async_session):
    mock_async_session.execute.return_value = _single_result(None)

    with pytest.raises(EntityNotFoundException):
        await repository.update(uuid.uuid4(), is_completed=True)


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_delete_returns_removed_step(repository, mock_async_session, sample_step_model):
    mock_async_session.execute.return_value = _single_result(sample_step_model)

    deleted = await repository.delete(sample_step_model.step_id)

    assert deleted.step_id == sample_step_model.step_id
    mock_async_session.delete.assert_awaited_once_with(sample_step_model)


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_delete_missing_step(repository, mock_async_session):
    mock_async_session.execute.return_value = _single_result(None)

    assert await repository.delete(uuid.uuid4()) is None
    mock_async_session.commit.assert_not_awaited()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_reset_all_updates_then_rereads(repository, mock_async_session, sample_step_model, transaction_id):
    # Arrange
    mock_async_session.execute.side_effect = [MagicMock(), _rows_result([sample_step_model])]

    # Act
    steps = await repository.reset_all(transaction_id, WorkflowType.BIKE_SALES)

    # Assert
    assert len(steps) == 1
    assert mock_async_session.execute.await_count == 2
    update_stmt = mock_async_session.execute.await_args_list[0].args[0]
    assert str(update_stmt).startswith("UPDATE")
    mock_async_session.commit.assert_awaited_once()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_reset_all_twice_is_stable(repository, mock_async_session, sample_step_model, transaction_id):
    # Arrange
    mock_async_session.execute.side_effect = [
        MagicMock(),
        _rows_result([sample_step_model]),
        MagicMock(),
        _rows_result([sample_step_model]),
    ]

    # Act
    first = await repository.reset_all(transaction_id, WorkflowType.BIKE_SALES)
    second = await repository.reset_all(transaction_id, WorkflowType.BIKE_SALES)

    # Assert
    assert first == second
    assert all(s.is_completed is False and s.completed_by is None for s in second)
    assert mock_async_session.commit.await_count == 2

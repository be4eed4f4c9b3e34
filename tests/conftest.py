"""
Shared pytest fixtures for all tests.

Provides mock database sessions, sample identifiers and workflow steps,
and a FastAPI test client.
"""

import os
import uuid
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

# Ensure test environment before application modules read settings
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("SLACK_NOTIFICATIONS_ENABLED", "false")

from ricebikes.config.settings import Settings  # noqa: E402
from ricebikes.domains.transactions.domain.entities import Transaction  # noqa: E402
from ricebikes.domains.workflow.domain.entities import WorkflowStep  # noqa: E402
from ricebikes.domains.workflow.domain.value_objects import WorkflowType  # noqa: E402


# ============================================================================
# IDENTIFIERS
# ============================================================================


@pytest.fixture
def transaction_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def user_id() -> uuid.UUID:
    return uuid.uuid4()


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def mock_async_session():
    """Create a mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.add = MagicMock()
    session.add_all = MagicMock()
    session.delete = AsyncMock()
    return session


# ============================================================================
# DOMAIN FIXTURES
# ============================================================================


@pytest.fixture
def make_steps(transaction_id, user_id):
    """Factory for persisted bike_sales steps with the first ``completed`` steps done."""

    def _make(completed: int = 0, total: int = 4) -> list[WorkflowStep]:
        names = ["BikeSpec", "Build", "Creation", "Checkout"]
        now = datetime.now(UTC)
        steps = []
        for order in range(1, total + 1):
            done = order <= completed
            steps.append(
                WorkflowStep(
                    step_id=uuid.uuid4(),
                    transaction_id=transaction_id,
                    workflow_type=WorkflowType.BIKE_SALES,
                    step_name=names[(order - 1) % len(names)],
                    step_order=order,
                    created_by=user_id,
                    is_completed=done,
                    completed_at=now if done else None,
                    completed_by=user_id if done else None,
                    created_at=now,
                    updated_at=now,
                )
            )
        return steps

    return _make


@pytest.fixture
def sample_transaction(transaction_id) -> Transaction:
    return Transaction(
        transaction_num=42,
        transaction_id=transaction_id,
        transaction_type="Inpatient",
        customer_id=uuid.uuid4(),
        total_cost=120.5,
        date_created=datetime.now(UTC),
    )


# ============================================================================
# API FIXTURES
# ============================================================================


@pytest.fixture
def test_settings() -> Settings:
    return Settings(ENVIRONMENT="test", DEBUG=False, SLACK_NOTIFICATIONS_ENABLED=False)


@pytest.fixture
def fastapi_app(test_settings):
    """Create FastAPI app for testing."""
    from ricebikes.core.app_factory import create_app
    from ricebikes.core.container import reset_container

    reset_container()
    app = create_app(test_settings)
    yield app
    app.dependency_overrides.clear()
    reset_container()


@pytest.fixture
def api_client(fastapi_app) -> TestClient:
    """Create test client for API testing (lifespan not started)."""
    return TestClient(fastapi_app)

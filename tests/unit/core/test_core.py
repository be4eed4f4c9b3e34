"""
Unit tests for the response envelope, validators, exceptions and settings.
"""

import uuid

import pytest
from pydantic import BaseModel, ValidationError

from ricebikes.config.settings import Settings
from ricebikes.core.domain import ConflictException, EntityNotFoundException, StatusEnum, ValidationException
from ricebikes.core.service_response import ServiceResponse
from ricebikes.core.validators import is_valid_uuid, parse_uuid
from ricebikes.domains.workflow.domain.value_objects import WorkflowType


class _Item(BaseModel):
    item_id: uuid.UUID
    name: str


# ============================================================================
# ServiceResponse
# ============================================================================


@pytest.mark.unit
def test_payload_uses_camel_case_keys():
    item_id = uuid.uuid4()
    response = ServiceResponse.ok("Item found", _Item(item_id=item_id, name="tube"))

    assert response.to_payload() == {
        "success": True,
        "message": "Item found",
        "responseObject": {"item_id": str(item_id), "name": "tube"},
        "statusCode": 200,
    }


@pytest.mark.unit
def test_failure_defaults_to_400():
    response = ServiceResponse.failure("Bad input")

    assert response.success is False
    assert response.status_code == 400
    assert response.response_object is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "exc,status",
    [
        (ValidationException("bad", field="created_by"), 400),
        (EntityNotFoundException("WorkflowStep", "abc"), 404),
        (ConflictException("dup"), 409),
    ],
)
def test_from_exception_status(exc, status):
    response = ServiceResponse.from_exception(exc)

    assert response.status_code == status
    assert response.message == exc.message


# ============================================================================
# Exceptions
# ============================================================================


@pytest.mark.unit
def test_validation_exception_details():
    exc = ValidationException("created_by user ID is required", field="created_by")

    assert exc.to_dict() == {
        "error": "VALIDATION_ERROR",
        "message": "created_by user ID is required",
        "details": {"field": "created_by"},
    }


@pytest.mark.unit
def test_not_found_default_message():
    exc = EntityNotFoundException("Transaction", 12)

    assert exc.message == "Transaction with ID 12 not found"
    assert exc.details["entity_id"] == "12"


# ============================================================================
# Validators
# ============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        (str(uuid.uuid4()), True),
        (str(uuid.uuid1()), True),
        (str(uuid.uuid4()).upper(), True),
        ("00000000-0000-0000-0000-000000000000", False),
        ("not-a-uuid", False),
        (str(uuid.uuid4()) + "\n", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_uuid(value, expected):
    assert is_valid_uuid(value) is expected


@pytest.mark.unit
def test_parse_uuid_rejects_garbage():
    with pytest.raises(ValueError, match="Invalid step ID format"):
        parse_uuid("123", "step ID")


@pytest.mark.unit
def test_parse_uuid_rejects_trailing_newline():
    with pytest.raises(ValueError, match="Invalid transaction ID format"):
        parse_uuid(f"{uuid.uuid4()}\n", "transaction ID")


@pytest.mark.unit
def test_status_enum_from_string():
    assert issubclass(WorkflowType, StatusEnum)
    assert WorkflowType.from_string("BIKE_SALES") == WorkflowType.BIKE_SALES
    assert "repair_process" in WorkflowType.values()
    with pytest.raises(ValueError):
        WorkflowType.from_string("assembly")


# ============================================================================
# Settings
# ============================================================================


@pytest.mark.unit
def test_database_urls_escape_password():
    settings = Settings(DB_USER="pos", DB_PASSWORD="p@ss", DB_HOST="db", DB_NAME="shop")

    assert settings.database_url == "postgresql://pos:p%40ss@db:5432/shop"
    assert settings.async_database_url.startswith("postgresql+asyncpg://pos:p%40ss@db")


@pytest.mark.unit
def test_cors_origins_split():
    settings = Settings(CORS_ORIGINS="https://a.test, https://b.test,")

    assert settings.cors_origins == ["https://a.test", "https://b.test"]


@pytest.mark.unit
def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="chatty")


@pytest.mark.unit
def test_test_environment_is_development():
    assert Settings(ENVIRONMENT="test", DEBUG=False).is_development is True
    assert Settings(ENVIRONMENT="production", DEBUG=False).is_development is False

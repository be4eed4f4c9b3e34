"""
Domain Exceptions

These exceptions represent business rule violations and domain-specific errors.
Services translate them into failed ServiceResponse envelopes; anything that
escapes is translated by the API exception handlers.
"""

from http import HTTPStatus
from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "WORKFLOW_ALREADY_EXISTS")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Missing required fields, unsupported enum values and similar bad input.
    """

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class EntityNotFoundException(DomainException):
    """
    Raised when an entity is not found.
    """

    status_code = HTTPStatus.NOT_FOUND

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class ConflictException(DomainException):
    """Raised when an operation collides with existing state (duplicate workflow, unique key)."""

    status_code = HTTPStatus.CONFLICT

    def __init__(self, message: str, entity_type: str | None = None, details: dict[str, Any] | None = None):
        self.entity_type = entity_type
        details = details or {}
        if entity_type:
            details["entity_type"] = entity_type
        super().__init__(message, "CONFLICT", details)

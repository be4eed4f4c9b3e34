"""
Uniform response envelope returned by every service and route.

Serialized as ``{success, message, responseObject, statusCode}``.
"""

from http import HTTPStatus
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ricebikes.core.domain.exceptions import DomainException

T = TypeVar("T")


class ServiceResponse(BaseModel, Generic[T]):
    """Result of a service operation, successful or not."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    response_object: T | None = Field(default=None, alias="responseObject")
    status_code: int = Field(default=HTTPStatus.OK, alias="statusCode")

    @classmethod
    def ok(
        cls,
        message: str,
        response_object: Any = None,
        status_code: int = HTTPStatus.OK,
    ) -> "ServiceResponse":
        return cls(success=True, message=message, response_object=response_object, status_code=int(status_code))

    @classmethod
    def failure(
        cls,
        message: str,
        response_object: Any = None,
        status_code: int = HTTPStatus.BAD_REQUEST,
    ) -> "ServiceResponse":
        return cls(success=False, message=message, response_object=response_object, status_code=int(status_code))

    @classmethod
    def from_exception(cls, exc: DomainException) -> "ServiceResponse":
        """Build a failure envelope from a domain exception."""
        return cls.failure(exc.message, None, exc.status_code)

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict using the wire (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True)

"""
Helpers turning ServiceResponse envelopes into HTTP responses.
"""

from http import HTTPStatus
from typing import Any

from fastapi.responses import JSONResponse

from ricebikes.core.service_response import ServiceResponse


def handle_service_response(service_response: ServiceResponse) -> JSONResponse:
    """Serialize the envelope, using its statusCode as the HTTP status."""
    return JSONResponse(status_code=service_response.status_code, content=service_response.to_payload())


def error_response(message: str, status_code: int = HTTPStatus.BAD_REQUEST, details: Any = None) -> JSONResponse:
    """Failure envelope for errors raised before any service call."""
    return handle_service_response(ServiceResponse.failure(message, details, status_code))

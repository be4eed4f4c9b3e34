"""
Exception handlers for the FastAPI application.

Anything that escapes a route is rendered with the standard envelope.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException

from ricebikes.api.responses import error_response
from ricebikes.core.domain import DomainException

logger = logging.getLogger(__name__)


def _format_errors(errors: list[dict]) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in errors
    ]


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle domain exceptions that were not converted by a service."""
    if not isinstance(exc, DomainException):
        return await global_exception_handler(request, exc)
    logger.warning(f"Domain error on {request.url.path}: {exc.code} {exc.message}")
    return error_response(exc.message, exc.status_code)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException (including 404/405 from routing)."""
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    response = error_response(str(http_exc.detail), http_exc.status_code)
    if http_exc.headers:
        response.headers.update(http_exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Request body/query validation errors become 400 envelopes listing each field error."""
    if not isinstance(exc, (RequestValidationError, ValidationError)):
        return error_response(str(exc), status.HTTP_400_BAD_REQUEST)

    errors = _format_errors(exc.errors())
    logger.warning(f"Validation error on {request.url.path}: {errors}")

    summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
    return error_response(f"Invalid input: {summary}", status.HTTP_400_BAD_REQUEST, errors)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=True,
    )
    return error_response("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")

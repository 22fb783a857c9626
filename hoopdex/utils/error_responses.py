"""Helper functions for constructing client-facing error responses.

Routers and exception handlers share these builders so every failure body has
the same shape: ``{"error": ...}`` for read endpoints and
``{"success": false, "error": ...}`` for endpoints that acknowledge writes.
Callers pass only short generic messages; diagnostic detail belongs in logs.
"""

from __future__ import annotations

from collections.abc import Sequence

from fastapi.responses import JSONResponse

from hoopdex.schemas.error import (
    ErrorResponse,
    FailureResponse,
    ValidationErrorDetail,
    ValidationErrorResponse,
)

__all__ = [
    "build_error_response",
    "build_failure_response",
    "build_validation_error_response",
    "error_json",
]


def build_error_response(message: str) -> ErrorResponse:
    return ErrorResponse(error=message)


def build_failure_response(message: str) -> FailureResponse:
    return FailureResponse(success=False, error=message)


def build_validation_error_response(
    *,
    errors: Sequence[ValidationErrorDetail],
    message: str,
) -> ValidationErrorResponse:
    """Construct a ``ValidationErrorResponse`` listing every failed field.

    ``errors`` is copied into a list so a generator cannot be consumed twice.
    """

    return ValidationErrorResponse(success=False, error=message, errors=list(errors))


def error_json(status_code: int, body: ErrorResponse) -> JSONResponse:
    """Wrap ``body`` in a ``JSONResponse`` with ``status_code``."""

    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))

"""Error Handlers — global exception handlers for the School Finder API.

Invariants:
    - SchoolFinderError → its own envelope and http_status
    - RequestValidationError → the same 400 {field, reason} envelope as ValidationError
    - Exception (catch-all) → 500, never leaks internal details
    - Every envelope carries success=False
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from schoolfinder.core.errors import (
    SchoolFinderError, ValidationError, ValidationReason,
    ErrorCategory, ErrorSeverity,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SchoolFinderError)
    async def domain_error_handler(request: Request, exc: SchoolFinderError):
        """Handle validation and storage errors raised by services."""
        exc.context.path = request.url.path
        if isinstance(exc, ValidationError):
            logger.warning(
                f"Rejected input: {exc.message}",
                extra={
                    "error_code": exc.code,
                    "path": request.url.path,
                    "field": exc.field,
                },
            )
        else:
            logger.error(
                f"SchoolFinderError: {exc.message}",
                extra={"error_code": exc.code, "path": request.url.path},
            )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle missing or malformed request bodies rejected by FastAPI."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        error = _to_validation_error(exc)
        error.context.path = request.url.path
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _to_validation_error(exc: RequestValidationError) -> ValidationError:
    """Fold FastAPI's error list into one ValidationError (first error wins)."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = first.get("loc") or ("body",)
    field = str(loc[0])
    if first.get("type") == "missing" and len(loc) == 1:
        return ValidationError(
            f"Request {field} is required", field, ValidationReason.MISSING,
        )
    return ValidationError(
        f"Request {field} must be a JSON object", field,
        ValidationReason.INVALID_BODY,
    )

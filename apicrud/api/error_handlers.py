"""Error Handlers — global exception handlers for the users API.

Invariants:
    - ApiCrudError → structured JSON with error code, message, severity
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details, carries the request id

Design Decisions:
    - Three-layer handler: domain (ApiCrudError), validation (Pydantic), catch-all (Exception)
    - request_id from RequestContextMiddleware copied into the error context
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from apicrud.core.errors import ApiCrudError, ErrorCategory, ErrorSeverity
from apicrud.infrastructure.request_context import REQUEST_ID_HEADER

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_apicrud_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _register_apicrud_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(ApiCrudError)
    async def apicrud_error_handler(request: Request, exc: ApiCrudError):
        """Handle validation and not-found errors raised by the store."""
        exc.context.request_id = _request_id(request)
        logger.warning(
            f"ApiCrudError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "request_id": exc.context.request_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed bodies and path parameters."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"request_id": _request_id(request)},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        request_id = _request_id(request)
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"request_id": request_id},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                    "context": {"request_id": request_id},
                },
            },
            headers={REQUEST_ID_HEADER: request_id} if request_id else None,
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }

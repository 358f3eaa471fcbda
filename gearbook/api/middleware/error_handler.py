"""
Error handling.

Standardizes all API error responses to include:
- error_code: machine-readable identifier
- message: human-readable description
- hint: suggested recovery action

Domain errors are converted by an exception handler registered on the
app; the middleware is the last resort for anything unexpected.
"""

import json
import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from gearbook.application.dto.responses import ErrorResponse
from gearbook.config import get_logger
from gearbook.core.exceptions import (
    ConfigurationError,
    GearbookError,
    InvalidEnumError,
    NotFoundError,
    OverbookingConflictError,
    StorageError,
    ValidationError,
)

logger = get_logger(__name__)


# Map exceptions to HTTP status codes; first match wins
EXCEPTION_STATUS_MAP: dict[type[Exception], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidEnumError: status.HTTP_400_BAD_REQUEST,
    OverbookingConflictError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Hint messages per error code
HINT_MAP: dict[str, str] = {
    "INVENTORY_ITEM_NOT_FOUND": "Check the item ID and try GET /api/inventory to list the catalog.",
    "REPAIR_LOG_NOT_FOUND": "Check the repair ID and try GET /api/inventory/{item_id}/repairs.",
    "EVENT_NOT_FOUND": "Check the event ID.",
    "BOOKING_LINE_NOT_FOUND": "Check the line ID and try GET /api/events/{id}/inventory-items.",
    "EQUIPMENT_SET_NOT_FOUND": "Check the set ID and try GET /api/sets to list available sets.",
    "SET_ITEM_NOT_FOUND": "Check the set item ID and try GET /api/sets/{id}.",
    "QUOTE_NOT_FOUND": "Check the quote ID and try GET /api/quotes to list quotes.",
    "QUOTE_ITEM_NOT_FOUND": "Check the item ID and try GET /api/quotes/{id}.",
    "OVERBOOKING_CONFLICT": (
        "Reduce the quantity, pick other dates, or check "
        "GET /api/inventory/{item_id}/availability first."
    ),
    "CAPACITY_EXCEEDED": "A repair cannot affect more units than the item has in stock.",
    "INVALID_ENUM": "Use one of the allowed values listed in the message.",
    "INVALID_STATUS": "Use one of the allowed status values listed in the message.",
    "VALIDATION_ERROR": "Check the request body against the API schema.",
    "DATABASE_ERROR": "A database operation failed. Check server logs.",
}

# Default hints by HTTP status code
STATUS_HINTS: dict[int, str] = {
    400: "Check the request parameters and body.",
    404: "The requested resource was not found. Verify the ID.",
    409: "The request conflicts with the current state of the resource.",
    422: "The request could not be processed. Check the input format.",
    500: "An internal error occurred. Check server logs.",
}


def _get_hint(error_code: str, status_code: int) -> str:
    """Resolve hint from error code, falling back to status-based hint."""
    return HINT_MAP.get(error_code) or STATUS_HINTS.get(status_code, "")


def status_for(exc: Exception) -> int:
    """HTTP status for an exception."""
    for exc_type, code in EXCEPTION_STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(request: Request, exc: Exception, status_code: int) -> dict:
    """Build the JSON body for an error response."""
    details = None
    if isinstance(exc, GearbookError):
        error_code = exc.code
        message = exc.message
        if exc.details:
            details = jsonable_encoder(exc.details)
        detail = json.dumps(details) if details else None
    else:
        error_code = exc.__class__.__name__
        message = str(exc) or "An internal error occurred"
        detail = None

    return ErrorResponse(
        error_code=error_code,
        message=message,
        hint=_get_hint(error_code, status_code),
        detail=detail,
        details=details,
        path=request.url.path,
    ).model_dump(mode="json")


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware.

    Converts exceptions that escaped the route handlers to standardized
    JSON error responses.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Handle request with error catching."""
        try:
            return await call_next(request)

        except Exception as e:
            return self._handle_exception(request, e)

    def _handle_exception(
        self,
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Convert exception to standardized JSON response."""
        status_code = status_for(exc)

        logger.error(
            "unhandled_exception",
            request_id=getattr(request.state, "request_id", None),
            path=request.url.path,
            error_type=exc.__class__.__name__,
            error=str(exc),
            traceback=traceback.format_exc() if status_code >= 500 else None,
        )

        return JSONResponse(
            status_code=status_code,
            content=error_body(request, exc, status_code),
        )


def setup_exception_handlers(app: FastAPI) -> None:
    """Set up FastAPI exception handlers."""
    from fastapi.exceptions import RequestValidationError
    from starlette.exceptions import HTTPException

    @app.exception_handler(GearbookError)
    async def domain_exception_handler(
        request: Request,
        exc: GearbookError,
    ) -> JSONResponse:
        """Map domain errors to their HTTP status."""
        status_code = status_for(exc)
        log = logger.error if status_code >= 500 else logger.info
        log(
            "domain_error",
            path=request.url.path,
            error_code=exc.code,
            status=status_code,
            **{k: v for k, v in exc.details.items() if k in ("field", "id", "needed", "available")},
        )
        return JSONResponse(
            status_code=status_code,
            content=error_body(request, exc, status_code),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle Pydantic validation errors."""
        errors = []
        for error in exc.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")

        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error_code="VALIDATION_ERROR",
                message="Request validation failed",
                hint="Check the request body fields and types.",
                detail="; ".join(errors),
                path=request.url.path,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,
        exc: HTTPException,
    ) -> JSONResponse:
        """Handle HTTP exceptions with standardized format."""
        error_code = _infer_error_code(exc.status_code)

        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error_code=error_code,
                message=exc.detail or "An error occurred",
                hint=_get_hint(error_code, exc.status_code),
                path=request.url.path,
            ).model_dump(mode="json"),
        )


def _infer_error_code(status_code: int) -> str:
    """Machine-readable error code for a bare HTTPException."""
    if status_code == 404:
        return "NOT_FOUND"
    if status_code == 405:
        return "METHOD_NOT_ALLOWED"
    if status_code == 400:
        return "BAD_REQUEST"
    return "HTTP_ERROR"

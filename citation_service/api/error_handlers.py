"""Error handlers for API routes.

Provides a consistent error response format across all API endpoints.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from citation_service.core.exceptions import CitationFieldsError, UnsupportedStyleError


logger = logging.getLogger(__name__)


# Type alias for exception handler
ExceptionHandler = Callable[[Request, Exception], Awaitable[JSONResponse]]


# =============================================================================
# Error Response Model
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response model.

    Attributes:
        error: Error type/category
        detail: Human-readable error description
        code: Optional machine-readable error code
        path: Optional request path that caused the error
        fields: Offending citation fields, for citation validation failures
    """

    error: str = Field(
        ...,
        description="Error type or category",
    )
    detail: str = Field(
        ...,
        description="Human-readable error description",
    )
    code: str | None = Field(
        default=None,
        description="Machine-readable error code",
    )
    path: str | None = Field(
        default=None,
        description="Request path that caused the error",
    )
    fields: list[str] | None = Field(
        default=None,
        description="Citation fields that failed validation",
    )


# =============================================================================
# Exception Handlers
# =============================================================================

async def http_exception_handler(
    request: Request,
    exc: HTTPException,
) -> JSONResponse:
    """Handle HTTPException with ErrorResponse schema.

    Args:
        request: FastAPI request object
        exc: HTTPException raised

    Returns:
        JSONResponse with ErrorResponse format
    """
    error_type = {
        400: "BadRequest",
        404: "NotFound",
        405: "MethodNotAllowed",
        422: "ValidationError",
        500: "InternalServerError",
    }.get(exc.status_code, "Error")

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=error_type,
            detail=str(exc.detail),
            path=str(request.url.path),
        ).model_dump(exclude_none=True),
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Handle malformed request payloads.

    Args:
        request: FastAPI request object
        exc: RequestValidationError raised

    Returns:
        JSONResponse with ErrorResponse format and field details
    """
    field_errors = []

    for error in exc.errors():
        loc = ".".join(str(x) for x in error.get("loc", []))
        msg = error.get("msg", "Invalid value")
        field_errors.append(f"{loc}: {msg}")

    detail = "; ".join(field_errors) if field_errors else "Validation error"

    return JSONResponse(
        status_code=422,
        content=ErrorResponse(
            error="ValidationError",
            detail=detail,
            code="VALIDATION_ERROR",
            path=str(request.url.path),
        ).model_dump(exclude_none=True),
    )


async def citation_fields_handler(
    request: Request,
    exc: CitationFieldsError,
) -> JSONResponse:
    """Handle blank or unparsable citation fields.

    Args:
        request: FastAPI request object
        exc: CitationFieldsError raised

    Returns:
        JSONResponse with 422 status and the offending field names
    """
    logger.info(
        "Citation rejected",
        extra={"kind": exc.kind, "fields": exc.fields},
    )

    return JSONResponse(
        status_code=422,
        content=ErrorResponse(
            error="CitationValidationError",
            detail=str(exc),
            code=exc.kind.upper(),
            path=str(request.url.path),
            fields=exc.fields,
        ).model_dump(exclude_none=True),
    )


async def unsupported_style_handler(
    request: Request,
    exc: UnsupportedStyleError,
) -> JSONResponse:
    """Handle unknown style or source type names.

    Args:
        request: FastAPI request object
        exc: UnsupportedStyleError raised

    Returns:
        JSONResponse with 400 status
    """
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error="BadRequest",
            detail=str(exc),
            code=f"UNSUPPORTED_{exc.kind.upper()}",
            path=str(request.url.path),
        ).model_dump(exclude_none=True),
    )


async def generic_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Handle uncaught exceptions.

    Args:
        request: FastAPI request object
        exc: Exception raised

    Returns:
        JSONResponse with 500 status
    """
    logger.exception(
        "Unhandled exception",
        extra={
            "path": str(request.url.path),
            "error_type": type(exc).__name__,
        },
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="InternalServerError",
            detail="An unexpected error occurred",
            code="INTERNAL_ERROR",
            path=str(request.url.path),
        ).model_dump(exclude_none=True),
    )


# =============================================================================
# Registration Function
# =============================================================================

def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers with the FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(
        HTTPException,
        http_exception_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        RequestValidationError,
        validation_exception_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        CitationFieldsError,
        citation_fields_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        UnsupportedStyleError,
        unsupported_style_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        Exception,
        generic_exception_handler,
    )


__all__ = [
    "ErrorResponse",
    "register_error_handlers",
]

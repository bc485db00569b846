"""
Exception Handlers for FastAPI Application.

This module maps sampling gate errors to HTTP responses and provides a global
handler for anything else. Client errors carry their message so the reviewer can
correct the decision; server errors only carry an error ID, and the details go to
the log.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sampling_gate.core.logging_config import get_logger
from sampling_gate.errors import SamplingError

logger = get_logger(__name__)


def _request_context(request: Request) -> dict:
    return {
        "method": request.method,
        "path": request.url.path,
        "query_params": dict(request.query_params),
        "client": request.client.host if request.client else "unknown",
    }


async def sampling_exception_handler(request: Request, exc: SamplingError) -> JSONResponse:
    """
    Convert a sampling error into an HTTP response.

    Args:
        request: The HTTP request that caused the exception
        exc: The sampling error that was raised

    Returns:
        400-class JSONResponse with the error message for client errors, or a
        500-class JSONResponse with only an error ID for server errors
    """
    if exc.client_error:
        logger.info(f"Rejected sampling decision in {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})

    error_id = id(exc)
    logger.error(
        f"Sampling failure [{error_id}] in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "error_type": type(exc).__name__,
            **_request_context(request),
        },
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
        },
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns a JSON response with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    # Generate unique error ID for tracking
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
            **_request_context(request),
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(SamplingError, sampling_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")

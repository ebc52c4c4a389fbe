"""Error Handlers: global exception handlers for the relay API.

Invariants:
    - RelayError → its own {"error": ...} envelope, status and headers
    - 405 from the router on a relay path → MethodNotAllowedError envelope with Allow: POST
    - Other HTTPException → FastAPI default {"detail": ...} response
    - Exception (catch-all) → 500 {"error": "An unexpected error occurred"}, no internal details

Design Decisions:
    - Three-layer handler: domain (RelayError), routing (HTTPException), catch-all (Exception)
    - RelayHandler already converts its own errors; these handlers cover
      failures raised before it runs (dependencies, middleware)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from prompt_relay.api.routes.relay import RELAY_PATHS
from prompt_relay.core.errors import MethodNotAllowedError, RelayError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_relay_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_relay_error_handler(app: FastAPI) -> None:
    """Register relay domain/infrastructure error handler."""

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError):
        logger.error(
            f"RelayError: {exc.message}",
            extra={
                "error_code": exc.code,
                "category": exc.category.value,
                "severity": exc.severity.value,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(),
            headers=exc.headers or None,
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register router-level HTTP error handler (unmatched methods on relay paths)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if (
            exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
            and request.url.path in RELAY_PATHS
        ):
            error = MethodNotAllowedError(request.method)
            logger.warning(
                error.message,
                extra={
                    "error_code": error.code,
                    "method": request.method,
                    "path": request.url.path,
                },
            )
            return JSONResponse(
                status_code=error.http_status,
                content=error.to_response(),
                headers=error.headers,
            )
        return await http_exception_handler(request, exc)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {type(exc).__name__}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": GENERIC_ERROR_MESSAGE},
        )

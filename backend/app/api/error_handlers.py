"""Error Handlers — global exception handlers for the relay API.

Invariants:
    - 405 from routing (any method other than POST) → text/plain "Method Not Allowed"
    - IndicationsError → exc.http_status (always 500) with {"error": message}
    - Any other exception → 500 with {"error": str(exc)}
    - Every failure response passes back through CORSMiddleware, so browsers can
      read the {"error": ...} body
    - Every handled error is logged at ERROR with its code, category and path

Design Decisions:
    - Catch-all is an HTTP middleware, not @app.exception_handler(Exception):
      Starlette runs Exception handlers in ServerErrorMiddleware, outside CORS.
      register_error_handlers must therefore run before CORSMiddleware is added
    - Catch-all surfaces the exception message: callers are the project's own
      front-ends and expect the failing step's text
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import ErrorCategory, ErrorSeverity, IndicationsError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_method_not_allowed_handler(app)
    _register_indications_error_handler(app)
    _register_generic_error_handler(app)


def _register_method_not_allowed_handler(app: FastAPI) -> None:
    """Plain-text 405; other HTTP errors keep FastAPI's default JSON."""

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED:
            return await http_exception_handler(request, exc)
        logger.info(
            "Rejected non-POST request",
            extra={"method": request.method, "path": request.url.path},
        )
        return PlainTextResponse(
            "Method Not Allowed",
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            headers=exc.headers,
        )


def _register_indications_error_handler(app: FastAPI) -> None:
    """Register relay domain/infrastructure error handler."""

    @app.exception_handler(IndicationsError)
    async def indications_error_handler(request: Request, exc: IndicationsError):
        logger.error(
            f"IndicationsError: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error middleware."""

    @app.middleware("http")
    async def catch_unhandled_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc}",
                exc_info=True,
                extra={
                    "error_code": "INTERNAL_ERROR",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                    "path": request.url.path,
                },
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": str(exc)},
            )

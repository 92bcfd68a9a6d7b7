"""Error Hierarchy — typed, categorized exceptions for every relay failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every relay failure maps to HTTP 500; the status code never distinguishes kinds
    - to_response() produces the public envelope {"error": message}
    - Messages never contain the API key or the request texts

Design Decisions:
    - Single hierarchy with IndicationsError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - code/category/severity kept even though clients only see the message:
      log_extra() puts them, with upstream status and model, into structured logs
"""

from dataclasses import dataclass
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    upstream_status: int | None = None
    model: str | None = None


class IndicationsError(Exception):
    """Base exception for all relay errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the public error body."""
        return {"error": self.message}

    def log_extra(self) -> dict:
        """Fields for logger.error(..., extra=...)."""
        return {
            "error_code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "upstream_status": self.context.upstream_status,
            "model": self.context.model,
        }


# ─── Request Errors ─────────────────────────────────────────────

class InvalidRequestBodyError(IndicationsError):
    """Request body is not JSON, or not the expected object."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_REQUEST_BODY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )


# ─── Server Errors ──────────────────────────────────────────────

class ConfigurationError(IndicationsError):
    """Required server configuration is missing."""
    def __init__(self, message: str, setting: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context,
        )
        self.setting = setting


class UpstreamAPIError(IndicationsError):
    """Upstream call did not complete with a success status."""
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.upstream_status = status_code
        super().__init__(
            message, "UPSTREAM_API_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.status_code = status_code


class UpstreamResponseError(IndicationsError):
    """Upstream answered 2xx but the body lacks the expected fields."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "UPSTREAM_RESPONSE_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context,
        )

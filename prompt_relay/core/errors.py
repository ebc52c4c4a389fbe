"""Error Hierarchy: typed, categorized exceptions for every relay failure mode.

Invariants:
    - Every error has a kind (ErrorKind), category (ErrorCategory), severity (ErrorSeverity)
    - Every error maps to exactly one HTTP status and one JSON envelope
    - to_response() produces {"error": message} plus "details" only when the kind carries detail
    - The upstream credential never appears in a message or detail

Design Decisions:
    - Single hierarchy with RelayError base: the handler and the FastAPI global
      handler both catch one type (ADR: uniform error shape)
    - Flat {"error": ...} envelope: existing clients of the serverless relay read
      the "error" string directly
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from prompt_relay.core.domain_types import ErrorKind

_NO_DETAILS = object()


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    method: str | None = None
    upstream_status: int | None = None
    debug_info: dict[str, Any] | None = None


class RelayError(Exception):
    """Base exception for all relay errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: Any = _NO_DETAILS,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details
        self.headers = headers or {}

    @property
    def code(self) -> str:
        return self.kind.value.upper()

    @property
    def has_details(self) -> bool:
        return self.details is not _NO_DETAILS

    def to_response(self) -> dict:
        """Convert to the relay's JSON error envelope."""
        body: dict[str, Any] = {"error": self.message}
        if self.has_details:
            body["details"] = self.details
        return body


# ─── Client Errors (400-level) ──────────────────────────────────

class MethodNotAllowedError(RelayError):
    """Request used a method other than POST."""
    def __init__(self, method: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.method = method
        super().__init__(
            "Method Not Allowed. Please use POST.",
            ErrorKind.METHOD_NOT_ALLOWED, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 405,
            headers={"Allow": "POST"},
        )


class BadRequestBodyError(RelayError):
    """Request body is not valid JSON."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Bad request: Could not parse JSON body.",
            ErrorKind.BAD_REQUEST_BODY, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class MissingPromptError(RelayError):
    """JSON body has no non-empty 'prompt' string."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Bad request: 'prompt' is missing in the request body.",
            ErrorKind.MISSING_PROMPT, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

class ServerMisconfiguredError(RelayError):
    """Gemini credential is not configured."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Server configuration error: API key is missing.",
            ErrorKind.SERVER_MISCONFIGURED, ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )


class UpstreamUnreachableError(RelayError):
    """Transport failed before an upstream response was received."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Proxy function execution error: {reason}",
            ErrorKind.UPSTREAM_UNREACHABLE, ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 500,
        )
        self.reason = reason


class UpstreamInvalidResponseError(RelayError):
    """Upstream body could not be parsed as JSON."""
    def __init__(self, raw_body: str, context: ErrorContext | None = None):
        super().__init__(
            "Invalid response from upstream API. Could not parse JSON.",
            ErrorKind.UPSTREAM_INVALID_RESPONSE, ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
            details=raw_body,
        )


class UpstreamError(RelayError):
    """Upstream answered with a non-2xx status; that status is forwarded."""
    def __init__(
        self,
        status_code: int,
        message: str,
        error_object: Any = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.upstream_status = status_code
        super().__init__(
            f"Gemini API Error: {message}",
            ErrorKind.UPSTREAM_ERROR, ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ctx, status_code,
            details=error_object,
        )
        self.upstream_message = message

"""Error Hierarchy: every kind maps to one status and one envelope."""

import pytest

from prompt_relay.core.domain_types import ErrorKind
from prompt_relay.core.errors import (
    BadRequestBodyError,
    ErrorCategory,
    ErrorSeverity,
    MethodNotAllowedError,
    MissingPromptError,
    RelayError,
    ServerMisconfiguredError,
    UpstreamError,
    UpstreamInvalidResponseError,
    UpstreamUnreachableError,
)


@pytest.mark.parametrize("error, status, kind", [
    (MethodNotAllowedError("GET"), 405, ErrorKind.METHOD_NOT_ALLOWED),
    (BadRequestBodyError(), 400, ErrorKind.BAD_REQUEST_BODY),
    (MissingPromptError(), 400, ErrorKind.MISSING_PROMPT),
    (ServerMisconfiguredError(), 500, ErrorKind.SERVER_MISCONFIGURED),
    (UpstreamUnreachableError("refused"), 500, ErrorKind.UPSTREAM_UNREACHABLE),
    (UpstreamInvalidResponseError("<html>"), 502, ErrorKind.UPSTREAM_INVALID_RESPONSE),
    (UpstreamError(418, "teapot"), 418, ErrorKind.UPSTREAM_ERROR),
])
def test_status_and_kind(error, status, kind):
    assert isinstance(error, RelayError)
    assert error.http_status == status
    assert error.kind == kind
    assert error.code == kind.value.upper()


def test_envelopes_without_details():
    assert MethodNotAllowedError("GET").to_response() == {
        "error": "Method Not Allowed. Please use POST.",
    }
    assert ServerMisconfiguredError().to_response() == {
        "error": "Server configuration error: API key is missing.",
    }


def test_details_present_even_when_none():
    """UpstreamError always carries details, even a null error object."""
    assert UpstreamError(500, "x").to_response() == {
        "error": "Gemini API Error: x", "details": None,
    }


def test_method_not_allowed_sets_allow_header():
    assert MethodNotAllowedError("PUT").headers == {"Allow": "POST"}
    assert MissingPromptError().headers == {}


def test_categories_and_severity():
    assert MissingPromptError().category == ErrorCategory.VALIDATION
    assert ServerMisconfiguredError().severity == ErrorSeverity.CRITICAL
    assert UpstreamError(429, "x").context.upstream_status == 429

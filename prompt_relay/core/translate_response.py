"""Response Translation: UpstreamResult → OutboundResponse or a typed error.

Invariants:
    - Parse failure is checked before status: an HTML 503 page is a 502, not a 503
    - Non-2xx status is forwarded unchanged as the outbound status
    - Success body is the parsed upstream JSON re-serialized, no field filtering
"""

import json
from typing import Any

from prompt_relay.core.domain_types import (
    JSON_HEADERS,
    OutboundResponse,
    UpstreamReply,
    UpstreamResult,
)
from prompt_relay.core.errors import (
    ErrorContext,
    UpstreamError,
    UpstreamInvalidResponseError,
)
from prompt_relay.core.parse_json import parse_json


def to_upstream_result(reply: UpstreamReply) -> UpstreamResult:
    return UpstreamResult(
        status_code=reply.status_code,
        raw_body=reply.raw_body,
        parsed=parse_json(reply.raw_body),
    )


def extract_error_object(body: Any) -> Any:
    """The upstream 'error' member, or None when the body has none."""
    if isinstance(body, dict):
        return body.get("error")
    return None


def extract_error_message(body: Any, status_code: int) -> str:
    """error.message when present, else a generic line naming the status."""
    error = extract_error_object(body)
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return f"Gemini API responded with status {status_code}"


def translate_result(result: UpstreamResult) -> OutboundResponse:
    """Map an upstream result to the client response, raising on failure."""
    if not result.parsed.ok:
        raise UpstreamInvalidResponseError(
            result.raw_body,
            ErrorContext(upstream_status=result.status_code),
        )
    body = result.parsed.value
    if not result.is_success:
        raise UpstreamError(
            result.status_code,
            extract_error_message(body, result.status_code),
            extract_error_object(body),
        )
    return OutboundResponse(status_code=200, body=json.dumps(body))


def error_response(
    status_code: int, content: dict, headers: dict[str, str] | None = None,
) -> OutboundResponse:
    """Serialize an error envelope into an OutboundResponse."""
    return OutboundResponse(
        status_code=status_code,
        body=json.dumps(content),
        headers={**JSON_HEADERS, **(headers or {})},
    )

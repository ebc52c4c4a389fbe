"""Relay Handler: validate, call Gemini once, translate the result.

Invariants:
    - handle() always returns an OutboundResponse; RelayError never escapes it
    - Validation fully completes before the upstream call is attempted
    - Exactly one upstream call per valid request (no retries, no caching)
    - The credential is held read-only and never logged or echoed

Design Decisions:
    - Credential and transport injected at construction, never read from globals
    - Pure validate, one await, pure translate (ADR: impureim sandwich)
    - One handler per request; it holds references only
"""

import logging

from prompt_relay.core.build_payload import build_upstream_payload, prompt_snippet
from prompt_relay.core.domain_types import InboundRequest, OutboundResponse
from prompt_relay.core.errors import ErrorSeverity, RelayError
from prompt_relay.core.translate_response import (
    error_response,
    to_upstream_result,
    translate_result,
)
from prompt_relay.core.upstream_protocol import UpstreamTransport
from prompt_relay.core.validate_request import validate_request

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


class RelayHandler:
    """Turns one inbound request into one outbound response."""

    def __init__(
        self,
        api_key: str | None,
        transport: UpstreamTransport,
        upstream_url: str,
        prompt_log_snippet_chars: int = 100,
    ):
        self._api_key = api_key
        self.transport = transport
        self.upstream_url = upstream_url
        self.prompt_log_snippet_chars = prompt_log_snippet_chars

    async def handle(self, request: InboundRequest) -> OutboundResponse:
        try:
            return await self._relay(request)
        except RelayError as e:
            self._log_error(e)
            return error_response(e.http_status, e.to_response(), e.headers)

    async def _relay(self, request: InboundRequest) -> OutboundResponse:
        prompt, credential = validate_request(request, self._api_key)
        logger.info(
            "Calling Gemini API with prompt: "
            f"{prompt_snippet(prompt, self.prompt_log_snippet_chars)}",
            extra={"prompt_chars": len(prompt)},
        )
        reply = await self.transport.send_json(
            self.upstream_url,
            {"key": credential},
            build_upstream_payload(prompt),
        )
        return translate_result(to_upstream_result(reply))

    def _log_error(self, e: RelayError) -> None:
        extra = {
            "error_code": e.code,
            "category": e.category.value,
            "severity": e.severity.value,
            "method": e.context.method,
            "upstream_status": e.context.upstream_status,
            "debug_info": e.context.debug_info,
        }
        message = e.message
        if e.has_details:
            message = f"{message} details={e.details!r}"
        logger.log(_LOG_LEVELS[e.severity], message, extra=extra)

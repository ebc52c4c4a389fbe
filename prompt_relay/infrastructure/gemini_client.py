"""Gemini Transport: httpx implementation of the UpstreamTransport protocol.

Invariants:
    - Exactly one HTTP attempt per send_json call (no retries)
    - Any response, whatever its status, is returned as an UpstreamReply
    - httpx transport errors (connect, DNS, timeout, read) → UpstreamUnreachableError
    - The credential is redacted from error text before it leaves this module

Design Decisions:
    - Wrapper over raw client: isolates httpx from the relay handler (ADR: single responsibility)
    - Shared AsyncClient owned by the app lifespan; the transport only borrows it
    - Body read as text, never .json(): parsing belongs to the core two-stage parse
"""

import logging

import httpx

from prompt_relay.core.domain_types import JSON_HEADERS, UpstreamReply
from prompt_relay.core.errors import ErrorContext, UpstreamUnreachableError
from prompt_relay.infrastructure.observability import redact

logger = logging.getLogger(__name__)


def describe_error(e: Exception) -> str:
    """Human-readable failure text; falls back to the class name."""
    return str(e) or type(e).__name__


class GeminiTransport:
    """Sends the generateContent request over a shared httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def send_json(
        self, url: str, params: dict[str, str], payload: dict,
    ) -> UpstreamReply:
        try:
            response = await self.client.post(
                url, params=params, json=payload, headers=JSON_HEADERS,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            reason = redact(describe_error(e), list(params.values()))
            logger.error(f"Gemini transport failure: {reason}")
            raise UpstreamUnreachableError(
                reason, ErrorContext(debug_info={"error_type": type(e).__name__}),
            )
        logger.info(
            "Gemini API responded",
            extra={"upstream_status": response.status_code},
        )
        return UpstreamReply(
            status_code=response.status_code, raw_body=response.text,
        )


def create_http_client(timeout_seconds: float) -> httpx.AsyncClient:
    """AsyncClient used by GeminiTransport; caller closes it."""
    return httpx.AsyncClient(timeout=timeout_seconds)

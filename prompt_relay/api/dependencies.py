"""Dependencies: FastAPI providers that assemble a RelayHandler per request.

Invariants:
    - The credential is read from Settings on every request, never cached on the handler class
    - The shared httpx.AsyncClient lives on app.state (created by the lifespan)

Design Decisions:
    - Each provider is overridable via app.dependency_overrides: tests swap the
      transport or settings without touching the network or the environment
"""

import httpx
from fastapi import Depends, Request

from prompt_relay.config import Settings, get_settings
from prompt_relay.core.upstream_protocol import UpstreamTransport
from prompt_relay.infrastructure.gemini_client import GeminiTransport
from prompt_relay.services.relay_handler import RelayHandler


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_transport(
    client: httpx.AsyncClient = Depends(get_http_client),
) -> UpstreamTransport:
    return GeminiTransport(client)


def get_relay_handler(
    settings: Settings = Depends(get_settings),
    transport: UpstreamTransport = Depends(get_transport),
) -> RelayHandler:
    return RelayHandler(
        api_key=settings.gemini_api_key,
        transport=transport,
        upstream_url=settings.gemini_generate_url,
        prompt_log_snippet_chars=settings.prompt_log_snippet_chars,
    )

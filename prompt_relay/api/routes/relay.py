"""Relay Route: the single endpoint that forwards prompts to Gemini.

Invariants:
    - Common HTTP methods reach the handler; any other method is answered with the
      same 405 envelope by api/error_handlers.py
    - The raw body is passed through undecoded; parsing happens in core/
    - The legacy serverless path answers exactly like the versioned path

Design Decisions:
    - api_route with an explicit method list over @router.post: FastAPI's own 405
      would not carry the {"error": ...} envelope clients expect
    - /.netlify/functions/gemini-proxy kept as an alias so existing front-ends work unchanged
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from prompt_relay.api.dependencies import get_relay_handler
from prompt_relay.core.domain_types import InboundRequest
from prompt_relay.services.relay_handler import RelayHandler

router = APIRouter(tags=["relay"])

RELAY_PATH = "/api/v1/gemini-proxy"
LEGACY_RELAY_PATH = "/.netlify/functions/gemini-proxy"
RELAY_PATHS = (RELAY_PATH, LEGACY_RELAY_PATH)
RELAY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD", "TRACE"]


@router.api_route(LEGACY_RELAY_PATH, methods=RELAY_METHODS, include_in_schema=False)
@router.api_route(RELAY_PATH, methods=RELAY_METHODS)
async def gemini_proxy(
    request: Request,
    handler: RelayHandler = Depends(get_relay_handler),
) -> Response:
    """Relay {"prompt": ...} to Gemini and return its JSON (or an error envelope)."""
    inbound = InboundRequest(method=request.method, body=await request.body())
    outbound = await handler.handle(inbound)
    return Response(
        content=outbound.body,
        status_code=outbound.status_code,
        headers=outbound.headers,
    )

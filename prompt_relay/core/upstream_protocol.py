"""Boundary Protocol: contract between the relay handler and the network.

Invariants:
    - Handler never imports httpx; all IO goes through UpstreamTransport
    - A transport returns an UpstreamReply for every HTTP response, whatever its status
    - A transport raises UpstreamUnreachableError when no response was received

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes need no inheritance
    - Async method: the one suspension point of an invocation lives here
"""

from typing import Protocol

from prompt_relay.core.domain_types import UpstreamReply


class UpstreamTransport(Protocol):
    """Capability: send JSON, receive status + raw body."""
    async def send_json(
        self, url: str, params: dict[str, str], payload: dict,
    ) -> UpstreamReply: ...

"""Domain Types: request-scoped values passed between relay stages.

Invariants:
    - Every value lives for one invocation; nothing here is shared or mutated
    - JsonParseResult always keeps the raw text; value is meaningful only when ok
    - OutboundResponse.body is already-serialized JSON text

Design Decisions:
    - Frozen dataclasses: stages hand values forward, never edit them in place
    - NewType for Prompt: zero runtime cost, marks "validated, non-empty" in signatures
    - Two-stage parse as a value (JsonParseResult) instead of try/except at call sites
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NewType


Prompt = NewType("Prompt", str)

JSON_HEADERS = {"Content-Type": "application/json"}


class ErrorKind(str, Enum):
    """Every way a relay invocation can fail."""
    METHOD_NOT_ALLOWED = "method_not_allowed"
    BAD_REQUEST_BODY = "bad_request_body"
    MISSING_PROMPT = "missing_prompt"
    SERVER_MISCONFIGURED = "server_misconfigured"
    UPSTREAM_UNREACHABLE = "upstream_unreachable"
    UPSTREAM_INVALID_RESPONSE = "upstream_invalid_response"
    UPSTREAM_ERROR = "upstream_error"


@dataclass(frozen=True)
class InboundRequest:
    """What the client sent: HTTP method plus raw body."""
    method: str
    body: bytes | str | None = None


@dataclass(frozen=True)
class JsonParseResult:
    """Outcome of parsing text as JSON. Raw text is always retained."""
    raw: str
    ok: bool
    value: Any = None


@dataclass(frozen=True)
class UpstreamReply:
    """What the transport hands back: status code and undecoded body text."""
    status_code: int
    raw_body: str


@dataclass(frozen=True)
class UpstreamResult:
    """UpstreamReply plus the two-stage parse of its body."""
    status_code: int
    raw_body: str
    parsed: JsonParseResult

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299


@dataclass(frozen=True)
class OutboundResponse:
    """Terminal artifact returned to the caller."""
    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=lambda: dict(JSON_HEADERS))

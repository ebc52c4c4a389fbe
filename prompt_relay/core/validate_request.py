"""Request Validation: method, body and prompt checks in a fixed order.

Invariants:
    - Checks short-circuit: the first failure raises, later checks never run
    - Order: method, then credential, then body JSON, then prompt
    - The credential check runs before any body inspection and before any upstream call

Design Decisions:
    - Credential before prompt: a misconfigured deployment answers 500 for every
      POST, independent of what the client sent
"""

from typing import Any

from pydantic import ValidationError

from prompt_relay.core.domain_types import InboundRequest, Prompt
from prompt_relay.core.errors import (
    BadRequestBodyError,
    ErrorContext,
    MethodNotAllowedError,
    MissingPromptError,
    ServerMisconfiguredError,
)
from prompt_relay.core.parse_json import parse_json
from prompt_relay.schemas.relay import PromptRequest

ALLOWED_METHOD = "POST"


def check_method(method: str) -> None:
    if (method or "").upper() != ALLOWED_METHOD:
        raise MethodNotAllowedError(method)


def check_credential(api_key: str | None) -> str:
    if not api_key:
        raise ServerMisconfiguredError()
    return api_key


def parse_body(body: bytes | str | None) -> Any:
    """Return the decoded JSON value or raise BadRequestBodyError."""
    result = parse_json(body)
    if not result.ok:
        raise BadRequestBodyError(
            ErrorContext(debug_info={"body_chars": len(result.raw)}),
        )
    return result.value


def extract_prompt(payload: Any) -> Prompt:
    """Pull a non-empty 'prompt' string out of a decoded JSON value."""
    if not isinstance(payload, dict):
        raise MissingPromptError()
    try:
        return Prompt(PromptRequest.model_validate(payload).prompt)
    except ValidationError:
        raise MissingPromptError()


def validate_request(request: InboundRequest, api_key: str | None) -> tuple[Prompt, str]:
    """Run every precondition; return the prompt and the usable credential."""
    check_method(request.method)
    credential = check_credential(api_key)
    prompt = extract_prompt(parse_body(request.body))
    return prompt, credential

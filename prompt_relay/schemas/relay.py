"""Relay Schemas: Pydantic model for the client's JSON body.

Invariants:
    - prompt must be a JSON string (no coercion from numbers or lists)
    - prompt must contain at least one character
    - Unknown fields are ignored, not rejected

Design Decisions:
    - StrictStr over str: {"prompt": 42} is a missing prompt, not the text "42"
    - Whitespace-only prompts pass: the upstream model decides what to do with them
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class PromptRequest(BaseModel):
    """Inbound relay body: only 'prompt' is read."""
    model_config = ConfigDict(extra="ignore")

    prompt: StrictStr = Field(min_length=1)

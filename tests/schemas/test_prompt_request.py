"""PromptRequest: strict, non-empty prompt string; other fields ignored.

Invariants:
    - Numbers, booleans and lists are not coerced into a prompt
    - Empty prompt rejected, whitespace-only accepted
"""

import pytest
from pydantic import ValidationError

from prompt_relay.schemas.relay import PromptRequest


def test_accepts_prompt_and_ignores_extra_fields():
    req = PromptRequest.model_validate({"prompt": "hi", "temperature": 0.2})
    assert req.prompt == "hi"
    assert not hasattr(req, "temperature")


@pytest.mark.parametrize("value", ["", 7, 1.5, False, ["hi"], None])
def test_rejects_non_string_or_empty(value):
    with pytest.raises(ValidationError):
        PromptRequest.model_validate({"prompt": value})


def test_missing_field_rejected():
    with pytest.raises(ValidationError):
        PromptRequest.model_validate({})

"""Two-stage JSON parse: raw text in, JsonParseResult out, never raises.

Invariants:
    - Bytes must be valid UTF-8; invalid sequences make the parse fail, not raise
    - None and empty input are parse failures (an empty body is not JSON)
    - Nesting deeper than the interpreter recursion limit is a parse failure
"""

import json

from prompt_relay.core.domain_types import JsonParseResult


def decode_text(data: bytes | str | None) -> str:
    """Normalize a body to text. Undecodable bytes are replaced, not raised."""
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


def parse_json(data: bytes | str | None) -> JsonParseResult:
    """Parse data as JSON, keeping the raw text either way."""
    if isinstance(data, bytes):
        try:
            raw = data.decode("utf-8")
        except UnicodeDecodeError:
            return JsonParseResult(raw=decode_text(data), ok=False)
    else:
        raw = decode_text(data)
    try:
        value = json.loads(raw)
    except (ValueError, RecursionError):
        return JsonParseResult(raw=raw, ok=False)
    return JsonParseResult(raw=raw, ok=True, value=value)

"""Upstream Payload: the fixed generateContent request shape."""

from prompt_relay.core.domain_types import Prompt


def build_upstream_payload(prompt: Prompt) -> dict:
    """Single-turn user message, as the Gemini generateContent API expects."""
    return {
        "contents": [
            {"role": "user", "parts": [{"text": prompt}]},
        ],
    }


def prompt_snippet(prompt: str, limit: int = 100) -> str:
    """Truncated prompt for log lines."""
    return prompt[:limit] + "..."

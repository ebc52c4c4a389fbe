"""Structured Logging: JSON formatter, credential redaction and setup.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Relay fields (error_code, category, severity, upstream_status, method, path,
      prompt_chars, debug_info) surfaced when present
    - Configured secrets are replaced by [REDACTED] in every message and traceback
      that reaches the installed handler, JSON or human-readable
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Redaction as a handler Filter: one place covers both formats
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from collections.abc import Iterable
from datetime import datetime, timezone

REDACTED = "[REDACTED]"

_EXTRA_FIELDS = (
    "error_code", "category", "severity", "upstream_status",
    "method", "path", "prompt_chars", "debug_info",
)


def redact(text: str, secrets: Iterable[str | None]) -> str:
    """Replace every occurrence of each non-empty secret in text."""
    for secret in secrets:
        if secret:
            text = text.replace(secret, REDACTED)
    return text


class RedactingFilter(logging.Filter):
    """Scrub secrets from the rendered message and exception text."""

    def __init__(self, secrets: Iterable[str | None]):
        super().__init__()
        self.secrets = [s for s in secrets if s]

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.secrets:
            return True
        record.msg = redact(record.getMessage(), self.secrets)
        record.args = None
        if record.exc_info:
            record.exc_text = redact(
                logging.Formatter().formatException(record.exc_info),
                self.secrets,
            )
            record.exc_info = None
        return True


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        elif record.exc_text:
            log["exception"] = record.exc_text
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(
    level: str = "INFO", fmt: str = "json", secrets: Iterable[str | None] = (),
) -> logging.Handler:
    """Configure logging for the application; returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    handler.addFilter(RedactingFilter(secrets))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler

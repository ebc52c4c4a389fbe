"""Root conftest: shared test configuration."""

import os

# Ensure tests don't accidentally use a real Gemini key
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")

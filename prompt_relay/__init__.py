"""Prompt Relay Package: server-side relay between clients and the Gemini API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
    - __version__ is the single source for the reported service version
"""

__version__ = "1.0.0"

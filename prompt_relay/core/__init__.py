"""Core Layer: pure relay logic, no IO, no network, no framework.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the handler in services/
      sandwiches the single upstream await between pure validate and translate steps
"""

"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies with Content-Type: application/json

Design Decisions:
    - Thin routes delegate to RelayHandler (ADR: impureim sandwich)
"""

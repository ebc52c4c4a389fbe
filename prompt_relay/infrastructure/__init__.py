"""Infrastructure Layer: upstream HTTP transport and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every network failure is mapped to a core error before leaving this layer
"""

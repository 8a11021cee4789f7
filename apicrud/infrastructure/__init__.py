"""Infrastructure Layer — cross-cutting concerns (logging, request context).

Invariants:
    - Infrastructure never imports from core/ domain logic
"""

"""Core Layer — user validation and the in-memory user store.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - Validation functions are pure and deterministic

Design Decisions:
    - Functional core (validation) separated from the stateful store and the
      HTTP shell: routes only translate wire payloads and store outcomes
"""

"""Pydantic Schemas — request/response shapes for the users API.

Invariants:
    - Schemas shape the wire format only; field rules live in core.validate_user

Design Decisions:
    - Separate from core types: schemas are API contracts, core types are domain values
"""

"""Domain Types — identity and value types for user records.

Invariants:
    - UserId wraps a UUID — never use bare UUID in domain logic
    - User and UserRecord are frozen: the store never hands out mutable state
    - UserField values are the wire names, in validation order

Design Decisions:
    - NewType over dataclass wrapper for ids: zero runtime cost, full type-checker support
    - str Enum for field names: serializes to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class UserField(str, Enum):
    """User fields in validation order (first failure wins)."""
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    BIOGRAPHY = "biography"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class User:
    """User value — no identity of its own."""
    first_name: str
    last_name: str
    biography: str

    def value_of(self, user_field: UserField) -> str:
        if user_field is UserField.FIRST_NAME:
            return self.first_name
        if user_field is UserField.LAST_NAME:
            return self.last_name
        return self.biography


@dataclass(frozen=True)
class UserRecord:
    """Stored user — an identity plus the accepted User value."""
    id: UserId
    user: User

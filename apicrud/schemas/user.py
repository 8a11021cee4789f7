"""User Schemas — camelCase wire models for the users API.

Invariants:
    - Wire names: firstName, lastName, biography (+ id on output)
    - Absent request fields decode to "" so the core reports them as missing
    - Responses always carry the canonical UUID text form of the id

Design Decisions:
    - alias_generator=to_camel with populate_by_name: snake_case in Python,
      camelCase on the wire, both accepted on input
    - No length constraints here: a single validation path (core) produces
      first-failure-wins errors for every entry point
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from apicrud.core.domain_types import User, UserRecord


class UserPayload(BaseModel):
    """Create/replace request body — full user, no id."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str = ""
    last_name: str = ""
    biography: str = ""

    def to_user(self) -> User:
        return User(
            first_name=self.first_name,
            last_name=self.last_name,
            biography=self.biography,
        )


class UserResponse(BaseModel):
    """Stored user as returned by every users endpoint."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    first_name: str
    last_name: str
    biography: str

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserResponse":
        return cls(
            id=record.id,
            first_name=record.user.first_name,
            last_name=record.user.last_name,
            biography=record.user.biography,
        )

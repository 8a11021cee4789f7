"""User Store — in-memory, identity-keyed collection of user records.

Invariants:
    - Ids minted only here, only in create() (uuid4, never reused after delete)
    - Every write validated before the map is touched: failed operations leave it unchanged
    - All map access happens under one lock: no caller observes a partial mutation,
      replace/delete on the same id are serialized
    - Records handed out are frozen values, never references into the map

Design Decisions:
    - Single threading.Lock over per-id locks: operations are O(1) dict calls (list is O(n)),
      contention is negligible for a single-process service
    - Validation runs outside the lock: it is pure and only sees the candidate
    - get() returns None for absence; replace()/delete() raise UserNotFoundError
"""

import logging
import threading
import uuid

from apicrud.core.domain_types import User, UserId, UserRecord
from apicrud.core.errors import UserNotFoundError, UserValidationError
from apicrud.core.validate_user import (
    ValidationResult, check_required_fields, validate_user,
)

logger = logging.getLogger(__name__)


def _raise_if_invalid(result: ValidationResult) -> None:
    if not result.ok:
        raise UserValidationError(result.reason, result.field.value, code=result.code)


class UserStore:
    """Authoritative collection of UserRecords, safe for concurrent callers."""

    def __init__(self):
        self._lock = threading.Lock()
        self._users: dict[UserId, User] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def create(self, candidate: User) -> UserRecord:
        """Validate candidate, mint a fresh id, insert. Raises UserValidationError."""
        _raise_if_invalid(check_required_fields(candidate))
        _raise_if_invalid(validate_user(candidate))
        user_id = UserId(uuid.uuid4())
        with self._lock:
            self._users[user_id] = candidate
        logger.info("User created", extra={"user_id": str(user_id)})
        return UserRecord(id=user_id, user=candidate)

    def list(self) -> list[UserRecord]:
        """Snapshot of all records. Order is unspecified."""
        with self._lock:
            items = list(self._users.items())
        return [UserRecord(id=uid, user=u) for uid, u in items]

    def get(self, user_id: UserId) -> UserRecord | None:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            return None
        return UserRecord(id=user_id, user=user)

    def replace(self, user_id: UserId, candidate: User) -> UserRecord:
        """Overwrite the User for an existing id.

        Raises UserNotFoundError if the id is absent (checked first), then
        UserValidationError if the candidate is invalid. The existence check
        and the write happen under the same lock acquisition, so a concurrent
        delete cannot slip in between them.
        """
        result = validate_user(candidate)
        with self._lock:
            if user_id not in self._users:
                raise UserNotFoundError(str(user_id))
            _raise_if_invalid(result)
            self._users[user_id] = candidate
        logger.info("User replaced", extra={"user_id": str(user_id)})
        return UserRecord(id=user_id, user=candidate)

    def delete(self, user_id: UserId) -> UserRecord:
        """Remove and return the record. Raises UserNotFoundError if absent."""
        with self._lock:
            user = self._users.pop(user_id, None)
        if user is None:
            raise UserNotFoundError(str(user_id))
        logger.info("User deleted", extra={"user_id": str(user_id)})
        return UserRecord(id=user_id, user=user)

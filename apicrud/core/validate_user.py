"""User Validation — pure field checks for candidate users.

Invariants:
    - validate_user is PURE: returns a ValidationResult, never raises, never mutates
    - Fields checked in order firstName → lastName → biography; first failure wins
    - Both bounds checked against the stripped length (code points)
    - FIELD_LIMITS is the single source of truth for the length ranges

Design Decisions:
    - Result value over exception: the store decides whether to raise,
      so the engine stays usable for checks that must not abort
    - check_required_fields separate from validate_user: "missing" is a distinct
      condition reported only on the create path
"""

from dataclasses import dataclass

from apicrud.core.domain_types import User, UserField


FIELD_LIMITS: dict[UserField, tuple[int, int]] = {
    UserField.FIRST_NAME: (2, 20),
    UserField.LAST_NAME: (2, 20),
    UserField.BIOGRAPHY: (20, 450),
}

MISSING_FIELD = "MISSING_FIELD"
OUT_OF_RANGE = "VALIDATION_ERROR"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation check. `field`/`reason` set only when invalid."""
    ok: bool
    field: UserField | None = None
    code: str | None = None
    reason: str | None = None


VALID = ValidationResult(ok=True)


def check_required_fields(user: User) -> ValidationResult:
    """Reject empty or all-whitespace fields. Used before range checks on create."""
    for user_field in UserField:
        if not user.value_of(user_field).strip():
            return ValidationResult(
                ok=False,
                field=user_field,
                code=MISSING_FIELD,
                reason="Please provide firstName, lastName and biography for the user",
            )
    return VALID


def validate_user(user: User) -> ValidationResult:
    """Check every field's stripped length against FIELD_LIMITS."""
    for user_field, (low, high) in FIELD_LIMITS.items():
        length = len(user.value_of(user_field).strip())
        if length < low or length > high:
            return ValidationResult(
                ok=False,
                field=user_field,
                code=OUT_OF_RANGE,
                reason=(
                    f"{user_field.value} must be between {low} and {high} "
                    f"characters (got {length})"
                ),
            )
    return VALID

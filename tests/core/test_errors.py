"""Error Hierarchy — verifies codes, statuses and the REST envelope."""

from apicrud.core.errors import (
    ApiCrudError,
    ErrorCategory,
    ErrorContext,
    UserNotFoundError,
    UserValidationError,
)


def test_validation_error_is_400_with_field():
    exc = UserValidationError("firstName too short", "firstName")
    assert isinstance(exc, ApiCrudError)
    assert exc.http_status == 400
    assert exc.code == "VALIDATION_ERROR"
    assert exc.category is ErrorCategory.VALIDATION
    assert exc.field == "firstName"


def test_validation_error_accepts_missing_field_code():
    exc = UserValidationError("missing", "lastName", code="MISSING_FIELD")
    assert exc.code == "MISSING_FIELD"


def test_not_found_error_is_404():
    exc = UserNotFoundError("1234")
    assert exc.http_status == 404
    assert exc.code == "RESOURCE_NOT_FOUND"
    assert "1234" in exc.message


def test_to_response_envelope():
    exc = UserValidationError(
        "biography too short", "biography",
        context=ErrorContext(request_id="req-1"),
    )
    body = exc.to_response()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["category"] == "validation"
    assert body["severity"] == "error"
    assert body["context"] == {
        "user_id": None, "field": "biography", "request_id": "req-1",
    }
    assert "timestamp" in body

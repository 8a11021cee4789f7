"""Structured Logging — JSON and text formatters, setup_logging handler choice."""

import json
import logging
import sys

import pytest

from apicrud.infrastructure.observability import (
    ContextTextFormatter, JSONFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="apicrud.test", level=logging.INFO, pathname=__file__,
        lineno=1, msg="User %s", args=("created",), exc_info=None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "apicrud.test"
    assert log["message"] == "User created"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras():
    log = json.loads(JSONFormatter().format(
        _record(user_id="u-1", request_id="r-1", unrelated="x"),
    ))
    assert log["user_id"] == "u-1"
    assert log["request_id"] == "r-1"
    assert "unrelated" not in log


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in log["exception"]


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)


@pytest.mark.parametrize("fmt, formatter_type", [
    ("json", JSONFormatter),
    ("text", ContextTextFormatter),
])
def test_setup_logging_installs_handler(restore_root_logger, fmt, formatter_type):
    setup_logging("DEBUG", fmt)
    handler = logging.root.handlers[-1]
    assert type(handler.formatter) is formatter_type
    assert logging.root.level == logging.DEBUG


def test_text_formatter_appends_context():
    line = ContextTextFormatter().format(_record(user_id="u-1", request_id="r-1"))
    assert line.endswith("User created [request_id=r-1 user_id=u-1]")


def test_text_formatter_without_context_is_plain():
    line = ContextTextFormatter().format(_record())
    assert line.endswith("apicrud.test: User created")


def test_text_formatter_keeps_context_on_first_line_with_traceback():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record(request_id="r-9")
        record.exc_info = sys.exc_info()
    first, _, rest = ContextTextFormatter().format(record).partition("\n")
    assert first.endswith("[request_id=r-9]")
    assert "RuntimeError: boom" in rest

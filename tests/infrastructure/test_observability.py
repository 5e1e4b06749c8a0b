"""Client logging — JSON records carry request context; Settings drive setup.

Tests cover:
    - JSONFormatter lifts context fields out of `extra`, skips unset ones
    - Non-ASCII messages survive (backend messages may be Chinese)
    - configure_logging() reads log_level / log_format from Settings
    - Repeated setup replaces the client's handler instead of stacking
"""

import json
import logging

import pytest

from exam_client.config import Settings
from exam_client.infrastructure.observability import (
    JSONFormatter, configure_logging, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "exam_client.infrastructure.exam_api_client", logging.ERROR,
        __file__, 1, "search_answers failed: boom", None, None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_includes_context():
    out = json.loads(JSONFormatter().format(
        _record(operation="search_answers", error_code="APPLICATION_ERROR", status_code=None),
    ))
    assert out["level"] == "ERROR"
    assert out["message"] == "search_answers failed: boom"
    assert out["operation"] == "search_answers"
    assert out["error_code"] == "APPLICATION_ERROR"
    assert "status_code" not in out


def test_json_formatter_keeps_non_ascii():
    record = _record()
    record.msg = "搜索失败"
    assert "搜索失败" in JSONFormatter().format(record)


def test_configure_logging_uses_settings(restore_root):
    handler = configure_logging(
        Settings(log_level="debug", log_format="text", _env_file=None),
    )
    assert handler in restore_root.handlers
    assert restore_root.level == logging.DEBUG
    assert not isinstance(handler.formatter, JSONFormatter)


def test_configure_logging_reads_environment(monkeypatch, restore_root):
    monkeypatch.setenv("EXAM_CLIENT_LOG_LEVEL", "WARNING")
    handler = configure_logging()
    assert restore_root.level == logging.WARNING
    assert isinstance(handler.formatter, JSONFormatter)


def test_repeated_setup_replaces_handler(restore_root):
    first = setup_logging()
    second = setup_logging("error", "text")
    assert first not in restore_root.handlers
    assert second in restore_root.handlers

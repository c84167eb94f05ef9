"""Tests for structured logging helpers"""
import json
import logging

from nimrev.utils.logging import JsonFormatter, get_logger, log_error, setup_logging


def _record(**extra):
    logger = logging.getLogger("nimrev.tests")
    record = logger.makeRecord(
        logger.name, logging.INFO, __file__, 10, "Scan completed for %s", ("solana:abc",), None,
        extra=extra
    )
    return record


def test_json_formatter_includes_extra_fields():
    formatter = JsonFormatter(environment="test")

    data = json.loads(formatter.format(_record(threat_score=0.45, persisted_id=None)))

    assert data["message"] == "Scan completed for solana:abc"
    assert data["level"] == "INFO"
    assert data["logger"] == "nimrev.tests"
    assert data["threat_score"] == 0.45
    assert data["persisted_id"] is None
    assert data["environment"] == "test"
    assert "args" not in data


def test_json_formatter_serialises_unknown_types():
    formatter = JsonFormatter()

    data = json.loads(formatter.format(_record(original_error=ValueError("bad value"))))

    assert data["original_error"] == "bad value"


def test_log_error_attaches_context(caplog):
    logger = get_logger("nimrev.tests.errors")

    try:
        raise ConnectionError("storage unavailable")
    except ConnectionError as e:
        with caplog.at_level(logging.ERROR, logger="nimrev.tests.errors"):
            log_error(logger, e, "Failed to persist scan", {"address": "abc"})

    record = caplog.records[0]
    assert record.error_type == "ConnectionError"
    assert record.error_message == "storage unavailable"
    assert "ConnectionError: storage unavailable" in record.error_traceback
    assert record.address == "abc"


def test_setup_logging_writes_json_file(tmp_path):
    log_file = tmp_path / "logs" / "nimrev.log"
    root = logging.getLogger()
    previous = root.handlers[:], root.level

    try:
        setup_logging(level="info", log_file=str(log_file))
        get_logger("nimrev.tests.file").info("hello", extra={"scan": 1})
        for handler in root.handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["scan"] == 1
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers, level = previous
        root.setLevel(level)

"""Unit tests for the JSON log formatter and context loggers."""

import json
import logging

from hostel_service.shared.infrastructure.logging import (
    REDACTED,
    CustomJsonFormatter,
    get_context_logger,
)


def _format(**extra) -> dict:
    formatter = CustomJsonFormatter("%(name)s %(levelname)s %(message)s", environment="Staging")
    record = logging.LogRecord("hostel_service.test", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return json.loads(formatter.format(record))


def test_adds_environment_and_timestamp() -> None:
    payload = _format()

    assert payload["message"] == "hello"
    assert payload["environment"] == "Staging"
    assert payload["timestamp"]


def test_redacts_sensitive_values() -> None:
    payload = _format(default_connection="postgresql://u:secret@db/x", access_token="abc", attempt=2)

    assert payload["default_connection"] == REDACTED
    assert payload["access_token"] == REDACTED
    assert payload["attempt"] == 2


def test_context_logger_keeps_call_extra(caplog) -> None:
    logger = get_context_logger("hostel_service.test", "trace-9")

    with caplog.at_level(logging.INFO, logger="hostel_service.test"):
        logger.info("Request completed", extra={"status_code": 200})

    record = caplog.records[-1]
    assert record.correlation_id == "trace-9"
    assert record.status_code == 200


def test_context_logger_without_correlation_id() -> None:
    assert isinstance(get_context_logger("hostel_service.test"), logging.Logger)

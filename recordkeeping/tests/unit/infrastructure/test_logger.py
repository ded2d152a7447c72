"""Unit tests for the logging configuration module."""

import json
import logging
import sys

import pytest

from recordkeeping.infrastructure.logging import (
    StructuredFormatter,
    build_formatter,
    get_logger,
)


def _record(message: str = "Item with ID 999 not found", exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="recordkeeping.application.services.warehouse_manager",
        level=logging.WARNING,
        pathname=__file__,
        lineno=12,
        msg=message,
        args=(),
        exc_info=exc_info,
        func="remove_item_by_id",
    )


@pytest.mark.unit
class TestStructuredFormatter:
    def test_format_produces_json(self) -> None:
        payload = json.loads(StructuredFormatter().format(_record()))

        assert payload["level"] == "WARNING"
        assert payload["logger"] == "recordkeeping.application.services.warehouse_manager"
        assert payload["function"] == "remove_item_by_id"
        assert payload["line"] == 12
        assert payload["message"] == "Item with ID 999 not found"
        assert "exception" not in payload

    def test_format_includes_exception(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record("failed", exc_info=sys.exc_info())

        payload = json.loads(StructuredFormatter().format(record))

        assert "RuntimeError: boom" in payload["exception"]

    def test_extra_fields_do_not_overwrite(self) -> None:
        record = _record()
        record.extra = {"item_id": 999, "level": "DEBUG"}

        payload = json.loads(StructuredFormatter().format(record))

        assert payload["item_id"] == 999
        assert payload["level"] == "WARNING"


@pytest.mark.unit
def test_build_formatter_selects_format() -> None:
    assert isinstance(build_formatter("json"), StructuredFormatter)
    assert not isinstance(build_formatter("text"), StructuredFormatter)


@pytest.mark.unit
def test_get_logger_configures_once() -> None:
    logger = get_logger("recordkeeping.tests.logger_probe")
    again = get_logger("recordkeeping.tests.logger_probe")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.propagate is False

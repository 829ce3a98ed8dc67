"""
Tests for the JSON log formatter
"""

import json
import logging
import sys
from decimal import Decimal

import pytest

from fiscal.core.logging import JsonFormatter, configure_logging


def make_record(msg: str = "hello %s", args=("world",), **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="fiscal.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    """Tests for JsonFormatter"""

    def test_base_fields(self) -> None:
        payload = json.loads(JsonFormatter().format(make_record()))

        assert payload["level"] == "WARNING"
        assert payload["logger"] == "fiscal.test"
        assert payload["message"] == "hello world"
        assert payload["timestamp"].endswith("+00:00")
        assert "msg" not in payload
        assert "args" not in payload

    def test_extra_fields(self) -> None:
        record = make_record(
            primary_iva_tax_id="IVA21",
            ignored_iva_tax_ids=["IVA105"],
            amount=Decimal("1.50"),
        )

        payload = json.loads(JsonFormatter().format(record))

        assert payload["primary_iva_tax_id"] == "IVA21"
        assert payload["ignored_iva_tax_ids"] == ["IVA105"]
        assert payload["amount"] == "1.50"

    def test_exception(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        payload = json.loads(JsonFormatter().format(record))

        assert "ValueError: boom" in payload["exception"]


class TestConfigureLogging:
    """Tests for configure_logging"""

    @pytest.fixture
    def package_logger(self):
        logger = logging.getLogger("fiscal")
        level = logger.level
        yield logger
        logger.setLevel(level)

    def test_attaches_json_handler(self, package_logger) -> None:
        handler = configure_logging("debug")
        try:
            assert handler in package_logger.handlers
            assert isinstance(handler.formatter, JsonFormatter)
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.removeHandler(handler)

    def test_unknown_level_defaults_to_info(self, package_logger) -> None:
        handler = configure_logging("chatty")
        try:
            assert package_logger.level == logging.INFO
        finally:
            package_logger.removeHandler(handler)

"""
Unit tests for structured logging helpers.
"""
import logging
from typing import List

import pytest

from triespell.utils.logger import StructuredFormatter, StructuredLogger, get_logger


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def captured():
    logger = logging.getLogger("triespell.tests.captured")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    handler = _ListHandler()
    logger.addHandler(handler)
    yield StructuredLogger(logger), handler
    logger.removeHandler(handler)


class TestStructuredLogger:
    """Tests for keyword-argument logging."""

    def test_kwargs_become_record_fields(self, captured):
        """Test keyword arguments are attached to the record."""
        logger, handler = captured
        logger.info("Text spell-checked", issues=3)

        record = handler.records[0]
        assert record.getMessage() == "Text spell-checked"
        assert record.issues == 3

    def test_reserved_names_are_prefixed(self, captured):
        """Test fields clashing with LogRecord attributes get a ctx_ prefix."""
        logger, handler = captured
        logger.warning("Clash", name="x", module="y")

        record = handler.records[0]
        assert record.ctx_name == "x"
        assert record.ctx_module == "y"
        assert record.name == "triespell.tests.captured"

    def test_disabled_level_is_skipped(self, captured):
        """Test nothing is emitted below the logger level."""
        logger, handler = captured
        logging.getLogger("triespell.tests.captured").setLevel(logging.WARNING)

        logger.debug("Hidden", detail=1)

        assert handler.records == []
        assert logger.is_enabled_for(logging.DEBUG) is False

    def test_get_logger_namespace(self):
        """Test loggers live under the triespell namespace."""
        logger = get_logger("services.trie")
        assert logger._logger.name == "triespell.services.trie"


class TestStructuredFormatter:
    """Tests for the key=value formatter."""

    def test_extra_fields_appended(self):
        """Test extra fields render as key=value pairs after the message."""
        record = logging.LogRecord(
            name="triespell.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Dictionary loaded",
            args=(),
            exc_info=None,
        )
        record.word_count = 8

        line = StructuredFormatter().format(record)

        assert "| INFO     | triespell.test | Dictionary loaded" in line
        assert line.endswith("| word_count=8")

    def test_no_extra_fields(self):
        """Test plain records have no trailing field section."""
        record = logging.LogRecord(
            name="triespell.test",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="Plain %s",
            args=("message",),
            exc_info=None,
        )

        line = StructuredFormatter().format(record)

        assert line.endswith("| triespell.test | Plain message")

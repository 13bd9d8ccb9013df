"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import sys

import pytest

from keyforge.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
    log_performance,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(msg: str = "Test message", level: int = logging.INFO) -> logging.LogRecord:
    record = logging.LogRecord(
        name="keyforge.test",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )
    record.funcName = "test_function"
    record.module = "test_module"
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self) -> None:
        """Records render as one JSON object."""
        data = json.loads(StructuredJSONFormatter().format(_record()))
        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "keyforge.test"
        assert data["context"]["module"] == "test_module"
        assert data["context"]["function"] == "test_function"
        assert data["context"]["line"] == 42

    def test_extra_fields_in_context(self) -> None:
        """Extra attributes land in the context block."""
        record = _record()
        record.preset_id = "rotation-y"
        data = json.loads(StructuredJSONFormatter().format(record))
        assert data["context"]["preset_id"] == "rotation-y"
        assert "thread" not in data["context"]

    def test_exception_info(self) -> None:
        """Exceptions are summarized in the context."""
        try:
            raise ValueError("bad steps")
        except ValueError:
            record = _record(level=logging.ERROR)
            record.exc_info = sys.exc_info()
        data = json.loads(StructuredJSONFormatter().format(record))
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "bad steps"
        assert "Traceback" in data["context"]["stack_trace"]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level(self) -> None:
        """Level names are case-insensitive."""
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level(self) -> None:
        """Unknown level names are rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(level="LOUD")

    def test_file_output_structured(self, tmp_path: Path) -> None:
        """Structured logging writes JSON lines to the given file."""
        log_file = tmp_path / "keyforge.jsonl"
        configure_logging(level="INFO", filename=str(log_file), structured=True)
        logging.getLogger("keyforge.test").info("exported")
        for handler in logging.getLogger().handlers:
            handler.flush()
        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "exported"

    def test_custom_format(self, tmp_path: Path) -> None:
        """A custom format string is applied to text logs."""
        log_file = tmp_path / "keyforge.log"
        configure_logging(
            level="INFO", format_string="%(levelname)s|%(message)s", filename=str(log_file)
        )
        logging.getLogger("keyforge.test").warning("careful")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "WARNING|careful" in log_file.read_text(encoding="utf-8")


class TestHelpers:
    """Tests for get_logger and log_performance."""

    def test_get_logger_plain(self) -> None:
        """Without context a plain Logger is returned."""
        assert isinstance(get_logger("keyforge.test"), logging.Logger)

    def test_get_logger_with_context(self) -> None:
        """Context kwargs produce a LoggerAdapter."""
        adapter = get_logger("keyforge.test", preset_id="pulse")
        assert isinstance(adapter, logging.LoggerAdapter)
        assert adapter.extra == {"preset_id": "pulse"}

    def test_log_performance(self, caplog: pytest.LogCaptureFixture) -> None:
        """Decorated calls return their result and log the duration at DEBUG."""

        @log_performance
        def add(a: int, b: int) -> int:
            return a + b

        with caplog.at_level(logging.DEBUG):
            assert add(2, 3) == 5
        assert "'add' took" in caplog.text
        assert add.__name__ == "add"

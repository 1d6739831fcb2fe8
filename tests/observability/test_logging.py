"""
Test suite for logging configuration and correlation IDs.

System role: Verification of log formatting and context propagation
"""

import logging

import pytest

from chatpdf.observability.correlation import (
    CorrelationIdFilter,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from chatpdf.observability.log_utils import log_exception_with_context, safe_log_value
from chatpdf.observability.logger import configure_logging


@pytest.fixture(autouse=True)
def reset_correlation():
    yield
    clear_correlation_id()


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCorrelation:
    """Tests for correlation ID context."""

    def test_set_generates_id_when_missing(self) -> None:
        value = set_correlation_id()

        assert value
        assert get_correlation_id() == value

    def test_set_keeps_supplied_id(self) -> None:
        set_correlation_id("req-1")

        assert get_correlation_id() == "req-1"

    def test_filter_stamps_records(self) -> None:
        set_correlation_id("req-2")
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "req-2"

    def test_filter_uses_placeholder_outside_requests(self) -> None:
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_installs_single_stdout_handler(self) -> None:
        configure_logging("DEBUG")
        configure_logging("WARNING")

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
        assert logging.getLogger("botocore").level == logging.WARNING

    def test_output_includes_correlation_id(self, capsys) -> None:
        configure_logging("INFO")
        set_correlation_id("corr-xyz")

        logging.getLogger("chatpdf.test").info("hello")

        assert "[corr-xyz] - hello" in capsys.readouterr().out


class TestLogUtils:
    """Tests for structured logging helpers."""

    def test_safe_log_value_summarises_collections(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"
        assert safe_log_value(None) == "None"

    def test_safe_log_value_truncates(self) -> None:
        assert safe_log_value("x" * 20, max_length=5).startswith("xxxxx... (truncated, 20 total)")

    def test_log_exception_with_context(self, caplog) -> None:
        logger = logging.getLogger("chatpdf.test.utils")

        with caplog.at_level(logging.ERROR, logger="chatpdf.test.utils"):
            log_exception_with_context(logger, "failed", ValueError("bad"), document="a.pdf")

        record = caplog.records[-1]
        assert record.error_type == "ValueError"
        assert record.document == "a.pdf"

from __future__ import annotations

import io
import logging

import pytest

from safe_numeric import logging_config
from safe_numeric.config import ConfigurationError
from safe_numeric.log_level import LogLevel


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)

    yield root

    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_setup_logging_installs_single_console_handler(root_logger):
    stream = io.StringIO()
    logging_config.setup_logging(LogLevel.WARN, stream=stream)
    logging_config.setup_logging(LogLevel.WARN, stream=stream)

    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.WARNING

    logging.getLogger("safe_numeric.test").warning("value %s rejected", 560)
    logging.getLogger("safe_numeric.test").info("hidden")
    output = stream.getvalue()
    assert "safe_numeric.test - WARNING - value 560 rejected" in output
    assert "hidden" not in output


def test_setup_logging_reads_level_from_environment(root_logger, monkeypatch):
    monkeypatch.setenv("SAFE_NUMERIC_LOG_LEVEL", "debug")
    handler = logging_config.setup_logging(stream=io.StringIO())
    assert handler.level == logging.DEBUG
    assert root_logger.level == logging.DEBUG


def test_trace_level_is_supported(root_logger):
    stream = io.StringIO()
    logging_config.setup_logging(LogLevel.TRACE, stream=stream)
    logging.getLogger("safe_numeric.test").log(LogLevel.TRACE.logging_level, "fine grained")
    assert "TRACE - fine grained" in stream.getvalue()


def test_setup_logging_rejects_unknown_level(root_logger, monkeypatch):
    monkeypatch.setenv("SAFE_NUMERIC_LOG_LEVEL", "LOUD")
    with pytest.raises(ConfigurationError):
        logging_config.setup_logging(stream=io.StringIO())


def test_resolve_log_level_prefers_argument(monkeypatch):
    monkeypatch.setenv("SAFE_NUMERIC_LOG_LEVEL", "ERROR")
    assert logging_config.resolve_log_level(LogLevel.DEBUG) is LogLevel.DEBUG
    assert logging_config.resolve_log_level() is LogLevel.ERROR

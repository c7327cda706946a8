"""
Centralized logging configuration.

Library modules only ever call ``logging.getLogger(__name__)``; applications
call ``setup_logging`` once at startup to attach a console handler to the root
logger with a consistent format and threshold.
"""

import logging
import sys
import threading
from typing import Optional, TextIO

from .config.settings import load_settings
from .log_level import LogLevel

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_UNKNOWN_LOGGER_NAME = "<unknown>"
LOG_FORMAT = "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _close_handlers(logger: logging.Logger, logger_name: Optional[str] = None) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:  # Best-effort cleanup operation  # policy_guard: allow-silent-handler
            safe_name = logger_name if logger_name else _UNKNOWN_LOGGER_NAME
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", safe_name, e)


def _reset_root_handlers(root_logger: logging.Logger) -> None:
    _close_handlers(root_logger, root_logger.name)
    root_logger.handlers = []


def _build_console_handler(stream: Optional[TextIO]) -> logging.Handler:
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    return console_handler


def resolve_log_level(level: Optional[LogLevel] = None) -> LogLevel:
    """Return ``level`` if given, otherwise the level configured in the environment."""
    if level is not None:
        return level
    return load_settings().log_level


def setup_logging(level: Optional[LogLevel] = None, *, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Configure the root logger with a single console handler.

    Args:
        level: Threshold for emitted records. Defaults to ``SAFE_NUMERIC_LOG_LEVEL``.
        stream: Destination stream (stdout when omitted)

    Returns:
        The installed handler
    """
    with _config_lock:
        root_logger = logging.getLogger()
        resolved = resolve_log_level(level)

        _reset_root_handlers(root_logger)
        console_handler = _build_console_handler(stream)
        console_handler.setLevel(resolved.logging_level)
        root_logger.addHandler(console_handler)
        root_logger.setLevel(resolved.logging_level)
        return console_handler


__all__ = ["LOG_DATE_FORMAT", "LOG_FORMAT", "resolve_log_level", "setup_logging"]

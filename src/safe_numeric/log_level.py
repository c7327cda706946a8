"""Severity levels with ordering weights, mapped onto the stdlib logging levels."""

from __future__ import annotations

import logging
from enum import Enum

TRACE_LEVEL = 5


class LogLevel(Enum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4

    @property
    def weight(self) -> int:
        return self.value

    @property
    def logging_level(self) -> int:
        return _LOGGING_LEVELS[self]

    def enables(self, other: "LogLevel") -> bool:
        """True when messages at ``other`` are shown under this threshold."""
        return other.weight >= self.weight


_LOGGING_LEVELS = {
    LogLevel.TRACE: TRACE_LEVEL,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}

logging.addLevelName(TRACE_LEVEL, "TRACE")


__all__ = ["LogLevel", "TRACE_LEVEL"]

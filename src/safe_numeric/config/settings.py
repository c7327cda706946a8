"""Settings for decimal arithmetic and logging, read from the environment."""

from __future__ import annotations

import decimal
from dataclasses import dataclass
from typing import Final

from ..log_level import LogLevel
from ..safe_converter import SAFE_CONVERTER
from .errors import ConfigurationError
from .runtime import env_int, env_str

PRECISION_ENV: Final = "SAFE_NUMERIC_DECIMAL_PRECISION"
ROUNDING_ENV: Final = "SAFE_NUMERIC_ROUNDING"
LOG_LEVEL_ENV: Final = "SAFE_NUMERIC_LOG_LEVEL"

DEFAULT_PRECISION: Final = 34
DEFAULT_ROUNDING: Final = decimal.ROUND_HALF_EVEN

ROUNDING_MODES: Final = frozenset(
    {
        decimal.ROUND_CEILING,
        decimal.ROUND_DOWN,
        decimal.ROUND_FLOOR,
        decimal.ROUND_HALF_DOWN,
        decimal.ROUND_HALF_EVEN,
        decimal.ROUND_HALF_UP,
        decimal.ROUND_UP,
        decimal.ROUND_05UP,
    }
)


@dataclass(frozen=True)
class NumericSettings:
    precision: int = DEFAULT_PRECISION
    rounding: str = DEFAULT_ROUNDING
    log_level: LogLevel = LogLevel.INFO

    def __post_init__(self) -> None:
        if self.precision < 1:
            raise ConfigurationError.invalid_value("precision", self.precision, "Must be >= 1")
        if self.rounding not in ROUNDING_MODES:
            raise ConfigurationError.invalid_value("rounding", self.rounding, f"Expected one of {sorted(ROUNDING_MODES)}")


def load_settings() -> NumericSettings:
    """
    Build settings from ``SAFE_NUMERIC_*`` environment variables.

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    precision = env_int(PRECISION_ENV, DEFAULT_PRECISION, minimum=1)
    rounding = env_str(ROUNDING_ENV, DEFAULT_ROUNDING)
    if rounding not in ROUNDING_MODES:
        raise ConfigurationError.invalid_format(ROUNDING_ENV, rounding, f"one of {sorted(ROUNDING_MODES)}")

    raw_level = env_str(LOG_LEVEL_ENV)
    if raw_level is None:
        log_level = LogLevel.INFO
    else:
        log_level = SAFE_CONVERTER.parse_enum(raw_level.upper(), LogLevel)
        if log_level is None:
            raise ConfigurationError.invalid_format(LOG_LEVEL_ENV, raw_level, f"one of {[level.name for level in LogLevel]}")

    return NumericSettings(precision=precision, rounding=rounding, log_level=log_level)


__all__ = ["LOG_LEVEL_ENV", "NumericSettings", "PRECISION_ENV", "ROUNDING_ENV", "ROUNDING_MODES", "load_settings"]

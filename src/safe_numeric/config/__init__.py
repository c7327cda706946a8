"""Configuration helpers and settings for the numeric engine."""

from .errors import ConfigurationError
from .runtime import env_int, env_str
from .settings import NumericSettings, load_settings

__all__ = [
    "ConfigurationError",
    "NumericSettings",
    "env_int",
    "env_str",
    "load_settings",
]

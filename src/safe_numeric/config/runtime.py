from __future__ import annotations

"""Environment-backed configuration lookups."""


import os

from .errors import ConfigurationError


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch an environment variable as a string with validation."""

    value = os.getenv(name)
    if value is not None and strip:
        value = value.strip()

    if value is None or (not allow_blank and value == ""):
        if required:
            raise ConfigurationError.missing_value(name, "required environment variable is not set")
        return or_value
    return value


def env_int(name: str, or_value: int | None = None, *, required: bool = False, minimum: int | None = None) -> int | None:
    """Fetch an environment variable and coerce it to ``int``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError.missing_value(name, "required environment variable is not set")
        return or_value
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError.invalid_format(name, raw, "an integer") from exc
    if minimum is not None and value < minimum:
        raise ConfigurationError.invalid_value(name, value, f"Must be >= {minimum}")
    return value


__all__ = ["ConfigurationError", "env_int", "env_str"]

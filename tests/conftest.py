"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest

from safe_numeric import SafeConverter

_ENV_VARS = (
    "SAFE_NUMERIC_DECIMAL_PRECISION",
    "SAFE_NUMERIC_ROUNDING",
    "SAFE_NUMERIC_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_numeric_env(monkeypatch):
    """Keep SAFE_NUMERIC_* settings from the host out of every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def converter_logger() -> logging.Logger:
    return logging.getLogger("tests.safe_numeric.converter")


@pytest.fixture
def converter(converter_logger) -> SafeConverter:
    """SafeConverter bound to a dedicated logger so caplog can filter on it."""
    return SafeConverter(logger=converter_logger)

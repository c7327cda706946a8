import pytest

from safe_numeric.config import ConfigurationError, runtime


def test_env_str_strips_and_falls_back(monkeypatch):
    monkeypatch.setenv("PADDED", "  value ")
    assert runtime.env_str("PADDED") == "value"
    assert runtime.env_str("PADDED", strip=False) == "  value "

    monkeypatch.setenv("BLANK", "")
    assert runtime.env_str("BLANK", "fallback") == "fallback"
    assert runtime.env_str("BLANK", allow_blank=True) == ""

    monkeypatch.delenv("MISSING", raising=False)
    assert runtime.env_str("MISSING") is None
    with pytest.raises(ConfigurationError, match="MISSING is missing or empty"):
        runtime.env_str("MISSING", required=True)


def test_env_int_validation(monkeypatch):
    monkeypatch.setenv("INT_VALUE", "7")
    assert runtime.env_int("INT_VALUE") == 7

    monkeypatch.setenv("INT_INVALID", "seven")
    with pytest.raises(ConfigurationError, match="INT_INVALID has invalid format"):
        runtime.env_int("INT_INVALID")

    monkeypatch.setenv("INT_SMALL", "0")
    with pytest.raises(ConfigurationError, match="Must be >= 1"):
        runtime.env_int("INT_SMALL", minimum=1)

    monkeypatch.delenv("INT_DEFAULT", raising=False)
    assert runtime.env_int("INT_DEFAULT", or_value=3, required=True) == 3
    with pytest.raises(ConfigurationError):
        runtime.env_int("INT_DEFAULT", required=True)

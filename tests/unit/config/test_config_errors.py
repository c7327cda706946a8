import pytest

from safe_numeric.config.errors import ConfigurationError


@pytest.mark.parametrize(
    ("factory", "args", "expected"),
    [
        (
            ConfigurationError.invalid_format,
            ("param", "value", "expected pattern"),
            "param has invalid format (received 'value'). Expected expected pattern",
        ),
        (ConfigurationError.invalid_format, ("param", "value"), "param has invalid format (received 'value')"),
        (ConfigurationError.missing_value, ("param", "context"), "param is missing or empty: context"),
        (ConfigurationError.invalid_value, ("name", 5, "must be positive"), "Invalid value for name: 5. must be positive"),
    ],
)
def test_factories(factory, args, expected):
    error = factory(*args)
    assert isinstance(error, ConfigurationError)
    assert str(error) == expected

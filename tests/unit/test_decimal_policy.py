"""Tests for DecimalPolicy."""

import decimal

import pytest

from safe_numeric.config import NumericSettings
from safe_numeric.decimal_policy import DEFAULT_POLICY, DecimalPolicy


def test_default_policy():
    """The default policy is 34 digits, half-even."""
    context = DEFAULT_POLICY.context()
    assert context.prec == 34
    assert context.rounding == decimal.ROUND_HALF_EVEN


def test_context_traps_failures():
    """Division by zero and 0/0 raise from the context."""
    context = DecimalPolicy().context()
    with pytest.raises(decimal.DivisionByZero):
        context.divide(decimal.Decimal(1), decimal.Decimal(0))
    with pytest.raises(decimal.InvalidOperation):
        context.divide(decimal.Decimal(0), decimal.Decimal(0))


def test_rounding_is_applied():
    """Results round with the configured mode."""
    context = DecimalPolicy(precision=2, rounding=decimal.ROUND_DOWN).context()
    assert context.divide(decimal.Decimal(2), decimal.Decimal(3)) == decimal.Decimal("0.66")


def test_from_settings():
    """Policies build from NumericSettings."""
    settings = NumericSettings(precision=10, rounding=decimal.ROUND_HALF_UP)
    assert DecimalPolicy.from_settings(settings) == DecimalPolicy(10, decimal.ROUND_HALF_UP)

"""Tests for SupportedKind and kind inference."""

from decimal import Decimal

import numpy as np
import pytest

from safe_numeric.kinds import FLOAT32_MAX, SupportedKind, infer_kind


@pytest.mark.parametrize(
    ("kind", "bounds"),
    [
        (SupportedKind.BYTE, (-128, 127)),
        (SupportedKind.SHORT, (-32768, 32767)),
        (SupportedKind.INT32, (-2147483648, 2147483647)),
        (SupportedKind.INT64, (-(2**63), 2**63 - 1)),
    ],
)
def test_integral_bounds(kind, bounds):
    """Integral kinds carry two's-complement bounds."""
    assert kind.is_integral
    assert kind.bounds == bounds


def test_float_and_decimal_bounds():
    """Float kinds are bounded by their max finite value; decimal is unbounded."""
    assert SupportedKind.FLOAT32.bounds == (-FLOAT32_MAX, FLOAT32_MAX)
    assert not SupportedKind.FLOAT64.is_integral
    assert SupportedKind.DECIMAL.bounds is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (np.int8(1), SupportedKind.BYTE),
        (np.int16(1), SupportedKind.SHORT),
        (np.int32(1), SupportedKind.INT32),
        (np.int64(1), SupportedKind.INT64),
        (np.float32(1), SupportedKind.FLOAT32),
        (np.float64(1), SupportedKind.FLOAT64),
        (1.5, SupportedKind.FLOAT64),
        (Decimal("1.5"), SupportedKind.DECIMAL),
        (7, SupportedKind.INT64),
        (2**63, SupportedKind.DECIMAL),
        (-(2**63) - 1, SupportedKind.DECIMAL),
    ],
)
def test_infer_kind(raw, expected):
    """Raw types map to their natural kind."""
    assert infer_kind(raw) is expected


@pytest.mark.parametrize("raw", [None, True, np.bool_(False), "1", b"1", 1j, [1]])
def test_infer_kind_rejects_non_numbers(raw):
    """Bools, text and containers have no kind."""
    assert infer_kind(raw) is None

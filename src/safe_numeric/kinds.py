"""
Closed set of numeric representations understood by the conversion engine.

Each kind carries the width policy used when narrowing a canonical decimal into
that representation. Integral kinds use two's-complement bounds, the float kinds
are bounded by their largest finite IEEE-754 value and ``DECIMAL`` is unbounded.
"""

from __future__ import annotations

import sys
from decimal import Decimal
from enum import Enum
from typing import Any, Final, Optional, Tuple

import numpy as np

FLOAT32_MAX: Final[float] = float(np.finfo(np.float32).max)
FLOAT64_MAX: Final[float] = sys.float_info.max
# Digits in the widest integral bound (2**63 - 1)
MAX_INTEGRAL_DIGITS: Final[int] = 19


class SupportedKind(Enum):
    """Representation tags accepted by SafeConverter and NumericValue."""

    BYTE = "byte"
    SHORT = "short"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    DECIMAL = "decimal"

    @property
    def is_integral(self) -> bool:
        return self in _INTEGRAL_BITS

    @property
    def bounds(self) -> Optional[Tuple[Any, Any]]:
        """Inclusive (lower, upper) bounds, or None for DECIMAL."""
        if self in _INTEGRAL_BITS:
            bits = _INTEGRAL_BITS[self]
            return -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
        if self is SupportedKind.FLOAT32:
            return -FLOAT32_MAX, FLOAT32_MAX
        if self is SupportedKind.FLOAT64:
            return -FLOAT64_MAX, FLOAT64_MAX
        return None


_INTEGRAL_BITS: Final[dict[SupportedKind, int]] = {
    SupportedKind.BYTE: 8,
    SupportedKind.SHORT: 16,
    SupportedKind.INT32: 32,
    SupportedKind.INT64: 64,
}

# Ordered so that numpy subclasses of builtins resolve to their numpy kind first.
_NUMPY_KINDS: Final[Tuple[Tuple[type, SupportedKind], ...]] = (
    (np.int8, SupportedKind.BYTE),
    (np.int16, SupportedKind.SHORT),
    (np.int32, SupportedKind.INT32),
    (np.int64, SupportedKind.INT64),
    (np.float32, SupportedKind.FLOAT32),
)


def infer_kind(raw: Any) -> Optional[SupportedKind]:
    """
    Return the natural kind of a raw value, or None if it has no numeric kind.

    Plain ``int`` values resolve to INT64 when they fit and to DECIMAL otherwise;
    ``bool`` is deliberately excluded even though it subclasses ``int``.

    Examples:
        >>> infer_kind(np.int16(3))
        <SupportedKind.SHORT: 'short'>
        >>> infer_kind(2.5)
        <SupportedKind.FLOAT64: 'float64'>
        >>> infer_kind("2.5") is None
        True
    """
    if raw is None or isinstance(raw, (bool, np.bool_)):
        return None
    for numpy_type, kind in _NUMPY_KINDS:
        if isinstance(raw, numpy_type):
            return kind
    if isinstance(raw, float):
        return SupportedKind.FLOAT64
    if isinstance(raw, Decimal):
        return SupportedKind.DECIMAL
    if isinstance(raw, int):
        lower, upper = SupportedKind.INT64.bounds
        return SupportedKind.INT64 if lower <= raw <= upper else SupportedKind.DECIMAL
    return None


__all__ = ["FLOAT32_MAX", "FLOAT64_MAX", "MAX_INTEGRAL_DIGITS", "SupportedKind", "infer_kind"]

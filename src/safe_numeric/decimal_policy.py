"""Rounding and precision policy for canonical decimal arithmetic."""

from __future__ import annotations

import decimal
from dataclasses import dataclass
from typing import Final

from .config.settings import DEFAULT_PRECISION, DEFAULT_ROUNDING, NumericSettings

_TRAPS: Final = (decimal.DivisionByZero, decimal.InvalidOperation, decimal.Overflow)


@dataclass(frozen=True)
class DecimalPolicy:
    """
    Precision applied to arithmetic results.

    Stored values are kept exact; only the result of an operation is rounded to
    ``precision`` significant digits using ``rounding``. Division by zero,
    invalid operations and exponent overflow are trapped so that callers can
    turn them into empty results.
    """

    precision: int = DEFAULT_PRECISION
    rounding: str = DEFAULT_ROUNDING

    def context(self) -> decimal.Context:
        return decimal.Context(prec=self.precision, rounding=self.rounding, traps=list(_TRAPS))

    @classmethod
    def from_settings(cls, settings: NumericSettings) -> "DecimalPolicy":
        return cls(precision=settings.precision, rounding=settings.rounding)


DEFAULT_POLICY: Final[DecimalPolicy] = DecimalPolicy()


__all__ = ["DEFAULT_POLICY", "DecimalPolicy"]

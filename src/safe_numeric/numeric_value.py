"""
Immutable numeric box normalized to an arbitrary-precision decimal.

A ``NumericValue`` either holds a ``Decimal`` or is empty. Emptiness is
permanent: every accessor on an empty value returns None and every arithmetic
operation returns the empty value unchanged. No public method raises on bad
input; failures are reported through the converter's logger.

Examples:
    >>> NumericValue.of(2).add(3).as_int32()
    5
    >>> NumericValue.of(560).as_byte() is None
    True
"""

from __future__ import annotations

import decimal
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any, Callable, Final, Optional

import numpy as np

from .decimal_policy import DEFAULT_POLICY, DecimalPolicy
from .errors import ArithmeticFailureError, NumericError, OutOfRangeError, UnsupportedKindError
from .kinds import MAX_INTEGRAL_DIGITS, SupportedKind, infer_kind
from .safe_converter import SAFE_CONVERTER, SafeConverter

_OPERATIONS: Final[dict[str, Callable[[decimal.Context, Decimal, Decimal], Decimal]]] = {
    "add": decimal.Context.add,
    "subtract": decimal.Context.subtract,
    "multiply": decimal.Context.multiply,
    "divide": decimal.Context.divide,
}


# Largest Decimal.adjusted() exponent a finite value of each float kind can have
_MAX_FLOAT_EXPONENT: Final[dict[SupportedKind, int]] = {
    SupportedKind.FLOAT32: 38,
    SupportedKind.FLOAT64: 308,
}

# Exponents past this render canonical_text in scientific notation
_PLAIN_TEXT_EXPONENT: Final[int] = 1000


def _check_magnitude(value: Decimal, kind: SupportedKind) -> None:
    """Reject finite values too large for ``kind`` before any text is built for them."""
    if not value.is_finite():
        return
    limit = MAX_INTEGRAL_DIGITS - 1 if kind.is_integral else _MAX_FLOAT_EXPONENT.get(kind)
    if limit is not None and value.adjusted() > limit:
        raise OutOfRangeError.for_value(str(value), kind, kind.bounds)


def _text_for_kind(value: Decimal, kind: SupportedKind) -> str:
    """Compact text for ``value`` that the converter can parse as ``kind``."""
    _check_magnitude(value, kind)
    if kind.is_integral and value.is_finite():
        # Truncated here so plain notation never spells out a long fraction
        return format(value.to_integral_value(rounding=decimal.ROUND_DOWN), "f")
    return str(value)


def _raw_text(raw: Any, kind: SupportedKind) -> str:
    """Render a raw value as text in the representation of ``kind``."""
    if isinstance(raw, (int, np.integer)):
        # Exact, and not subject to the int -> str digit limit
        value = Decimal(int(raw))
    elif isinstance(raw, Decimal):
        value = raw
    else:
        value = Decimal(str(raw))
    if kind is SupportedKind.FLOAT32:
        _check_magnitude(value, kind)
        with np.errstate(over="ignore"):
            return str(np.float32(float(value)))
    return _text_for_kind(value, kind)


@dataclass(frozen=True)
class NumericValue:
    inner: Optional[Decimal] = None
    converter: SafeConverter = field(default=SAFE_CONVERTER, repr=False, compare=False)
    policy: DecimalPolicy = field(default=DEFAULT_POLICY, repr=False, compare=False)

    @classmethod
    def empty(cls, *, converter: Optional[SafeConverter] = None, policy: Optional[DecimalPolicy] = None) -> "NumericValue":
        return cls(None, converter or SAFE_CONVERTER, policy or DEFAULT_POLICY)

    @classmethod
    def of(
        cls,
        raw: Any,
        kind: Optional[SupportedKind] = None,
        *,
        converter: Optional[SafeConverter] = None,
        policy: Optional[DecimalPolicy] = None,
    ) -> "NumericValue":
        """
        Box a raw number, narrowing it to ``kind`` before storing it as a Decimal.

        Args:
            raw: int, float, Decimal or numpy scalar
            kind: Representation the raw value is declared as. Defaults to the
                kind inferred from the raw value's type.
            converter: Converter used for parsing and logging
            policy: Decimal policy applied to arithmetic results

        Returns:
            A present NumericValue, or an empty one when ``raw`` is None, has no
            numeric kind, does not fit ``kind`` or ``kind`` is unsupported
        """
        empty = cls.empty(converter=converter, policy=policy)
        logger = empty.converter.logger
        if raw is None:
            logger.warning("None value provided to NumericValue.of()")
            return empty

        natural = infer_kind(raw)
        if natural is None:
            logger.error("Bad input provided to NumericValue.of(): %s", UnsupportedKindError.for_value(raw))
            return empty
        target = natural if kind is None else kind
        if not isinstance(target, SupportedKind):
            logger.error("Bad kind provided to NumericValue.of(): %s", UnsupportedKindError.for_kind(kind))
            return empty

        try:
            text = _raw_text(raw, target)
        except NumericError as exc:  # Expected data validation or parsing failure  # policy_guard: allow-silent-handler
            logger.error("Failed to convert %s value to %s: %s", type(raw).__name__, target.value, exc)
            return empty
        except (OverflowError, ValueError, decimal.InvalidOperation) as exc:  # Expected data validation or parsing failure  # policy_guard: allow-silent-handler
            logger.error("Failed to render %s value as %s: %s", type(raw).__name__, target.value, exc)
            return empty

        narrowed = empty.converter.convert(text, target)
        if not narrowed.is_present:
            return empty
        canonical = empty.converter.convert(str(narrowed.value), SupportedKind.DECIMAL)
        return replace(empty, inner=canonical.value)

    @classmethod
    def parse(
        cls,
        raw: Any,
        kind: Optional[SupportedKind] = None,
        *,
        converter: Optional[SafeConverter] = None,
        policy: Optional[DecimalPolicy] = None,
    ) -> Optional["NumericValue"]:
        """Like ``of`` but returns None instead of an empty value."""
        value = cls.of(raw, kind, converter=converter, policy=policy)
        return value if value.is_present() else None

    def is_present(self) -> bool:
        return self.inner is not None

    @property
    def canonical_text(self) -> Optional[str]:
        """
        Decimal text of the stored value.

        Plain notation is used while the exponent stays within
        ``_PLAIN_TEXT_EXPONENT``; beyond that the compact scientific form is
        returned. Either form parses back to an equal Decimal.
        """
        if self.inner is None:
            return None
        exponent = self.inner.as_tuple().exponent
        if self.inner.adjusted() > _PLAIN_TEXT_EXPONENT or exponent < -_PLAIN_TEXT_EXPONENT:
            return str(self.inner)
        return format(self.inner, "f")

    def as_kind(self, kind: SupportedKind) -> Optional[Any]:
        if self.inner is None:
            return None
        if not isinstance(kind, SupportedKind):
            return self.converter.parse(str(self.inner), kind)
        try:
            text = _text_for_kind(self.inner, kind)
        except OutOfRangeError as exc:  # Expected data validation or parsing failure  # policy_guard: allow-silent-handler
            self.converter.logger.error("Failed to convert %s to %s: %s", self.inner, kind.value, exc)
            return None
        return self.converter.parse(text, kind)

    def as_byte(self) -> Optional[int]:
        return self.as_kind(SupportedKind.BYTE)

    def as_short(self) -> Optional[int]:
        return self.as_kind(SupportedKind.SHORT)

    def as_int32(self) -> Optional[int]:
        return self.as_kind(SupportedKind.INT32)

    def as_int64(self) -> Optional[int]:
        return self.as_kind(SupportedKind.INT64)

    def as_float32(self) -> Optional[np.float32]:
        return self.as_kind(SupportedKind.FLOAT32)

    def as_float64(self) -> Optional[float]:
        return self.as_kind(SupportedKind.FLOAT64)

    def as_decimal(self) -> Optional[Decimal]:
        return self.as_kind(SupportedKind.DECIMAL)

    def add(self, other: Any) -> "NumericValue":
        return self._combine("add", other)

    def subtract(self, other: Any) -> "NumericValue":
        return self._combine("subtract", other)

    def multiply(self, other: Any) -> "NumericValue":
        return self._combine("multiply", other)

    def divide(self, other: Any) -> "NumericValue":
        return self._combine("divide", other)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide

    def _box(self, other: Any) -> "NumericValue":
        if isinstance(other, NumericValue):
            return other
        return NumericValue.of(other, converter=self.converter, policy=self.policy)

    def _combine(self, operation: str, other: Any) -> "NumericValue":
        logger = self.converter.logger
        if self.inner is None:
            logger.debug("Skipping %s on an empty NumericValue", operation)
            return self

        operand = self._box(other)
        if operand.inner is None:
            logger.warning("Ignoring %s with unusable operand %r", operation, other)
            return self

        try:
            result = _OPERATIONS[operation](self.policy.context(), self.inner, operand.inner)
        except decimal.DecimalException as exc:  # Expected arithmetic failure  # policy_guard: allow-silent-handler
            error = ArithmeticFailureError.for_operation(operation, self.inner, operand.inner)
            logger.error("%s (%s)", error, type(exc).__name__)
            return replace(self, inner=None)
        return replace(self, inner=result)


__all__ = ["NumericValue"]

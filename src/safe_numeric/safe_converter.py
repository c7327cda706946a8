"""
Total (non-raising) conversion of text into numeric kinds.

Every public entry point returns either a value or an empty result; the reason
for an empty result is preserved on ``ConversionResult.failure`` and reported
through the injected logger.

Integral kinds drop any fractional suffix before parsing: everything from the
first ``.`` onwards is discarded, so ``"10.999"`` parses as ``10`` and
``"abc.def"`` still fails because ``"abc"`` is not numeric.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Final, Generic, Optional, Type, TypeVar

import numpy as np

from .errors import ConversionFailure, MalformedTextError, NumericError, OutOfRangeError, UnsupportedKindError
from .kinds import MAX_INTEGRAL_DIGITS, SupportedKind

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

_INTEGRAL_PATTERN: Final = re.compile(r"[+-]?[0-9]+")
_REAL_PATTERN: Final = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class ConversionResult(Generic[T]):
    """Outcome of a conversion: a value, or the reason there is none."""

    value: Optional[T] = None
    failure: Optional[ConversionFailure] = None
    detail: str = ""

    @property
    def is_present(self) -> bool:
        return self.failure is None and self.value is not None

    def value_or(self, otherwise: Any = None) -> Any:
        return self.value if self.is_present else otherwise

    @classmethod
    def success(cls, value: T) -> "ConversionResult[T]":
        return cls(value=value)

    @classmethod
    def failed(cls, failure: ConversionFailure, detail: str = "") -> "ConversionResult[T]":
        return cls(failure=failure, detail=detail)


def _drop_decimals(text: str) -> str:
    return text.split(".", 1)[0]


def _check_real_grammar(text: str, kind: SupportedKind) -> None:
    if not _REAL_PATTERN.fullmatch(text):
        raise MalformedTextError.for_text(text, kind)


def _parse_integral(text: str, kind: SupportedKind) -> int:
    truncated = _drop_decimals(text)
    if not _INTEGRAL_PATTERN.fullmatch(truncated):
        raise MalformedTextError.for_text(text, kind)
    if len(truncated.lstrip("+-").lstrip("0")) > MAX_INTEGRAL_DIGITS:
        raise OutOfRangeError.for_value(text, kind, kind.bounds)
    value = int(truncated)
    lower, upper = kind.bounds
    if not lower <= value <= upper:
        raise OutOfRangeError.for_value(text, kind, kind.bounds)
    return value


def _parse_float32(text: str, kind: SupportedKind) -> np.float32:
    # Rounded to double, then to single. Text sitting within half a double ulp of a
    # single-precision tie can land one single ulp away from a direct parse.
    _check_real_grammar(text, kind)
    with np.errstate(over="ignore"):
        value = np.float32(float(text))
    if not np.isfinite(value):
        raise OutOfRangeError.for_value(text, kind)
    return value


def _parse_float64(text: str, kind: SupportedKind) -> float:
    _check_real_grammar(text, kind)
    value = float(text)
    if not math.isfinite(value):
        raise OutOfRangeError.for_value(text, kind)
    return value


def _parse_decimal(text: str, kind: SupportedKind) -> Decimal:
    _check_real_grammar(text, kind)
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise MalformedTextError.for_text(text, kind) from exc


_PARSERS: Final[dict[SupportedKind, Callable[[str, SupportedKind], Any]]] = {
    SupportedKind.BYTE: _parse_integral,
    SupportedKind.SHORT: _parse_integral,
    SupportedKind.INT32: _parse_integral,
    SupportedKind.INT64: _parse_integral,
    SupportedKind.FLOAT32: _parse_float32,
    SupportedKind.FLOAT64: _parse_float64,
    SupportedKind.DECIMAL: _parse_decimal,
}


class SafeConverter:
    """
    Stateless text-to-number converter that never raises.

    Args:
        logger: Destination for diagnostics on failure paths. Defaults to this
            module's logger.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def convert(self, text: Optional[str], kind: SupportedKind) -> ConversionResult[Any]:
        """
        Convert text into ``kind``, keeping the failure reason.

        Args:
            text: Text to parse; may be None
            kind: Target representation

        Returns:
            ConversionResult holding the parsed value or a ConversionFailure
        """
        if not isinstance(kind, SupportedKind):
            error = UnsupportedKindError.for_kind(kind)
            self._logger.error("Refusing to convert %r: %s", text, error)
            return ConversionResult.failed(error.failure, str(error))
        if text is None:
            self._logger.warning("None text provided for %s conversion", kind.value)
            return ConversionResult.failed(ConversionFailure.ABSENT_INPUT, f"no text for {kind.value}")
        if not isinstance(text, str):
            error = MalformedTextError.not_a_string(text, kind)
            self._logger.warning("Non-text input %r provided for %s conversion", text, kind.value)
            return ConversionResult.failed(error.failure, str(error))

        try:
            value = _PARSERS[kind](text, kind)
        except NumericError as exc:  # Expected data validation or parsing failure  # policy_guard: allow-silent-handler
            self._logger.error("Failed to convert %r to %s: %s", text, kind.value, exc)
            return ConversionResult.failed(exc.failure, str(exc))
        return ConversionResult.success(value)

    def parse(self, text: Optional[str], kind: SupportedKind) -> Optional[Any]:
        return self.convert(text, kind).value_or(None)

    def parse_byte(self, text: Optional[str]) -> Optional[int]:
        return self.parse(text, SupportedKind.BYTE)

    def parse_short(self, text: Optional[str]) -> Optional[int]:
        return self.parse(text, SupportedKind.SHORT)

    def parse_int32(self, text: Optional[str]) -> Optional[int]:
        return self.parse(text, SupportedKind.INT32)

    def parse_int64(self, text: Optional[str]) -> Optional[int]:
        return self.parse(text, SupportedKind.INT64)

    def parse_float32(self, text: Optional[str]) -> Optional[np.float32]:
        return self.parse(text, SupportedKind.FLOAT32)

    def parse_float64(self, text: Optional[str]) -> Optional[float]:
        return self.parse(text, SupportedKind.FLOAT64)

    def parse_decimal(self, text: Optional[str]) -> Optional[Decimal]:
        return self.parse(text, SupportedKind.DECIMAL)

    def parse_enum(self, text: Optional[str], enum_type: Optional[Type[E]]) -> Optional[E]:
        """
        Look up an enum member by its exact, case-sensitive name.

        Args:
            text: Member name; may be None
            enum_type: Enum class to search; may be None

        Returns:
            The matching member, or None on absent input or no match
        """
        if text is None or enum_type is None:
            self._logger.warning("None value [%s] or enum type [%s] provided to parse_enum()", text, enum_type)
            return None
        members = getattr(enum_type, "__members__", None)
        if members is None:
            self._logger.error("Cannot parse %r: %r is not an enum type", text, enum_type)
            return None
        member = members.get(text) if isinstance(text, str) else None
        if member is None:
            self._logger.error("Failed to convert [%s] to a/an [%s]", text, enum_type.__name__)
        return member


SAFE_CONVERTER: Final[SafeConverter] = SafeConverter()


__all__ = ["ConversionResult", "SAFE_CONVERTER", "SafeConverter"]

"""Error taxonomy for numeric conversion and arithmetic.

These exceptions never cross the public API: converters raise them internally
and map them to a ``ConversionFailure`` reason before returning an empty result.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ConversionFailure(Enum):
    """Why a conversion produced no value."""

    ABSENT_INPUT = "absent_input"
    MALFORMED_TEXT = "malformed_text"
    OUT_OF_RANGE = "out_of_range"
    UNSUPPORTED_KIND = "unsupported_kind"
    ARITHMETIC_FAILURE = "arithmetic_failure"


class NumericError(ValueError):
    """Numeric conversion failed.

    Keyword arguments are stored as attributes for debugging.
    """

    failure: ConversionFailure = ConversionFailure.MALFORMED_TEXT

    def __init__(self, message: str = "", *, text: Optional[str] = None, kind: Any = None, **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Numeric conversion failed"
        super().__init__(message)
        self.text = text
        self.kind = kind
        for key, value in kwargs.items():
            setattr(self, key, value)


class MalformedTextError(NumericError):
    """Text does not match the numeric grammar of the target kind."""

    failure = ConversionFailure.MALFORMED_TEXT

    @classmethod
    def for_text(cls, text: str, kind: Any) -> "MalformedTextError":
        return cls(f"{_abbreviate(text)!r} is not a valid {_kind_name(kind)} literal", text=text, kind=kind)

    @classmethod
    def not_a_string(cls, text: Any, kind: Any) -> "MalformedTextError":
        return cls(f"Expected text for {_kind_name(kind)}, received {type(text).__name__}", text=None, kind=kind)


class OutOfRangeError(NumericError):
    """Numeric text parsed but exceeds the representable domain of the kind."""

    failure = ConversionFailure.OUT_OF_RANGE

    @classmethod
    def for_value(cls, text: str, kind: Any, bounds: Any = None) -> "OutOfRangeError":
        msg = f"{_abbreviate(text)!r} is outside the range of {_kind_name(kind)}"
        if bounds is not None:
            msg += f" {list(bounds)}"
        return cls(msg, text=text, kind=kind)


class UnsupportedKindError(NumericError):
    """Value or declared kind is not one of the supported numeric kinds."""

    failure = ConversionFailure.UNSUPPORTED_KIND

    @classmethod
    def for_kind(cls, kind: Any) -> "UnsupportedKindError":
        return cls(f"Unsupported numeric kind: {kind!r}", kind=kind)

    @classmethod
    def for_value(cls, raw: Any) -> "UnsupportedKindError":
        return cls(f"Values of type {type(raw).__name__} have no numeric kind", text=repr(raw))


class ArithmeticFailureError(NumericError):
    """Decimal arithmetic raised a trapped condition."""

    failure = ConversionFailure.ARITHMETIC_FAILURE

    @classmethod
    def for_operation(cls, operation: str, left: Any, right: Any) -> "ArithmeticFailureError":
        return cls(f"Cannot {operation} {left} and {right}", text=f"{left} {operation} {right}")


def _abbreviate(text: str, limit: int = 40) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}...({len(text)} chars)"


def _kind_name(kind: Any) -> str:
    return getattr(kind, "value", None) or repr(kind)


__all__ = [
    "ArithmeticFailureError",
    "ConversionFailure",
    "MalformedTextError",
    "NumericError",
    "OutOfRangeError",
    "UnsupportedKindError",
]

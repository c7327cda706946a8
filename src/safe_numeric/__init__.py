"""Safe numeric parsing, coercion and decimal arithmetic."""

from .decimal_policy import DEFAULT_POLICY, DecimalPolicy
from .errors import (
    ArithmeticFailureError,
    ConversionFailure,
    MalformedTextError,
    NumericError,
    OutOfRangeError,
    UnsupportedKindError,
)
from .kinds import SupportedKind, infer_kind
from .log_level import LogLevel
from .numeric_value import NumericValue
from .safe_converter import SAFE_CONVERTER, ConversionResult, SafeConverter

__all__ = [
    "ArithmeticFailureError",
    "ConversionFailure",
    "ConversionResult",
    "DEFAULT_POLICY",
    "DecimalPolicy",
    "LogLevel",
    "MalformedTextError",
    "NumericError",
    "NumericValue",
    "OutOfRangeError",
    "SAFE_CONVERTER",
    "SafeConverter",
    "SupportedKind",
    "UnsupportedKindError",
    "infer_kind",
]

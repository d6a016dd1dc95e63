"""
Domain models and value objects.

Contains the BigInteger value type, its error taxonomy and the
hex/binary formatting helper.
"""

from biginteger.core.domain.big_integer import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    MAX_SHIFT_BITS,
    SUPPORTED_BASES,
    BigInteger,
    BigIntegerResult,
)
from biginteger.core.domain.errors import (
    BigIntegerError,
    CapacityError,
    DivideByZeroError,
    ErrorKind,
    ErrorOperandError,
    IntegerOverflowError,
    InvalidExponentError,
    ParseError,
    error_for_kind,
)

__all__ = [
    # BigInteger module
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "MAX_SHIFT_BITS",
    "SUPPORTED_BASES",
    "BigInteger",
    "BigIntegerResult",
    # Errors
    "ErrorKind",
    "BigIntegerError",
    "ParseError",
    "DivideByZeroError",
    "InvalidExponentError",
    "IntegerOverflowError",
    "CapacityError",
    "ErrorOperandError",
    "error_for_kind",
]

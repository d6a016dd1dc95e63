"""
BigInteger — immutable arbitrary-precision signed integer.

Public entry points are re-exported here; the arithmetic engine is chosen
with configure_backend() / use_backend().
"""

from biginteger.core.domain import (
    BigInteger,
    BigIntegerError,
    BigIntegerResult,
    CapacityError,
    DivideByZeroError,
    ErrorKind,
    ErrorOperandError,
    IntegerOverflowError,
    InvalidExponentError,
    ParseError,
)
from biginteger.core.math import BackendConfig, configure_backend, get_backend, use_backend

__version__ = "1.0.0"

__all__ = [
    "BigInteger",
    "BigIntegerResult",
    "ErrorKind",
    "BigIntegerError",
    "ParseError",
    "DivideByZeroError",
    "InvalidExponentError",
    "IntegerOverflowError",
    "CapacityError",
    "ErrorOperandError",
    "BackendConfig",
    "configure_backend",
    "get_backend",
    "use_backend",
]

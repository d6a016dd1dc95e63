"""
Core math modules для BigInteger

Каноническое представление, многоразрядные алгоритмы и арифметические
backend'ы. Модуль gmp_backend не импортируется здесь: gmpy2 опционален.
"""

# Backend selection
from biginteger.core.math.backend import (
    AVAILABLE_BACKENDS,
    DEFAULT_BACKEND,
    ArithmeticBackend,
    BackendConfig,
    configure_backend,
    get_backend,
    use_backend,
)

# Sign-magnitude codec
from biginteger.core.math.sign_magnitude import (
    ERROR_DATA,
    SIGN_BIT,
    ZERO_DATA,
    canonicalize,
    data_to_int,
    decode,
    encode,
    int_to_data,
    is_negative,
    strip_magnitude,
)

__all__ = [
    # Backend — Constants
    "AVAILABLE_BACKENDS",
    "DEFAULT_BACKEND",
    # Backend — Types
    "ArithmeticBackend",
    "BackendConfig",
    # Backend — Functions
    "configure_backend",
    "get_backend",
    "use_backend",
    # Sign-magnitude — Constants
    "ERROR_DATA",
    "SIGN_BIT",
    "ZERO_DATA",
    # Sign-magnitude — Functions
    "canonicalize",
    "data_to_int",
    "decode",
    "encode",
    "int_to_data",
    "is_negative",
    "strip_magnitude",
]

"""
GMP Backend — Арифметика на gmpy2.mpz

Опциональный backend: требует установленного gmpy2 (extra "gmp").
Обмен с каноническим представлением идёт через hex-строку модуля,
без промежуточного Python int.
"""

import gmpy2

from biginteger.core.math.sign_magnitude import decode, encode


def _to_mpz(data: bytes) -> gmpy2.mpz:
    negative, magnitude = decode(data)
    value = gmpy2.mpz(magnitude.hex(), 16) if magnitude else gmpy2.mpz(0)
    return -value if negative else value


def _from_mpz(value: gmpy2.mpz) -> bytes:
    digits = format(abs(value), "x")
    if len(digits) % 2:
        digits = "0" + digits
    return encode(value < 0, bytes.fromhex(digits))


class GmpBackend:
    """Backend на GMP (gmpy2)."""

    name = "gmp"

    def compare(self, a: bytes, b: bytes) -> int:
        x, y = _to_mpz(a), _to_mpz(b)
        return (x > y) - (x < y)

    def add(self, a: bytes, b: bytes) -> bytes:
        return _from_mpz(_to_mpz(a) + _to_mpz(b))

    def subtract(self, a: bytes, b: bytes) -> bytes:
        return _from_mpz(_to_mpz(a) - _to_mpz(b))

    def multiply(self, a: bytes, b: bytes) -> bytes:
        return _from_mpz(_to_mpz(a) * _to_mpz(b))

    def div_rem(self, a: bytes, b: bytes) -> tuple[bytes, bytes]:
        # t_divmod: частное с усечением к нулю
        quotient, remainder = gmpy2.t_divmod(_to_mpz(a), _to_mpz(b))
        return _from_mpz(quotient), _from_mpz(remainder)

    def power(self, a: bytes, exponent: int) -> bytes:
        return _from_mpz(_to_mpz(a) ** exponent)

    def invert(self, a: bytes) -> bytes:
        return _from_mpz(~_to_mpz(a))

    def bitwise_and(self, a: bytes, b: bytes) -> bytes:
        return _from_mpz(_to_mpz(a) & _to_mpz(b))

    def bitwise_or(self, a: bytes, b: bytes) -> bytes:
        return _from_mpz(_to_mpz(a) | _to_mpz(b))

    def bitwise_xor(self, a: bytes, b: bytes) -> bytes:
        return _from_mpz(_to_mpz(a) ^ _to_mpz(b))

    def shift_left(self, a: bytes, bits: int) -> bytes:
        # Точный сдвиг mpz
        return _from_mpz(_to_mpz(a) << bits)

    def shift_right(self, a: bytes, bits: int) -> bytes:
        # mpz >> округляет вниз, как арифметический сдвиг
        return _from_mpz(_to_mpz(a) >> bits)

    def parse_decimal(self, digits: str, negative: bool) -> bytes:
        value = gmpy2.mpz(digits, 10)
        return _from_mpz(-value if negative else value)

    def format_decimal(self, a: bytes) -> str:
        return str(_to_mpz(a))

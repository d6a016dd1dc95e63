"""
Naive Backend — Эталонная побайтовая арифметика

Знаковые операции над каноническими представлениями, построенные
поверх модульных алгоритмов byte_arithmetic. Знак обрабатывается явно:
- Сложение: одинаковые знаки -> сумма модулей, разные -> разность
  (знак берётся у операнда с большим модулем)
- Умножение/деление: знак = XOR знаков операндов
- Остаток: знак делимого (truncating division)
- Побитовые операции: дополнительный код с бесконечным расширением знака
"""

import operator

from biginteger.core.math import byte_arithmetic as ba
from biginteger.core.math.sign_magnitude import ZERO_DATA, decode, encode


class NaiveBackend:
    """Backend на многоразрядной арифметике по байтам."""

    name = "naive"

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, a: bytes, b: bytes) -> int:
        a_negative, a_magnitude = decode(a)
        b_negative, b_magnitude = decode(b)

        if a_negative != b_negative:
            return -1 if a_negative else 1

        result = ba.compare_magnitude(a_magnitude, b_magnitude)
        # Для отрицательных больший модуль означает меньшее значение
        return -result if a_negative else result

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _add_signed(self, a: ba.SignedMagnitude, b: ba.SignedMagnitude) -> bytes:
        a_negative, a_magnitude = a
        b_negative, b_magnitude = b

        if a_negative == b_negative:
            return encode(a_negative, ba.add_magnitude(a_magnitude, b_magnitude))

        order = ba.compare_magnitude(a_magnitude, b_magnitude)
        if order == 0:
            return ZERO_DATA
        if order > 0:
            return encode(a_negative, ba.subtract_magnitude(a_magnitude, b_magnitude))
        return encode(b_negative, ba.subtract_magnitude(b_magnitude, a_magnitude))

    def add(self, a: bytes, b: bytes) -> bytes:
        return self._add_signed(decode(a), decode(b))

    def subtract(self, a: bytes, b: bytes) -> bytes:
        b_negative, b_magnitude = decode(b)
        return self._add_signed(decode(a), (not b_negative, b_magnitude))

    def multiply(self, a: bytes, b: bytes) -> bytes:
        a_negative, a_magnitude = decode(a)
        b_negative, b_magnitude = decode(b)
        return encode(a_negative != b_negative, ba.multiply_magnitude(a_magnitude, b_magnitude))

    def div_rem(self, a: bytes, b: bytes) -> tuple[bytes, bytes]:
        a_negative, a_magnitude = decode(a)
        b_negative, b_magnitude = decode(b)

        quotient, remainder = ba.divmod_magnitude(a_magnitude, b_magnitude)
        return (
            encode(a_negative != b_negative, quotient),
            encode(a_negative, remainder),
        )

    def power(self, a: bytes, exponent: int) -> bytes:
        negative, magnitude = decode(a)
        return encode(negative and exponent % 2 == 1, ba.power_magnitude(magnitude, exponent))

    # -------------------------------------------------------------------------
    # Bitwise
    # -------------------------------------------------------------------------

    def invert(self, a: bytes) -> bytes:
        return encode(*ba.twos_complement_invert(decode(a)))

    def bitwise_and(self, a: bytes, b: bytes) -> bytes:
        return encode(*ba.twos_complement_bitwise(operator.and_, decode(a), decode(b)))

    def bitwise_or(self, a: bytes, b: bytes) -> bytes:
        return encode(*ba.twos_complement_bitwise(operator.or_, decode(a), decode(b)))

    def bitwise_xor(self, a: bytes, b: bytes) -> bytes:
        return encode(*ba.twos_complement_bitwise(operator.xor, decode(a), decode(b)))

    def shift_left(self, a: bytes, bits: int) -> bytes:
        negative, magnitude = decode(a)
        return encode(negative, ba.shift_left_magnitude(magnitude, bits))

    def shift_right(self, a: bytes, bits: int) -> bytes:
        """Арифметический сдвиг: округление вниз (-1 >> n == -1)."""
        negative, magnitude = decode(a)
        shifted, lost = ba.shift_right_magnitude(magnitude, bits)
        if negative and lost:
            shifted = ba.add_magnitude(shifted, b"\x01")
        return encode(negative, shifted)

    # -------------------------------------------------------------------------
    # Decimal
    # -------------------------------------------------------------------------

    def parse_decimal(self, digits: str, negative: bool) -> bytes:
        return encode(negative, ba.parse_decimal_magnitude(digits))

    def format_decimal(self, a: bytes) -> str:
        negative, magnitude = decode(a)
        digits = ba.format_decimal_magnitude(magnitude)
        return f"-{digits}" if negative else digits

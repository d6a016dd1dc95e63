"""
Native Backend — Арифметика на встроенном Python int

Python int уже реализует произвольную точность; backend лишь переводит
канонические представления в int и обратно. Отличие от семантики int:
деление и остаток с усечением к нулю (а не floor).

Десятичная конверсия идёт блоками по DECIMAL_CHUNK_DIGITS цифр: так
int(str) и str(int) не упираются в лимит длины целочисленных строк
(sys.get_int_max_str_digits).
"""

from typing import Final

from biginteger.core.math.sign_magnitude import data_to_int, int_to_data

# Цифр в одном блоке десятичной конверсии (меньше лимита в 4300)
DECIMAL_CHUNK_DIGITS: Final[int] = 1000


def truncating_div_rem(a: int, b: int) -> tuple[int, int]:
    """
    Деление с усечением к нулю.

    Examples:
        >>> truncating_div_rem(7, -2)
        (-3, 1)
        >>> truncating_div_rem(-7, 2)
        (-3, -1)
    """
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def parse_decimal_chunked(digits: str) -> int:
    """Строка десятичных цифр -> int, блоками по DECIMAL_CHUNK_DIGITS."""
    value = 0
    for start in range(0, len(digits), DECIMAL_CHUNK_DIGITS):
        chunk = digits[start : start + DECIMAL_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk, 10)
    return value


def format_decimal_chunked(value: int) -> str:
    """
    Неотрицательный int -> десятичная строка.

    Младшие блоки дополняются ведущими нулями до DECIMAL_CHUNK_DIGITS.
    """
    chunk_base = 10**DECIMAL_CHUNK_DIGITS
    chunks = []
    while True:
        value, low = divmod(value, chunk_base)
        chunks.append(low)
        if not value:
            break

    head = str(chunks[-1])
    return head + "".join(str(chunk).zfill(DECIMAL_CHUNK_DIGITS) for chunk in reversed(chunks[:-1]))


class NativeBackend:
    """Backend на Python int."""

    name = "native"

    def compare(self, a: bytes, b: bytes) -> int:
        x, y = data_to_int(a), data_to_int(b)
        return (x > y) - (x < y)

    def add(self, a: bytes, b: bytes) -> bytes:
        return int_to_data(data_to_int(a) + data_to_int(b))

    def subtract(self, a: bytes, b: bytes) -> bytes:
        return int_to_data(data_to_int(a) - data_to_int(b))

    def multiply(self, a: bytes, b: bytes) -> bytes:
        return int_to_data(data_to_int(a) * data_to_int(b))

    def div_rem(self, a: bytes, b: bytes) -> tuple[bytes, bytes]:
        quotient, remainder = truncating_div_rem(data_to_int(a), data_to_int(b))
        return int_to_data(quotient), int_to_data(remainder)

    def power(self, a: bytes, exponent: int) -> bytes:
        return int_to_data(data_to_int(a) ** exponent)

    def invert(self, a: bytes) -> bytes:
        return int_to_data(~data_to_int(a))

    def bitwise_and(self, a: bytes, b: bytes) -> bytes:
        return int_to_data(data_to_int(a) & data_to_int(b))

    def bitwise_or(self, a: bytes, b: bytes) -> bytes:
        return int_to_data(data_to_int(a) | data_to_int(b))

    def bitwise_xor(self, a: bytes, b: bytes) -> bytes:
        return int_to_data(data_to_int(a) ^ data_to_int(b))

    def shift_left(self, a: bytes, bits: int) -> bytes:
        return int_to_data(data_to_int(a) << bits)

    def shift_right(self, a: bytes, bits: int) -> bytes:
        return int_to_data(data_to_int(a) >> bits)

    def parse_decimal(self, digits: str, negative: bool) -> bytes:
        value = parse_decimal_chunked(digits)
        return int_to_data(-value if negative else value)

    def format_decimal(self, a: bytes) -> str:
        value = data_to_int(a)
        digits = format_decimal_chunked(abs(value))
        return f"-{digits}" if value < 0 else digits

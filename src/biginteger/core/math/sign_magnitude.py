"""
Sign-Magnitude — Каноническое байтовое представление BigInteger

Внутренний формат (big-endian, старший байт первым):
- Модуль (magnitude) хранится в минимальном числе байт
- Бит 7 первого байта — знак (1 = отрицательное)
- Если старший бит модуля уже занят, добавляется ведущий байт
  0x00 (положительное) или 0x80 (отрицательное)

Примеры:
    0    -> 00
    1    -> 01
    -1   -> 81
    128  -> 00 80
    -255 -> 80 FF
    256  -> 01 00

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каноническая форма минимальна (без лишних ведущих байт)
2. Ноль — ровно один байт 0x00 ("отрицательный ноль" нормализуется)
3. Пустая последовательность зарезервирована под Error sentinel
"""

from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

# Каноническое представление нуля
ZERO_DATA: Final[bytes] = b"\x00"

# Представление Error sentinel (пустая последовательность)
ERROR_DATA: Final[bytes] = b""

# Бит знака в первом байте
SIGN_BIT: Final[int] = 0x80


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def strip_magnitude(magnitude: bytes) -> bytes:
    """Удаление ведущих нулевых байт модуля (ноль -> b"")."""
    return bytes(magnitude).lstrip(b"\x00")


def encode(negative: bool, magnitude: bytes) -> bytes:
    """
    Сборка канонического представления из знака и модуля.

    Args:
        negative: Знак значения
        magnitude: Модуль (big-endian, ведущие нули допустимы)

    Returns:
        Каноническое представление (ноль всегда положительный)
    """
    magnitude = strip_magnitude(magnitude)
    if not magnitude:
        return ZERO_DATA

    if magnitude[0] & SIGN_BIT:
        prefix = SIGN_BIT if negative else 0x00
        return bytes((prefix,)) + magnitude

    if negative:
        return bytes((magnitude[0] | SIGN_BIT,)) + magnitude[1:]
    return magnitude


def decode(data: bytes) -> tuple[bool, bytes]:
    """
    Разбор представления на знак и модуль.

    Args:
        data: Внутреннее представление (не пустое)

    Returns:
        (negative, magnitude), где magnitude без ведущих нулей
        (b"" для нуля, знак нуля всегда False)

    Raises:
        ValueError: Если data пустая (Error sentinel не имеет значения)
    """
    if not data:
        raise ValueError("Error sentinel has no sign-magnitude value")

    negative = bool(data[0] & SIGN_BIT)
    magnitude = strip_magnitude(bytes((data[0] & (SIGN_BIT - 1),)) + data[1:])
    if not magnitude:
        return False, b""
    return negative, magnitude


def canonicalize(data: bytes) -> bytes:
    """
    Нормализация произвольного представления к канонической форме.

    Пустая последовательность (Error) остаётся пустой.
    """
    if not data:
        return ERROR_DATA
    return encode(*decode(bytes(data)))


def is_negative(data: bytes) -> bool:
    return bool(data) and bool(data[0] & SIGN_BIT)


# =============================================================================
# NATIVE INT BRIDGE
# =============================================================================


def data_to_int(data: bytes) -> int:
    """Конверсия канонического представления в Python int."""
    negative, magnitude = decode(data)
    value = int.from_bytes(magnitude, byteorder="big", signed=False)
    return -value if negative else value


def int_to_data(value: int) -> bytes:
    """Конверсия Python int в каноническое представление."""
    magnitude = abs(value)
    raw = magnitude.to_bytes((magnitude.bit_length() + 7) // 8, byteorder="big")
    return encode(value < 0, raw)

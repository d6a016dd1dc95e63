"""
Byte Arithmetic — Многоразрядная арифметика над модулями

Модуль реализует эталонные (bit-exact) алгоритмы над модулями чисел,
представленными как последовательность байт (limbs по 8 бит):
- Сложение/вычитание с переносом и заёмом
- Умножение "в столбик" (schoolbook)
- Деление "уголком" с подбором цифры двоичным поиском
- Сдвиги на произвольное число бит
- Побитовые операции в дополнительном коде (two's complement)
- Конверсия в/из десятичной строки

Соглашения:
- Модуль (magnitude) — bytes, big-endian, ноль = b""
- Внутри функций разряды обрабатываются в little-endian (list[int])
- Все функции чистые: входные данные никогда не изменяются

Производительность не является целью: алгоритмы квадратичные.
"""

from typing import Callable, Final

from biginteger.core.math.sign_magnitude import strip_magnitude

# =============================================================================
# CONSTANTS
# =============================================================================

# Основание одного разряда (limb)
LIMB_BASE: Final[int] = 256

# Маска одного разряда
LIMB_MASK: Final[int] = 0xFF

# Бит знака старшего разряда в дополнительном коде
LIMB_SIGN_BIT: Final[int] = 0x80

# Знаковое значение: (negative, magnitude)
SignedMagnitude = tuple[bool, bytes]


# =============================================================================
# LIMB HELPERS
# =============================================================================


def _to_limbs(magnitude: bytes) -> list[int]:
    # big-endian bytes -> little-endian limbs
    return list(reversed(magnitude))


def _from_limbs(limbs: list[int]) -> bytes:
    # little-endian limbs -> минимальный big-endian модуль
    return strip_magnitude(bytes(reversed(limbs)))


# =============================================================================
# COMPARISON
# =============================================================================


def compare_magnitude(a: bytes, b: bytes) -> int:
    """
    Сравнение модулей.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    a = strip_magnitude(a)
    b = strip_magnitude(b)

    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    # При равной длине лексикографический порядок big-endian == числовой
    if a == b:
        return 0
    return -1 if a < b else 1


# =============================================================================
# ADDITION / SUBTRACTION
# =============================================================================


def add_magnitude(a: bytes, b: bytes) -> bytes:
    """Сумма модулей с распространением переноса."""
    x = _to_limbs(a)
    y = _to_limbs(b)
    if len(x) < len(y):
        x, y = y, x

    result = []
    carry = 0
    for i, limb in enumerate(x):
        total = limb + (y[i] if i < len(y) else 0) + carry
        result.append(total & LIMB_MASK)
        carry = total >> 8

    if carry:
        result.append(carry)

    return _from_limbs(result)


def subtract_magnitude(a: bytes, b: bytes) -> bytes:
    """
    Разность модулей a - b с распространением заёма.

    Raises:
        ValueError: Если a < b (модуль не может быть отрицательным)
    """
    if compare_magnitude(a, b) < 0:
        raise ValueError("Magnitude subtraction underflow: a < b")

    x = _to_limbs(a)
    y = _to_limbs(b)

    result = []
    borrow = 0
    for i, limb in enumerate(x):
        diff = limb - (y[i] if i < len(y) else 0) - borrow
        if diff < 0:
            diff += LIMB_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return _from_limbs(result)


# =============================================================================
# MULTIPLICATION
# =============================================================================


def multiply_add_small(magnitude: bytes, factor: int, addend: int = 0) -> bytes:
    """
    magnitude * factor + addend для одноразрядных factor/addend.

    Используется при разборе десятичной строки и подборе цифры частного.
    """
    if not 0 <= factor <= LIMB_BASE or not 0 <= addend < LIMB_BASE:
        raise ValueError(f"factor/addend out of limb range: {factor}, {addend}")

    result = []
    carry = addend
    for limb in _to_limbs(magnitude):
        total = limb * factor + carry
        result.append(total & LIMB_MASK)
        carry = total >> 8

    while carry:
        result.append(carry & LIMB_MASK)
        carry >>= 8

    return _from_limbs(result)


def multiply_magnitude(a: bytes, b: bytes) -> bytes:
    """Произведение модулей (schoolbook, O(n*m))."""
    x = _to_limbs(strip_magnitude(a))
    y = _to_limbs(strip_magnitude(b))
    if not x or not y:
        return b""

    result = [0] * (len(x) + len(y))
    for i, x_limb in enumerate(x):
        carry = 0
        for j, y_limb in enumerate(y):
            total = result[i + j] + x_limb * y_limb + carry
            result[i + j] = total & LIMB_MASK
            carry = total >> 8

        k = i + len(y)
        while carry:
            total = result[k] + carry
            result[k] = total & LIMB_MASK
            carry = total >> 8
            k += 1

    return _from_limbs(result)


def power_magnitude(base: bytes, exponent: int) -> bytes:
    """
    Возведение модуля в неотрицательную степень (square-and-multiply).

    power_magnitude(x, 0) == 1 для любого x, включая ноль.
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    result = b"\x01"
    square = strip_magnitude(base)
    while exponent:
        if exponent & 1:
            result = multiply_magnitude(result, square)
        exponent >>= 1
        if exponent:
            square = multiply_magnitude(square, square)

    return result


# =============================================================================
# DIVISION
# =============================================================================


def divmod_small(magnitude: bytes, divisor: int) -> tuple[bytes, int]:
    """
    Деление модуля на одноразрядный делитель.

    Returns:
        (quotient, remainder), remainder — int в [0, divisor)
    """
    if not 0 < divisor < LIMB_BASE:
        raise ValueError(f"divisor must be in [1, 255], got {divisor}")

    quotient = bytearray()
    remainder = 0
    for byte in strip_magnitude(magnitude):
        current = (remainder << 8) | byte
        quotient.append(current // divisor)
        remainder = current % divisor

    return strip_magnitude(bytes(quotient)), remainder


def divmod_magnitude(a: bytes, b: bytes) -> tuple[bytes, bytes]:
    """
    Деление модулей "уголком" (long division).

    Цифра частного (0..255) на каждом шаге подбирается двоичным поиском
    как наибольшее d, для которого b * d <= текущий остаток.

    Args:
        a: Делимое
        b: Делитель (не ноль)

    Returns:
        (quotient, remainder): a == quotient * b + remainder, remainder < b

    Raises:
        ZeroDivisionError: Если b == 0
    """
    a = strip_magnitude(a)
    b = strip_magnitude(b)
    if not b:
        raise ZeroDivisionError("magnitude division by zero")

    if compare_magnitude(a, b) < 0:
        return b"", a

    if len(b) == 1:
        quotient, small_remainder = divmod_small(a, b[0])
        return quotient, strip_magnitude(bytes((small_remainder,)))

    quotient = bytearray()
    remainder = b""
    for byte in a:
        # Инвариант: remainder < b, поэтому цифра частного <= 255
        remainder = strip_magnitude(remainder + bytes((byte,)))

        low, high = 0, LIMB_MASK
        while low < high:
            mid = (low + high + 1) // 2
            if compare_magnitude(multiply_add_small(b, mid), remainder) <= 0:
                low = mid
            else:
                high = mid - 1

        if low:
            remainder = subtract_magnitude(remainder, multiply_add_small(b, low))
        quotient.append(low)

    return strip_magnitude(bytes(quotient)), remainder


# =============================================================================
# SHIFTS
# =============================================================================


def shift_left_magnitude(magnitude: bytes, bits: int) -> bytes:
    """Сдвиг модуля влево на bits >= 0 бит."""
    if bits < 0:
        raise ValueError(f"shift must be non-negative, got {bits}")

    limbs = _to_limbs(strip_magnitude(magnitude))
    if not limbs:
        return b""

    byte_shift, bit_shift = divmod(bits, 8)
    result = [0] * byte_shift
    carry = 0
    for limb in limbs:
        total = (limb << bit_shift) | carry
        result.append(total & LIMB_MASK)
        carry = total >> 8

    if carry:
        result.append(carry)

    return _from_limbs(result)


def shift_right_magnitude(magnitude: bytes, bits: int) -> tuple[bytes, bool]:
    """
    Сдвиг модуля вправо на bits >= 0 бит.

    Returns:
        (shifted, lost): lost == True, если были отброшены ненулевые биты
        (нужно для округления вниз отрицательных значений)
    """
    if bits < 0:
        raise ValueError(f"shift must be non-negative, got {bits}")

    limbs = _to_limbs(strip_magnitude(magnitude))
    byte_shift, bit_shift = divmod(bits, 8)

    lost = any(limbs[:byte_shift])
    limbs = limbs[byte_shift:]
    if not limbs:
        return b"", lost

    if bit_shift:
        lost = lost or bool(limbs[0] & ((1 << bit_shift) - 1))
        shifted = []
        for i, limb in enumerate(limbs):
            upper = limbs[i + 1] if i + 1 < len(limbs) else 0
            shifted.append(((limb >> bit_shift) | (upper << (8 - bit_shift))) & LIMB_MASK)
        limbs = shifted

    return _from_limbs(limbs), lost


# =============================================================================
# TWO'S COMPLEMENT (BITWISE)
# =============================================================================


def _to_twos_complement(value: SignedMagnitude, width: int) -> list[int]:
    # width разрядов little-endian; отрицательные: ~magnitude + 1
    negative, magnitude = value
    limbs = _to_limbs(strip_magnitude(magnitude))
    limbs += [0] * (width - len(limbs))
    if not negative:
        return limbs

    result = []
    carry = 1
    for limb in limbs:
        total = (~limb & LIMB_MASK) + carry
        result.append(total & LIMB_MASK)
        carry = total >> 8
    return result


def _from_twos_complement(limbs: list[int]) -> SignedMagnitude:
    negative = bool(limbs and limbs[-1] & LIMB_SIGN_BIT)
    if not negative:
        return False, _from_limbs(limbs)

    magnitude = []
    carry = 1
    for limb in limbs:
        total = (~limb & LIMB_MASK) + carry
        magnitude.append(total & LIMB_MASK)
        carry = total >> 8
    return True, _from_limbs(magnitude)


def twos_complement_bitwise(
    op: Callable[[int, int], int],
    left: SignedMagnitude,
    right: SignedMagnitude,
) -> SignedMagnitude:
    """
    Побитовая операция в дополнительном коде с бесконечным знаковым
    расширением (семантика Python int).

    Ширина берётся на один разряд больше длины наибольшего модуля,
    чтобы старший разряд всегда содержал знак.

    Args:
        op: Операция над разрядами (например, operator.and_)
        left: (negative, magnitude) левого операнда
        right: (negative, magnitude) правого операнда

    Returns:
        (negative, magnitude) результата
    """
    width = max(len(strip_magnitude(left[1])), len(strip_magnitude(right[1]))) + 1
    x = _to_twos_complement(left, width)
    y = _to_twos_complement(right, width)
    return _from_twos_complement([op(a, b) & LIMB_MASK for a, b in zip(x, y)])


def twos_complement_invert(value: SignedMagnitude) -> SignedMagnitude:
    """Побитовое отрицание ~x (== -x - 1)."""
    width = len(strip_magnitude(value[1])) + 1
    limbs = _to_twos_complement(value, width)
    return _from_twos_complement([~limb & LIMB_MASK for limb in limbs])


# =============================================================================
# DECIMAL CONVERSION
# =============================================================================


def parse_decimal_magnitude(digits: str) -> bytes:
    """
    Разбор строки десятичных цифр (старшая первой) в модуль.

    Raises:
        ValueError: Если строка пустая или содержит не-цифры
    """
    if not digits:
        raise ValueError("empty decimal digit string")

    magnitude = b""
    for char in digits:
        if not "0" <= char <= "9":
            raise ValueError(f"invalid decimal digit: {char!r}")
        magnitude = multiply_add_small(magnitude, 10, ord(char) - ord("0"))

    return magnitude


def format_decimal_magnitude(magnitude: bytes) -> str:
    """Рендеринг модуля в десятичную строку повторным делением на 10."""
    magnitude = strip_magnitude(magnitude)
    if not magnitude:
        return "0"

    digits = []
    while magnitude:
        magnitude, digit = divmod_small(magnitude, 10)
        digits.append(chr(ord("0") + digit))

    return "".join(reversed(digits))

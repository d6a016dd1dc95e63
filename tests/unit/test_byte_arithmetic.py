"""
Тесты для Byte Arithmetic — многоразрядных алгоритмов над модулями

Проверяет:
1. Перенос и заём между разрядами
2. Умножение и деление "в столбик"
3. Сдвиги и флаг потерянных бит
4. Побитовые операции в дополнительном коде
5. Десятичную конверсию
"""

import operator

import pytest

from biginteger.core.math.byte_arithmetic import (
    add_magnitude,
    compare_magnitude,
    divmod_magnitude,
    divmod_small,
    format_decimal_magnitude,
    multiply_add_small,
    multiply_magnitude,
    parse_decimal_magnitude,
    power_magnitude,
    shift_left_magnitude,
    shift_right_magnitude,
    subtract_magnitude,
    twos_complement_bitwise,
    twos_complement_invert,
)


def mag(value: int) -> bytes:
    """Модуль Python int как минимальный big-endian bytes."""
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


MAGNITUDES = [0, 1, 2, 255, 256, 65535, 65536, 2**63 - 1, 2**64 + 17, 10**30 + 7]


# =============================================================================
# COMPARISON / ADDITION / SUBTRACTION
# =============================================================================


class TestCompareMagnitude:
    """Тесты для compare_magnitude"""

    def test_length_dominates(self) -> None:
        assert compare_magnitude(b"\x01\x00", b"\xff") == 1
        assert compare_magnitude(b"\xff", b"\x01\x00") == -1

    def test_equal_with_leading_zeros(self) -> None:
        assert compare_magnitude(b"\x00\x05", b"\x05") == 0

    def test_zero(self) -> None:
        assert compare_magnitude(b"", b"\x00") == 0
        assert compare_magnitude(b"", b"\x01") == -1


class TestAddSubtract:
    """Тесты для add_magnitude / subtract_magnitude"""

    def test_carry_propagates(self) -> None:
        assert add_magnitude(b"\xff", b"\x01") == b"\x01\x00"
        assert add_magnitude(b"\xff\xff\xff", b"\x01") == b"\x01\x00\x00\x00"

    def test_borrow_propagates(self) -> None:
        assert subtract_magnitude(b"\x01\x00\x00", b"\x01") == b"\xff\xff"

    def test_subtract_to_zero(self) -> None:
        assert subtract_magnitude(b"\x12\x34", b"\x12\x34") == b""

    def test_subtract_underflow_raises(self) -> None:
        with pytest.raises(ValueError, match="underflow"):
            subtract_magnitude(b"\x01", b"\x02")

    def test_against_int(self) -> None:
        for a in MAGNITUDES:
            for b in MAGNITUDES:
                assert add_magnitude(mag(a), mag(b)) == mag(a + b)
                if a >= b:
                    assert subtract_magnitude(mag(a), mag(b)) == mag(a - b)


# =============================================================================
# MULTIPLICATION / POWER
# =============================================================================


class TestMultiply:
    """Тесты для multiply_magnitude / multiply_add_small / power_magnitude"""

    def test_by_zero(self) -> None:
        assert multiply_magnitude(b"\x12\x34", b"") == b""

    def test_against_int(self) -> None:
        for a in MAGNITUDES:
            for b in MAGNITUDES:
                assert multiply_magnitude(mag(a), mag(b)) == mag(a * b)

    def test_multiply_add_small(self) -> None:
        assert multiply_add_small(b"\x19", 10, 5) == mag(255)
        assert multiply_add_small(b"", 10, 7) == b"\x07"

    def test_multiply_add_small_range(self) -> None:
        with pytest.raises(ValueError, match="out of limb range"):
            multiply_add_small(b"\x01", 300)

    def test_power(self) -> None:
        assert power_magnitude(mag(3), 5) == mag(243)
        assert power_magnitude(mag(2), 100) == mag(2**100)

    def test_power_zero_exponent(self) -> None:
        """x ** 0 == 1, включая 0 ** 0"""
        assert power_magnitude(b"", 0) == b"\x01"
        assert power_magnitude(mag(12345), 0) == b"\x01"


# =============================================================================
# DIVISION
# =============================================================================


class TestDivision:
    """Тесты для divmod_small / divmod_magnitude"""

    def test_divmod_small(self) -> None:
        assert divmod_small(mag(1000), 10) == (mag(100), 0)
        assert divmod_small(mag(1001), 7) == (mag(143), 0)
        assert divmod_small(mag(1002), 7) == (mag(143), 1)

    def test_divmod_small_invalid_divisor(self) -> None:
        with pytest.raises(ValueError):
            divmod_small(b"\x01", 0)

    def test_division_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            divmod_magnitude(b"\x01", b"")

    def test_dividend_smaller(self) -> None:
        assert divmod_magnitude(mag(5), mag(300)) == (b"", mag(5))

    def test_against_int(self) -> None:
        for a in MAGNITUDES:
            for b in MAGNITUDES:
                if b == 0:
                    continue
                quotient, remainder = divmod_magnitude(mag(a), mag(b))
                assert quotient == mag(a // b)
                assert remainder == mag(a % b)


# =============================================================================
# SHIFTS
# =============================================================================


class TestShifts:
    """Тесты для shift_left_magnitude / shift_right_magnitude"""

    def test_shift_left(self) -> None:
        assert shift_left_magnitude(b"\x01", 8) == b"\x01\x00"
        assert shift_left_magnitude(b"\x81", 1) == b"\x01\x02"
        assert shift_left_magnitude(b"", 100) == b""

    def test_shift_right_lost_bits(self) -> None:
        """lost == True, если отброшены ненулевые биты"""
        assert shift_right_magnitude(b"\x05", 1) == (b"\x02", True)
        assert shift_right_magnitude(b"\x04", 2) == (b"\x01", False)
        assert shift_right_magnitude(b"\x01\x00", 8) == (b"\x01", False)
        assert shift_right_magnitude(b"\x01\x01", 8) == (b"\x01", True)

    def test_shift_right_past_end(self) -> None:
        assert shift_right_magnitude(b"\x05", 64) == (b"", True)
        assert shift_right_magnitude(b"", 3) == (b"", False)

    def test_negative_shift_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            shift_left_magnitude(b"\x01", -1)

    def test_against_int(self) -> None:
        for a in MAGNITUDES:
            for bits in (0, 1, 7, 8, 9, 63, 64, 100):
                assert shift_left_magnitude(mag(a), bits) == mag(a << bits)
                assert shift_right_magnitude(mag(a), bits)[0] == mag(a >> bits)


# =============================================================================
# TWO'S COMPLEMENT
# =============================================================================


class TestTwosComplement:
    """Тесты для twos_complement_bitwise / twos_complement_invert"""

    def test_invert(self) -> None:
        assert twos_complement_invert((False, mag(5))) == (True, mag(6))
        assert twos_complement_invert((True, mag(1))) == (False, b"")
        assert twos_complement_invert((False, b"")) == (True, b"\x01")

    @pytest.mark.parametrize("op", [operator.and_, operator.or_, operator.xor])
    def test_against_int(self, op) -> None:
        values = [0, 1, -1, 255, -256, 2**64 + 5, -(2**70) + 3]
        for a in values:
            for b in values:
                negative, magnitude = twos_complement_bitwise(
                    op, (a < 0, mag(abs(a))), (b < 0, mag(abs(b)))
                )
                expected = op(a, b)
                assert negative == (expected < 0)
                assert magnitude == mag(abs(expected))


# =============================================================================
# DECIMAL
# =============================================================================


class TestDecimal:
    """Тесты для parse_decimal_magnitude / format_decimal_magnitude"""

    def test_parse(self) -> None:
        assert parse_decimal_magnitude("0") == b""
        assert parse_decimal_magnitude("00012") == b"\x0c"
        assert parse_decimal_magnitude("255") == b"\xff"
        assert parse_decimal_magnitude(str(10**30 + 7)) == mag(10**30 + 7)

    def test_parse_invalid(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            parse_decimal_magnitude("")
        with pytest.raises(ValueError, match="invalid decimal digit"):
            parse_decimal_magnitude("12a")

    def test_format(self) -> None:
        assert format_decimal_magnitude(b"") == "0"
        assert format_decimal_magnitude(b"\x00\xff") == "255"
        assert format_decimal_magnitude(mag(2**64 + 17)) == str(2**64 + 17)

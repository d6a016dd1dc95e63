"""
Errors — Таксономия ошибок BigInteger

Каждая ошибка имеет вид (ErrorKind), общий для трёх каналов:
1. Tagged result (BigIntegerResult.error) — на границах try_* операций
2. Error sentinel (BigInteger.Error) — на границах, требующих значение
   (конструкторы, Python-операторы)
3. Exception (подкласс BigIntegerError) — конверсии в native типы
   и BigIntegerResult.unwrap()

Исключения наследуют соответствующие встроенные типы, чтобы код,
ожидающий ZeroDivisionError/OverflowError/ValueError, продолжал работать.
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид ошибки операции над BigInteger"""

    PARSE = "parse_error"
    DIVIDE_BY_ZERO = "divide_by_zero"
    INVALID_EXPONENT = "invalid_exponent"
    OVERFLOW = "overflow"
    CAPACITY = "capacity"
    ERROR_OPERAND = "error_operand"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigIntegerError(Exception):
    """Базовое исключение BigInteger."""

    kind: ErrorKind = ErrorKind.ERROR_OPERAND


class ParseError(BigIntegerError, ValueError):
    """Некорректная строка/основание или не-конечный float."""

    kind = ErrorKind.PARSE


class DivideByZeroError(BigIntegerError, ZeroDivisionError):
    """Деление или остаток по нулевому делителю."""

    kind = ErrorKind.DIVIDE_BY_ZERO


class InvalidExponentError(BigIntegerError, ValueError):
    """Отрицательный показатель степени."""

    kind = ErrorKind.INVALID_EXPONENT


class IntegerOverflowError(BigIntegerError, OverflowError):
    """Значение не помещается в целевой native тип."""

    kind = ErrorKind.OVERFLOW


class CapacityError(BigIntegerError):
    """Буфер назначения меньше представления."""

    kind = ErrorKind.CAPACITY


class ErrorOperandError(BigIntegerError, ValueError):
    """Операция над Error sentinel, не имеющая значения-результата."""

    kind = ErrorKind.ERROR_OPERAND


_EXCEPTIONS: dict[ErrorKind, type[BigIntegerError]] = {
    ErrorKind.PARSE: ParseError,
    ErrorKind.DIVIDE_BY_ZERO: DivideByZeroError,
    ErrorKind.INVALID_EXPONENT: InvalidExponentError,
    ErrorKind.OVERFLOW: IntegerOverflowError,
    ErrorKind.CAPACITY: CapacityError,
    ErrorKind.ERROR_OPERAND: ErrorOperandError,
}


def error_for_kind(kind: ErrorKind, message: str = "") -> BigIntegerError:
    """
    Создание исключения, соответствующего виду ошибки.

    Args:
        kind: Вид ошибки
        message: Текст сообщения (по умолчанию — значение kind)

    Returns:
        Экземпляр подкласса BigIntegerError (не выброшенный)
    """
    return _EXCEPTIONS[kind](message or kind.value)

"""
BigInteger — Неизменяемое целое произвольной точности

Immutable Pydantic модель (frozen=True). Единственное поле data хранит
каноническое sign-magnitude представление (big-endian, см. sign_magnitude).
Вся арифметика делегируется активному backend'у (см. backend).

Каналы ошибок:
- try_* методы возвращают BigIntegerResult (tagged result)
- Конструкторы и Python-операторы возвращают BigInteger.Error
- Конверсии в native типы выбрасывают подклассы BigIntegerError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. data всегда в канонической (минимальной) форме; ноль = один байт 0x00
2. Экземпляр никогда не изменяется: каждый оператор создаёт новый
3. Равенство == равенство канонических представлений
4. Операция с Error операндом даёт Error
5. Деление с усечением к нулю: x == (x / y) * y + x % y, знак x % y == знак x
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Final, Optional

from pydantic import BaseModel, Field, field_validator

from biginteger.core.contracts.validators import validate_big_integer
from biginteger.core.domain import formatting
from biginteger.core.domain.errors import (
    BigIntegerError,
    ErrorKind,
    ErrorOperandError,
    IntegerOverflowError,
    ParseError,
    error_for_kind,
)
from biginteger.core.math.backend import ArithmeticBackend, get_backend
from biginteger.core.math.sign_magnitude import (
    ERROR_DATA,
    ZERO_DATA,
    canonicalize,
    data_to_int,
    decode,
    encode,
    int_to_data,
    is_negative,
)

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Поддерживаемые основания строкового представления
SUPPORTED_BASES: Final[tuple[int, ...]] = (2, 10, 16)

# Границы native типов
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Сдвиг и показатель степени принимаются в пределах int32
MAX_SHIFT_BITS: Final[int] = INT32_MAX


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class BigIntegerResult:
    """Результат fallible операции: значение либо вид ошибки."""

    value: Optional["BigInteger"] = None
    error: ErrorKind | None = None
    message: str = ""

    @classmethod
    def success(cls, value: "BigInteger") -> "BigIntegerResult":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str = "") -> "BigIntegerResult":
        return cls(error=kind, message=message or kind.value)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> "BigInteger":
        """
        Значение результата.

        Raises:
            BigIntegerError: Подкласс, соответствующий виду ошибки
        """
        if self.error is not None:
            raise error_for_kind(self.error, self.message)
        return self.value

    def value_or_error(self) -> "BigInteger":
        """Значение результата или BigInteger.Error (sentinel)."""
        if self.error is not None:
            logger.debug("BigInteger.Error produced: kind=%s, %s", self.error.value, self.message)
            return BigInteger.Error
        return self.value


# =============================================================================
# BIG INTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Целое со знаком произвольной точности.

    Создание:
        BigInteger.from_string("-0xFF", 16), BigInteger.from_int(42),
        BigInteger.from_float(3.9), BigInteger.from_bytes(b"\\xff\\x00")

    Операторы +, -, *, /, %, **, ~, &, |, ^, <<, >> принимают BigInteger
    или Python int. "/" и "%" — деление с усечением к нулю (в отличие
    от int, "//" не определён).

    Immutable модель (frozen=True). Составные операторы (+=, -=, <<=, >>=)
    не изменяют объект: Python вычисляет x + y и заново связывает имя,
    остальные ссылки на прежнее значение не затрагиваются.

    Сдвиг на отрицательное число бит — сдвиг в обратную сторону:
    x << -n == x >> n. Сдвиг ">>" арифметический (округление вниз).
    """

    data: bytes = Field(
        ..., description="Sign-magnitude, big-endian, каноническая форма (b'' = Error)"
    )

    model_config = {"frozen": True}  # Immutable

    Zero: ClassVar["BigInteger"]
    One: ClassVar["BigInteger"]
    MinusOne: ClassVar["BigInteger"]
    MinValue: ClassVar["BigInteger"]
    Error: ClassVar["BigInteger"]

    @field_validator("data")
    @classmethod
    def canonical_form(cls, v: bytes) -> bytes:
        """Нормализация к канонической форме на любом пути создания."""
        return canonicalize(v)

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def try_parse(cls, text: str, base: int = 10) -> BigIntegerResult:
        """
        Разбор строки (старшая цифра первой).

        Формат: необязательный знак '-'/'+', затем цифры основания.
        Для base 16 допускается префикс 0x/0X и нечётное число цифр.

        Args:
            text: Строка для разбора
            base: Основание (2, 10 или 16)

        Returns:
            BigIntegerResult с ErrorKind.PARSE при пустой строке,
            недопустимом символе или неподдерживаемом основании

        Examples:
            >>> BigInteger.try_parse("0xFF", 16).unwrap().to_string(10)
            '255'
            >>> BigInteger.try_parse("12a").error
            <ErrorKind.PARSE: 'parse_error'>
        """
        if not isinstance(text, str):
            return BigIntegerResult.failure(ErrorKind.PARSE, f"expected str, got {type(text).__name__}")
        if base not in SUPPORTED_BASES:
            return BigIntegerResult.failure(ErrorKind.PARSE, f"unsupported base: {base}")

        digits = text
        negative = False
        if digits[:1] in ("-", "+"):
            negative = digits[0] == "-"
            digits = digits[1:]

        try:
            if base == 16:
                data = encode(negative, formatting.from_hex_string(formatting.strip_hex_prefix(digits)))
            elif base == 2:
                data = encode(negative, formatting.from_binary_string(digits))
            else:
                if not digits or not all("0" <= char <= "9" for char in digits):
                    raise ValueError("expected non-empty decimal digits")
                data = get_backend().parse_decimal(digits, negative)
        except ValueError as exc:
            return BigIntegerResult.failure(
                ErrorKind.PARSE, f"cannot parse {text!r} in base {base}: {exc}"
            )

        return BigIntegerResult.success(cls(data=data))

    @classmethod
    def from_string(cls, text: str, base: int = 10) -> "BigInteger":
        return cls.try_parse(text, base).value_or_error()

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """Python int -> BigInteger."""
        if not isinstance(value, int) or isinstance(value, bool):
            return BigIntegerResult.failure(
                ErrorKind.PARSE, f"expected int, got {type(value).__name__}"
            ).value_or_error()
        return cls(data=int_to_data(value))

    @classmethod
    def from_float(cls, value: float) -> "BigInteger":
        """
        float -> BigInteger с отбрасыванием дробной части (к нулю).

        NaN и Infinity дают Error (ErrorKind.PARSE).
        """
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            return BigIntegerResult.failure(
                ErrorKind.PARSE, f"expected float, got {type(value).__name__}"
            ).value_or_error()
        if not math.isfinite(value):
            return BigIntegerResult.failure(
                ErrorKind.PARSE, f"non-finite float: {value}"
            ).value_or_error()
        return cls.from_int(math.trunc(value))

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> "BigInteger":
        """
        Байты в little-endian (формат to_byte_array) -> BigInteger.

        Пустая последовательность — ноль, не Error.
        """
        # bytes(int) создал бы нулевой буфер заданной длины
        if isinstance(data, (int, str)):
            return BigIntegerResult.failure(
                ErrorKind.PARSE, f"expected byte sequence, got {type(data).__name__}"
            ).value_or_error()

        try:
            raw = bytes(data)
        except (TypeError, ValueError) as exc:
            return BigIntegerResult.failure(ErrorKind.PARSE, f"invalid byte sequence: {exc}").value_or_error()

        if not raw:
            return cls.Zero
        return cls(data=bytes(reversed(raw)))

    # =========================================================================
    # PREDICATES
    # =========================================================================

    def is_zero(self) -> bool:
        return self.data == ZERO_DATA

    def is_error(self) -> bool:
        return self.data == ERROR_DATA

    def length(self) -> int:
        """Размер представления в байтах (0 для Error)."""
        return len(self.data)

    def sign(self) -> int:
        """
        Знак значения: -1, 0 или 1.

        Raises:
            ErrorOperandError: Для BigInteger.Error
        """
        self._require_value("sign")
        if self.is_zero():
            return 0
        return -1 if is_negative(self.data) else 1

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.data == other.data

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # Согласовано с int: hash(BigInteger.from_int(n)) == hash(n)
        if self.is_error():
            return hash(ERROR_DATA)
        return hash(int(self))

    def _compare(self, other: "BigInteger") -> int:
        if self.is_error() or other.is_error():
            raise ErrorOperandError("cannot order BigInteger.Error")
        return get_backend().compare(self.data, other.data)

    def __lt__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) < 0

    def __gt__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) > 0

    def __le__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self == other or self < other

    def __ge__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self == other or self > other

    def __bool__(self) -> bool:
        return not self.is_zero()

    @staticmethod
    def min(left: "BigInteger", right: "BigInteger") -> "BigInteger":
        if left.is_error() or right.is_error():
            return _error_operand("min")
        return left if left <= right else right

    @staticmethod
    def max(left: "BigInteger", right: "BigInteger") -> "BigInteger":
        if left.is_error() or right.is_error():
            return _error_operand("max")
        return left if left >= right else right

    @staticmethod
    def abs(value: "BigInteger") -> "BigInteger":
        if value.is_error():
            return _error_operand("abs")
        return -value if value.sign() < 0 else value

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def _binary(
        self,
        other: Any,
        operation: Callable[[ArithmeticBackend, bytes, bytes], bytes],
        name: str,
        reflected: bool = False,
    ) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if self.is_error() or other.is_error():
            return _error_operand(name)

        left, right = (other, self) if reflected else (self, other)
        return BigInteger(data=operation(get_backend(), left.data, right.data))

    def __add__(self, other: Any) -> "BigInteger":
        return self._binary(other, lambda b, x, y: b.add(x, y), "+")

    def __radd__(self, other: Any) -> "BigInteger":
        return self._binary(other, lambda b, x, y: b.add(x, y), "+", reflected=True)

    def __sub__(self, other: Any) -> "BigInteger":
        return self._binary(other, lambda b, x, y: b.subtract(x, y), "-")

    def __rsub__(self, other: Any) -> "BigInteger":
        return self._binary(other, lambda b, x, y: b.subtract(x, y), "-", reflected=True)

    def __mul__(self, other: Any) -> "BigInteger":
        return self._binary(other, lambda b, x, y: b.multiply(x, y), "*")

    def __rmul__(self, other: Any) -> "BigInteger":
        return self._binary(other, lambda b, x, y: b.multiply(x, y), "*", reflected=True)

    def __neg__(self) -> "BigInteger":
        return BigInteger.Zero - self

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        return BigInteger.abs(self)

    @staticmethod
    def multiply(left: "BigInteger", right: "BigInteger") -> "BigInteger":
        return left * right

    # -------------------------------------------------------------------------
    # Division
    # -------------------------------------------------------------------------

    def try_div_rem(self, divisor: "BigInteger | int") -> tuple[BigIntegerResult, BigIntegerResult]:
        """
        Частное и остаток деления с усечением к нулю.

        Args:
            divisor: Делитель (BigInteger или int)

        Returns:
            (quotient, remainder) как BigIntegerResult;
            ErrorKind.DIVIDE_BY_ZERO при нулевом делителе,
            ErrorKind.ERROR_OPERAND при Error операнде

        Raises:
            TypeError: Делитель не BigInteger и не int

        Examples:
            >>> q, r = BigInteger.from_int(-7).try_div_rem(2)
            >>> (str(q.unwrap()), str(r.unwrap()))
            ('-3', '-1')
        """
        other = _coerce(divisor)
        if other is None:
            raise TypeError(f"unsupported divisor type: {type(divisor).__name__}")

        if self.is_error() or other.is_error():
            failure = BigIntegerResult.failure(ErrorKind.ERROR_OPERAND, "division with BigInteger.Error operand")
            return failure, failure
        if other.is_zero():
            failure = BigIntegerResult.failure(ErrorKind.DIVIDE_BY_ZERO, f"{self} / 0")
            return failure, failure

        quotient, remainder = get_backend().div_rem(self.data, other.data)
        return (
            BigIntegerResult.success(BigInteger(data=quotient)),
            BigIntegerResult.success(BigInteger(data=remainder)),
        )

    def try_divide(self, divisor: "BigInteger | int") -> BigIntegerResult:
        return self.try_div_rem(divisor)[0]

    def try_remainder(self, divisor: "BigInteger | int") -> BigIntegerResult:
        return self.try_div_rem(divisor)[1]

    def div_rem(self, divisor: "BigInteger | int") -> tuple["BigInteger", "BigInteger"]:
        quotient, remainder = self.try_div_rem(divisor)
        return quotient.value_or_error(), remainder.value_or_error()

    def __truediv__(self, other: Any) -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        return self.try_divide(other).value_or_error()

    def __rtruediv__(self, other: Any) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.try_divide(self).value_or_error()

    def __mod__(self, other: Any) -> "BigInteger":
        if _coerce(other) is None:
            return NotImplemented
        return self.try_remainder(other).value_or_error()

    def __rmod__(self, other: Any) -> "BigInteger":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.try_remainder(self).value_or_error()

    # -------------------------------------------------------------------------
    # Power
    # -------------------------------------------------------------------------

    @staticmethod
    def try_pow(value: "BigInteger | int", exponent: "BigInteger | int") -> BigIntegerResult:
        """
        Возведение в неотрицательную степень.

        pow(x, 0) == One для любого x, включая ноль.

        Returns:
            BigIntegerResult; ErrorKind.INVALID_EXPONENT при exponent < 0,
            ErrorKind.OVERFLOW если exponent не помещается в int32
        """
        base = _coerce(value)
        if base is None:
            raise TypeError(f"unsupported base type: {type(value).__name__}")
        if base.is_error():
            return BigIntegerResult.failure(ErrorKind.ERROR_OPERAND, "pow with BigInteger.Error base")

        try:
            power = _native_amount(exponent, "exponent")
        except BigIntegerError as exc:
            return BigIntegerResult.failure(exc.kind, str(exc))

        if power < 0:
            return BigIntegerResult.failure(ErrorKind.INVALID_EXPONENT, f"negative exponent: {power}")

        return BigIntegerResult.success(BigInteger(data=get_backend().power(base.data, power)))

    @staticmethod
    def pow(value: "BigInteger | int", exponent: "BigInteger | int") -> "BigInteger":
        return BigInteger.try_pow(value, exponent).value_or_error()

    def __pow__(self, exponent: Any, modulo: Any = None) -> "BigInteger":
        if modulo is not None or not _is_operand(exponent):
            return NotImplemented
        return BigInteger.pow(self, exponent)

    def __rpow__(self, base: Any, modulo: Any = None) -> "BigInteger":
        if modulo is not None or not _is_operand(base):
            return NotImplemented
        return BigInteger.pow(base, self)

    # =========================================================================
    # BITWISE & SHIFTS
    # =========================================================================

    def __invert__(self) -> "BigInteger":
        if self.is_error():
            return _error_operand("~")
        return BigInteger(data=get_backend().invert(self.data))

    def __and__(self, other: Any) -> "BigInteger":
        return self._binary(other, lambda b, x, y: b.bitwise_and(x, y), "&")

    def __rand__(self, other: Any) -> "BigInteger":
        return self._binary(other, lambda b, x, y: b.bitwise_and(x, y), "&", reflected=True)

    def __or__(self, other: Any) -> "BigInteger":
        return self._binary(other, lambda b, x, y: b.bitwise_or(x, y), "|")

    def __ror__(self, other: Any) -> "BigInteger":
        return self._binary(other, lambda b, x, y: b.bitwise_or(x, y), "|", reflected=True)

    def __xor__(self, other: Any) -> "BigInteger":
        return self._binary(other, lambda b, x, y: b.bitwise_xor(x, y), "^")

    def __rxor__(self, other: Any) -> "BigInteger":
        return self._binary(other, lambda b, x, y: b.bitwise_xor(x, y), "^", reflected=True)

    def try_shift(self, amount: "BigInteger | int", left: bool) -> BigIntegerResult:
        """
        Сдвиг на amount бит (влево при left=True).

        Отрицательный amount сдвигает в обратную сторону.
        amount вне int32 даёт ErrorKind.OVERFLOW.
        """
        if self.is_error():
            return BigIntegerResult.failure(ErrorKind.ERROR_OPERAND, "shift of BigInteger.Error")

        try:
            bits = _native_amount(amount, "shift amount")
        except BigIntegerError as exc:
            return BigIntegerResult.failure(exc.kind, str(exc))

        if bits < 0:
            left = not left
            bits = -bits

        backend = get_backend()
        data = backend.shift_left(self.data, bits) if left else backend.shift_right(self.data, bits)
        return BigIntegerResult.success(BigInteger(data=data))

    def __lshift__(self, amount: Any) -> "BigInteger":
        if not _is_operand(amount):
            return NotImplemented
        return self.try_shift(amount, left=True).value_or_error()

    def __rshift__(self, amount: Any) -> "BigInteger":
        if not _is_operand(amount):
            return NotImplemented
        return self.try_shift(amount, left=False).value_or_error()

    def __rlshift__(self, value: Any) -> "BigInteger":
        other = _coerce(value)
        if other is None:
            return NotImplemented
        return other.try_shift(self, left=True).value_or_error()

    def __rrshift__(self, value: Any) -> "BigInteger":
        other = _coerce(value)
        if other is None:
            return NotImplemented
        return other.try_shift(self, left=False).value_or_error()

    # =========================================================================
    # EXPORT
    # =========================================================================

    def _require_value(self, operation: str) -> None:
        if self.is_error():
            raise ErrorOperandError(f"{operation} is undefined for BigInteger.Error")

    def to_byte_array(self) -> bytes:
        """
        Представление в little-endian (младший байт первым).

        Обратная операция: BigInteger.from_bytes.
        """
        self._require_value("to_byte_array")
        return bytes(reversed(self.data))

    def to_hex_str(self) -> str:
        """Hex-строка байтового представления в little-endian."""
        self._require_value("to_hex_str")
        return formatting.revert_hex_string(formatting.to_hex_string(self.data))

    def to_string(self, base: int = 16) -> str:
        """
        Строковое представление, старшая цифра первой.

        - 16: "0x" + две заглавные hex-цифры на байт модуля ("0xFF", "0x0100")
        - 2: 8 бит на байт модуля ("11111111")
        - 10: десятичная запись
        Отрицательные значения получают префикс "-".

        Raises:
            ParseError: Неподдерживаемое основание
            ErrorOperandError: Для BigInteger.Error
        """
        self._require_value("to_string")
        if base not in SUPPORTED_BASES:
            raise ParseError(f"unsupported base: {base}")

        if base == 10:
            return get_backend().format_decimal(self.data)

        negative, magnitude = decode(self.data)
        magnitude = magnitude or ZERO_DATA
        sign = "-" if negative else ""
        if base == 16:
            return f"{sign}0x{formatting.to_hex_string(magnitude)}"
        return sign + formatting.to_binary_string(magnitude)

    def _to_native(self, low: int, high: int, type_name: str) -> int:
        self._require_value(f"to {type_name}")
        value = data_to_int(self.data)
        if not low <= value <= high:
            raise IntegerOverflowError(f"{value} does not fit in {type_name} [{low}, {high}]")
        return value

    def to_int(self) -> int:
        """
        Конверсия в знаковый 32-битный int.

        Raises:
            IntegerOverflowError: Значение вне [-2**31, 2**31 - 1]
            ErrorOperandError: Для BigInteger.Error
        """
        return self._to_native(INT32_MIN, INT32_MAX, "int32")

    def to_long(self) -> int:
        """
        Конверсия в знаковый 64-битный int.

        Raises:
            IntegerOverflowError: Значение вне [-2**63, 2**63 - 1]
            ErrorOperandError: Для BigInteger.Error
        """
        return self._to_native(INT64_MIN, INT64_MAX, "int64")

    def __int__(self) -> int:
        self._require_value("int()")
        return data_to_int(self.data)

    def copy_to(self, buffer: bytearray, size: int | None = None) -> bool:
        """
        Копирование little-endian представления в буфер вызывающего.

        Ошибка ёмкости — ожидаемая ситуация, поэтому возвращается bool,
        а не исключение. При неудаче буфер не изменяется.

        Args:
            buffer: Изменяемый буфер назначения (bytearray)
            size: Объявленная ёмкость (по умолчанию len(buffer))

        Returns:
            True если скопировано, False если ёмкости не хватает
            или значение — BigInteger.Error
        """
        if self.is_error():
            logger.debug("copy_to rejected: kind=%s", ErrorKind.ERROR_OPERAND.value)
            return False

        capacity = len(buffer) if size is None else min(size, len(buffer))
        if capacity < self.length():
            logger.debug(
                "copy_to rejected: kind=%s, need %d bytes, capacity %d",
                ErrorKind.CAPACITY.value,
                self.length(),
                capacity,
            )
            return False

        buffer[: self.length()] = self.to_byte_array()
        return True

    # =========================================================================
    # CONTRACT
    # =========================================================================

    def to_contract(self, base: int = 10) -> dict[str, Any]:
        """Сериализованная форма {"value": ..., "base": ...} (big_integer.json)."""
        return {"value": self.to_string(base), "base": base}

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "BigInteger":
        """
        Создание из сериализованной формы.

        Raises:
            jsonschema.ValidationError: Данные не соответствуют контракту
        """
        validate_big_integer(data)
        return cls.from_string(data["value"], data["base"])

    # =========================================================================
    # DISPLAY
    # =========================================================================

    def __str__(self) -> str:
        if self.is_error():
            return "BigInteger.Error"
        return self.to_string(10)

    def __repr__(self) -> str:
        if self.is_error():
            return "BigInteger.Error"
        return f"BigInteger('{self.to_string(10)}')"


# =============================================================================
# HELPERS
# =============================================================================


def _is_operand(value: Any) -> bool:
    return isinstance(value, BigInteger) or (isinstance(value, int) and not isinstance(value, bool))


def _coerce(value: Any) -> BigInteger | None:
    # int -> BigInteger; неподдерживаемый тип -> None (NotImplemented)
    if isinstance(value, BigInteger):
        return value
    if _is_operand(value):
        return BigInteger.from_int(value)
    return None


def _error_operand(operation: str) -> BigInteger:
    return BigIntegerResult.failure(
        ErrorKind.ERROR_OPERAND, f"operator {operation} with BigInteger.Error operand"
    ).value_or_error()


def _native_amount(value: "BigInteger | int", name: str) -> int:
    """
    Количество бит / показатель степени как int32.

    Raises:
        IntegerOverflowError: Значение вне int32
        ErrorOperandError: value — BigInteger.Error
        TypeError: Неподдерживаемый тип
    """
    if isinstance(value, BigInteger):
        return value.to_int()
    if not _is_operand(value):
        raise TypeError(f"{name} must be BigInteger or int, got {type(value).__name__}")
    if not INT32_MIN <= value <= MAX_SHIFT_BITS:
        raise IntegerOverflowError(f"{name} {value} does not fit in int32")
    return value


# =============================================================================
# DISTINGUISHED CONSTANTS
# =============================================================================

BigInteger.Zero = BigInteger(data=ZERO_DATA)
BigInteger.One = BigInteger(data=b"\x01")
BigInteger.MinusOne = BigInteger(data=b"\x81")
BigInteger.MinValue = BigInteger(data=int_to_data(INT64_MIN))
BigInteger.Error = BigInteger(data=ERROR_DATA)

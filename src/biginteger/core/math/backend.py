"""
Arithmetic Backend — Интерфейс и выбор арифметического движка

Публичный тип BigInteger не содержит арифметики: все операции делегируются
активному backend'у. Backend работает только с каноническими
представлениями (sign-magnitude, big-endian, см. sign_magnitude) и
возвращает канонические представления.

Доступные backend'ы:
- "naive"  — эталонная побайтовая арифметика (byte_arithmetic), default
- "native" — встроенный Python int
- "gmp"    — GMP через gmpy2 (опциональная зависимость)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все backend'ы дают bit-exact одинаковый результат
2. Backend не получает Error sentinel и нулевой делитель (проверяется выше)
3. Деление — с усечением к нулю, остаток со знаком делимого
4. Побитовые операции и сдвиги — семантика дополнительного кода
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Final, Iterator, Protocol

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Backend по умолчанию
DEFAULT_BACKEND: Final[str] = "naive"

# Все известные backend'ы
AVAILABLE_BACKENDS: Final[tuple[str, ...]] = ("naive", "native", "gmp")


# =============================================================================
# PROTOCOL
# =============================================================================


class ArithmeticBackend(Protocol):
    """
    Контракт арифметического backend'а.

    Все аргументы и результаты типа bytes — канонические представления.
    Сдвиги получают неотрицательное число бит.
    """

    name: str

    def compare(self, a: bytes, b: bytes) -> int: ...

    def add(self, a: bytes, b: bytes) -> bytes: ...

    def subtract(self, a: bytes, b: bytes) -> bytes: ...

    def multiply(self, a: bytes, b: bytes) -> bytes: ...

    def div_rem(self, a: bytes, b: bytes) -> tuple[bytes, bytes]: ...

    def power(self, a: bytes, exponent: int) -> bytes: ...

    def invert(self, a: bytes) -> bytes: ...

    def bitwise_and(self, a: bytes, b: bytes) -> bytes: ...

    def bitwise_or(self, a: bytes, b: bytes) -> bytes: ...

    def bitwise_xor(self, a: bytes, b: bytes) -> bytes: ...

    def shift_left(self, a: bytes, bits: int) -> bytes: ...

    def shift_right(self, a: bytes, bits: int) -> bytes: ...

    def parse_decimal(self, digits: str, negative: bool) -> bytes: ...

    def format_decimal(self, a: bytes) -> str: ...


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BackendConfig:
    """Конфигурация арифметического движка.

    Args:
        name: Имя backend'а ("naive" | "native" | "gmp")
    """

    name: str = DEFAULT_BACKEND


# =============================================================================
# REGISTRY
# =============================================================================


def _create_backend(name: str) -> ArithmeticBackend:
    # Импорт по требованию: gmpy2 нужен только для "gmp"
    if name == "naive":
        from biginteger.core.math.naive_backend import NaiveBackend

        return NaiveBackend()
    if name == "native":
        from biginteger.core.math.native_backend import NativeBackend

        return NativeBackend()
    if name == "gmp":
        from biginteger.core.math.gmp_backend import GmpBackend

        return GmpBackend()
    raise ValueError(f"Unknown arithmetic backend: {name!r} (expected naive, native or gmp)")


_active_backend: ArithmeticBackend | None = None


def get_backend() -> ArithmeticBackend:
    """Активный backend (создаётся лениво по BackendConfig())."""
    global _active_backend
    if _active_backend is None:
        _active_backend = _create_backend(BackendConfig().name)
    return _active_backend


def configure_backend(config: BackendConfig | str) -> ArithmeticBackend:
    """
    Выбор активного backend'а.

    Args:
        config: BackendConfig или имя backend'а

    Returns:
        Новый активный backend

    Raises:
        ValueError: Неизвестное имя backend'а
        ImportError: "gmp" выбран, но gmpy2 не установлен
    """
    global _active_backend
    if isinstance(config, str):
        config = BackendConfig(name=config)

    backend = _create_backend(config.name)
    previous = _active_backend.name if _active_backend is not None else None
    _active_backend = backend
    logger.info("Arithmetic backend switched: %s -> %s", previous, backend.name)
    return backend


@contextmanager
def use_backend(config: BackendConfig | str) -> Iterator[ArithmeticBackend]:
    """Временное переключение backend'а (для тестов и сравнения движков)."""
    global _active_backend
    previous = _active_backend
    try:
        yield configure_backend(config)
    finally:
        _active_backend = previous

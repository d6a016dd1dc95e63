"""
Formatting — Stateless helper для hex/binary строк

Используется BigInteger только для отображения и разбора строк
в основаниях 16 и 2, никогда для арифметики.

Порядок байт не меняется: функции кодируют байты в том порядке,
в котором они переданы. Разворот (little-endian <-> big-endian)
выполняется явно через revert_hex_string.
"""

from typing import Final

# Допустимые hex-символы
HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")

# Допустимые binary-символы
BINARY_DIGITS: Final[frozenset[str]] = frozenset("01")


# =============================================================================
# HEX
# =============================================================================


def strip_hex_prefix(text: str) -> str:
    """Удаление необязательного префикса 0x/0X."""
    if text[:2] in ("0x", "0X"):
        return text[2:]
    return text


def to_hex_string(data: bytes) -> str:
    """
    Байты -> hex-строка (две заглавные цифры на байт, без разделителей).

    Examples:
        >>> to_hex_string(bytes((0x01, 0xAB)))
        '01AB'
    """
    return "".join(f"{byte:02X}" for byte in data)


def from_hex_string(text: str) -> bytes:
    """
    Hex-строка -> байты (первая пара цифр -> первый байт).

    Нечётное число цифр дополняется ведущим нулём: "FFF" -> 0F FF.

    Raises:
        ValueError: Пустая строка или не-hex символ
    """
    if not text:
        raise ValueError("empty hex string")

    invalid = set(text) - HEX_DIGITS
    if invalid:
        raise ValueError(f"invalid hex characters: {''.join(sorted(invalid))!r}")

    if len(text) % 2:
        text = "0" + text
    return bytes.fromhex(text)


def revert_hex_string(text: str) -> str:
    """
    Разворот порядка байт в hex-строке.

    Examples:
        >>> revert_hex_string("01AB")
        'AB01'
    """
    if len(text) % 2:
        text = "0" + text
    pairs = [text[i : i + 2] for i in range(0, len(text), 2)]
    return "".join(reversed(pairs))


# =============================================================================
# BINARY
# =============================================================================


def byte_to_binary(byte: int) -> str:
    """Один байт -> ровно 8 символов '0'/'1' (старший бит первым)."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return format(byte, "08b")


def to_binary_string(data: bytes) -> str:
    return "".join(byte_to_binary(byte) for byte in data)


def from_binary_string(text: str) -> bytes:
    """
    Binary-строка (старший бит первым) -> байты.

    Длина, не кратная 8, дополняется ведущими нулями.

    Raises:
        ValueError: Пустая строка или символ, отличный от '0'/'1'
    """
    if not text:
        raise ValueError("empty binary string")

    invalid = set(text) - BINARY_DIGITS
    if invalid:
        raise ValueError(f"invalid binary characters: {''.join(sorted(invalid))!r}")

    text = text.zfill((len(text) + 7) // 8 * 8)
    return bytes(int(text[i : i + 8], 2) for i in range(0, len(text), 8))

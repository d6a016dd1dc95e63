"""
Тесты для Arithmetic Backend — выбора движка и согласованности движков

Проверяет:
1. BackendConfig / configure_backend / use_backend
2. Логирование переключения backend'а
3. Bit-exact совпадение результатов naive, native и gmp
"""

import logging
import operator

import pytest

from biginteger.core.math import backend as backend_module
from biginteger.core.math.backend import (
    AVAILABLE_BACKENDS,
    DEFAULT_BACKEND,
    BackendConfig,
    configure_backend,
    get_backend,
    use_backend,
)
from biginteger.core.math.native_backend import (
    DECIMAL_CHUNK_DIGITS,
    NativeBackend,
    format_decimal_chunked,
    parse_decimal_chunked,
    truncating_div_rem,
)
from biginteger.core.math.sign_magnitude import data_to_int, int_to_data

VALUES = [0, 1, -1, 127, -128, 255, -256, 2**64 + 1, -(2**64) - 255, 10**30 + 7, -(10**21)]


@pytest.fixture
def restore_backend():
    """Восстановление глобального backend'а после теста."""
    previous = backend_module._active_backend
    yield
    backend_module._active_backend = previous


@pytest.fixture(params=AVAILABLE_BACKENDS)
def engine(request):
    """Экземпляр backend'а без переключения глобального состояния."""
    if request.param == "gmp":
        pytest.importorskip("gmpy2")
    return backend_module._create_backend(request.param)


# =============================================================================
# CONFIGURATION
# =============================================================================


class TestBackendConfig:
    """Тесты выбора backend'а"""

    def test_default(self):
        assert BackendConfig().name == DEFAULT_BACKEND == "naive"

    def test_config_frozen(self):
        config = BackendConfig()
        with pytest.raises(AttributeError):
            config.name = "native"

    def test_configure_by_name(self, restore_backend):
        assert configure_backend("native").name == "native"
        assert get_backend().name == "native"

    def test_configure_by_config(self, restore_backend):
        configure_backend(BackendConfig(name="naive"))
        assert get_backend().name == "naive"

    def test_unknown_backend(self, restore_backend):
        with pytest.raises(ValueError, match="Unknown arithmetic backend"):
            configure_backend("decimal")

    def test_lazy_default(self, restore_backend):
        backend_module._active_backend = None
        assert get_backend().name == DEFAULT_BACKEND

    def test_use_backend_restores(self, restore_backend):
        configure_backend("naive")
        with use_backend("native") as active:
            assert active.name == "native"
            assert get_backend() is active
        assert get_backend().name == "naive"

    def test_use_backend_restores_on_exception(self, restore_backend):
        configure_backend("naive")
        with pytest.raises(RuntimeError):
            with use_backend("native"):
                raise RuntimeError("boom")
        assert get_backend().name == "naive"

    def test_switch_logged(self, restore_backend, caplog):
        configure_backend("naive")
        with caplog.at_level(logging.INFO, logger="biginteger.core.math.backend"):
            configure_backend("native")
        assert "Arithmetic backend switched: naive -> native" in caplog.text


# =============================================================================
# NATIVE HELPERS
# =============================================================================


class TestTruncatingDivRem:
    """Тесты для truncating_div_rem"""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (7, 2, (3, 1)),
            (-7, 2, (-3, -1)),
            (7, -2, (-3, 1)),
            (-7, -2, (3, -1)),
            (0, 5, (0, 0)),
        ],
    )
    def test_values(self, a, b, expected):
        assert truncating_div_rem(a, b) == expected

    def test_native_parse_decimal(self):
        assert NativeBackend().parse_decimal("255", True) == int_to_data(-255)


class TestChunkedDecimal:
    """Тесты блочной десятичной конверсии native backend'а"""

    def test_chunk_boundaries(self):
        assert parse_decimal_chunked("1" + "0" * DECIMAL_CHUNK_DIGITS) == 10**DECIMAL_CHUNK_DIGITS
        assert format_decimal_chunked(10**DECIMAL_CHUNK_DIGITS) == "1" + "0" * DECIMAL_CHUNK_DIGITS
        assert format_decimal_chunked(10**DECIMAL_CHUNK_DIGITS - 1) == "9" * DECIMAL_CHUNK_DIGITS

    def test_inner_chunks_zero_padded(self):
        value = 10 ** (2 * DECIMAL_CHUNK_DIGITS) + 5
        text = format_decimal_chunked(value)
        assert len(text) == 2 * DECIMAL_CHUNK_DIGITS + 1
        assert text.endswith("0" * (DECIMAL_CHUNK_DIGITS - 1) + "5")
        assert parse_decimal_chunked(text) == value

    def test_small_values(self):
        assert format_decimal_chunked(0) == "0"
        assert parse_decimal_chunked("000123") == 123


# =============================================================================
# CROSS-BACKEND AGREEMENT
# =============================================================================


class TestBackendAgreement:
    """Все backend'ы дают одинаковые канонические представления"""

    @pytest.mark.parametrize(
        "method, expected",
        [
            ("add", operator.add),
            ("subtract", operator.sub),
            ("multiply", operator.mul),
            ("bitwise_and", operator.and_),
            ("bitwise_or", operator.or_),
            ("bitwise_xor", operator.xor),
        ],
    )
    def test_binary_operations(self, engine, method, expected):
        operation = getattr(engine, method)
        for a in VALUES:
            for b in VALUES:
                assert operation(int_to_data(a), int_to_data(b)) == int_to_data(expected(a, b)), (
                    engine.name,
                    a,
                    b,
                )

    def test_compare(self, engine):
        for a in VALUES:
            for b in VALUES:
                assert engine.compare(int_to_data(a), int_to_data(b)) == (a > b) - (a < b)

    def test_div_rem(self, engine):
        for a in VALUES:
            for b in VALUES:
                if b == 0:
                    continue
                quotient, remainder = engine.div_rem(int_to_data(a), int_to_data(b))
                assert (data_to_int(quotient), data_to_int(remainder)) == truncating_div_rem(a, b)

    def test_unary_and_shifts(self, engine):
        for a in VALUES:
            data = int_to_data(a)
            assert engine.invert(data) == int_to_data(~a)
            assert engine.power(data, 3) == int_to_data(a**3)
            for bits in (0, 1, 8, 13, 80):
                assert engine.shift_left(data, bits) == int_to_data(a << bits)
                assert engine.shift_right(data, bits) == int_to_data(a >> bits)

    def test_decimal_conversion(self, engine):
        for a in VALUES:
            assert engine.format_decimal(int_to_data(a)) == str(a)
            assert engine.parse_decimal(str(abs(a)), a < 0) == int_to_data(a)

    def test_decimal_beyond_int_str_limit(self, engine):
        """Больше 4300 цифр: parse/format без ValueError и без потерь"""
        digits = "1234567890" * 450 + "7"
        data = engine.parse_decimal(digits, True)
        assert engine.format_decimal(data) == "-" + digits
        assert engine.shift_right(engine.shift_left(data, 1), 1) == data

    def test_shift_exact_beyond_float_precision(self, engine):
        """Сдвиги дают целый результат без округления до float"""
        assert engine.shift_left(int_to_data(3), 200) == int_to_data(3 << 200)
        assert engine.shift_left(int_to_data(-(2**64) - 1), 77) == int_to_data((-(2**64) - 1) << 77)
        assert engine.shift_right(int_to_data(-(3 << 200) - 1), 150) == int_to_data((-(3 << 200) - 1) >> 150)

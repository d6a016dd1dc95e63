"""
Общие fixtures для unit-тестов BigInteger

backend — параметризация по всем арифметическим движкам:
каждый тест, запросивший fixture, выполняется для naive, native и gmp
(gmp пропускается, если gmpy2 не установлен).
"""

import pytest

from biginteger.core.math.backend import AVAILABLE_BACKENDS, use_backend


@pytest.fixture(params=AVAILABLE_BACKENDS)
def backend(request):
    """Активный backend на время теста."""
    if request.param == "gmp":
        pytest.importorskip("gmpy2")
    with use_backend(request.param) as active:
        yield active

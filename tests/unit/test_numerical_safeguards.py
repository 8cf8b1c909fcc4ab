"""
Тесты для модуля Numerical Safeguards (Stability Kernel)

Проверяет:
1. IEEE-754 обёртки: ни одна не бросает исключение на float входе
2. hypot / log_hypot без переполнения вблизи предела double
3. cosm1 без катастрофического сокращения
4. cosh / sinh вещественного аргумента
5. Округление ieee_round / ieee_floor / ieee_ceil
"""

import math

import pytest

from riemann.core.math.numerical_safeguards import (
    EPSILON,
    HYPOT_DIRECT_LIMIT,
    cosh,
    cosm1,
    hypot,
    ieee_ceil,
    ieee_cos,
    ieee_div,
    ieee_exp,
    ieee_expm1,
    ieee_floor,
    ieee_log,
    ieee_pow,
    ieee_round,
    ieee_sin,
    ieee_sqrt,
    log_hypot,
    sinh,
)


# =============================================================================
# ТЕСТЫ IEEE-754 ОБЁРТОК
# =============================================================================


class TestIeeeDiv:
    """Тесты для ieee_div"""

    def test_regular_division(self) -> None:
        assert ieee_div(6.0, 3.0) == 2.0
        assert ieee_div(-1.0, 4.0) == -0.25

    def test_division_by_zero_gives_signed_infinity(self) -> None:
        """x / 0 → ±inf с учётом знака нуля"""
        assert ieee_div(1.0, 0.0) == math.inf
        assert ieee_div(-1.0, 0.0) == -math.inf
        assert ieee_div(1.0, -0.0) == -math.inf
        assert ieee_div(-1.0, -0.0) == math.inf

    def test_zero_over_zero_is_nan(self) -> None:
        assert math.isnan(ieee_div(0.0, 0.0))
        assert math.isnan(ieee_div(math.nan, 0.0))

    def test_infinity_over_zero(self) -> None:
        assert ieee_div(math.inf, 0.0) == math.inf


class TestIeeeElementary:
    """Тесты для ieee_exp, ieee_expm1, ieee_log, ieee_sqrt, ieee_cos, ieee_sin"""

    def test_exp_overflow_is_infinity(self) -> None:
        assert ieee_exp(1000.0) == math.inf
        assert ieee_expm1(1000.0) == math.inf

    def test_exp_regular(self) -> None:
        assert ieee_exp(0.0) == 1.0
        assert ieee_exp(-1000.0) == 0.0

    def test_log_of_zero_is_negative_infinity(self) -> None:
        assert ieee_log(0.0) == -math.inf
        assert ieee_log(-0.0) == -math.inf

    def test_log_of_negative_is_nan(self) -> None:
        assert math.isnan(ieee_log(-1.0))

    def test_log_of_infinity(self) -> None:
        assert ieee_log(math.inf) == math.inf

    def test_sqrt_of_negative_is_nan(self) -> None:
        assert math.isnan(ieee_sqrt(-4.0))
        assert ieee_sqrt(4.0) == 2.0

    def test_trig_of_infinity_is_nan(self) -> None:
        assert math.isnan(ieee_cos(math.inf))
        assert math.isnan(ieee_sin(-math.inf))
        assert ieee_cos(0.0) == 1.0


class TestIeeePow:
    """Тесты для ieee_pow"""

    def test_regular_power(self) -> None:
        assert ieee_pow(2.0, 10.0) == 1024.0

    def test_zero_to_negative_power_is_infinity(self) -> None:
        assert ieee_pow(0.0, -1.0) == math.inf
        assert ieee_pow(0.0, -0.5) == math.inf

    def test_negative_zero_to_odd_negative_power(self) -> None:
        assert ieee_pow(-0.0, -1.0) == -math.inf
        assert ieee_pow(-0.0, -2.0) == math.inf

    def test_negative_base_fractional_power_is_nan(self) -> None:
        assert math.isnan(ieee_pow(-8.0, 1.0 / 3.0))

    def test_overflow(self) -> None:
        assert ieee_pow(10.0, 400.0) == math.inf
        assert ieee_pow(-10.0, 401.0) == -math.inf
        assert ieee_pow(-10.0, 400.0) == math.inf


class TestIeeeRounding:
    """Тесты для ieee_round, ieee_floor, ieee_ceil"""

    def test_round_half_towards_positive_infinity(self) -> None:
        """Половины округляются вверх, а не к чётному"""
        assert ieee_round(2.5) == 3.0
        assert ieee_round(-2.5) == -2.0
        assert ieee_round(0.5) == 1.0
        assert ieee_round(1.4) == 1.0

    def test_non_finite_passthrough(self) -> None:
        assert ieee_round(math.inf) == math.inf
        assert ieee_floor(-math.inf) == -math.inf
        assert math.isnan(ieee_ceil(math.nan))

    def test_floor_ceil_return_float(self) -> None:
        assert ieee_floor(1.7) == 1.0
        assert isinstance(ieee_floor(1.7), float)
        assert ieee_ceil(-1.7) == -1.0
        assert isinstance(ieee_ceil(-1.7), float)


# =============================================================================
# ТЕСТЫ ГИПЕРБОЛИЧЕСКИХ ФУНКЦИЙ
# =============================================================================


class TestHyperbolic:
    """Тесты для cosh, sinh"""

    def test_values_at_zero(self) -> None:
        assert cosh(0.0) == 1.0
        assert sinh(0.0) == 0.0

    def test_matches_math(self) -> None:
        assert cosh(1.5) == pytest.approx(math.cosh(1.5), rel=1e-15)
        assert sinh(-0.7) == pytest.approx(math.sinh(-0.7), rel=1e-15)

    def test_overflow_is_infinity(self) -> None:
        """math.cosh бросает OverflowError, наша версия — нет"""
        assert cosh(1000.0) == math.inf
        assert cosh(-1000.0) == math.inf
        assert sinh(1000.0) == math.inf
        assert sinh(-1000.0) == -math.inf


# =============================================================================
# ТЕСТЫ HYPOT / LOG_HYPOT
# =============================================================================


class TestHypot:
    """Тесты для hypot"""

    def test_pythagorean_triple(self) -> None:
        assert hypot(3.0, 4.0) == 5.0
        assert hypot(-5.0, 12.0) == 13.0

    def test_zero(self) -> None:
        assert hypot(0.0, 0.0) == 0.0

    def test_large_components_do_not_overflow(self) -> None:
        """x^2 переполнился бы, результат конечен"""
        assert hypot(3e200, 4e200) == pytest.approx(5e200, rel=1e-15)
        assert math.isfinite(hypot(1e308, 1e308))
        assert hypot(1e308, 1e308) == pytest.approx(math.sqrt(2.0) * 1e308, rel=1e-15)

    def test_tiny_components_do_not_underflow(self) -> None:
        """x^2 ушёл бы в 0, результат ненулевой"""
        assert hypot(3e-200, -4e-200) == pytest.approx(5e-200, rel=1e-15)
        assert hypot(0.0, 1e-200) == 1e-200

    def test_scaled_branch_matches_direct(self) -> None:
        """Ветка масштабирования согласована с прямой формулой"""
        x = HYPOT_DIRECT_LIMIT * 2
        assert hypot(x, 1.0) == pytest.approx(math.sqrt(x * x + 1.0), rel=1e-15)

    def test_infinite_component(self) -> None:
        assert hypot(math.inf, 1.0) == math.inf
        assert hypot(math.inf, math.inf) == math.inf
        assert hypot(math.nan, -math.inf) == math.inf

    def test_nan_component(self) -> None:
        assert math.isnan(hypot(math.nan, 1.0))


class TestLogHypot:
    """Тесты для log_hypot"""

    def test_moderate_values(self) -> None:
        assert log_hypot(3.0, 4.0) == pytest.approx(math.log(5.0), rel=1e-15)

    def test_degenerate_axes(self) -> None:
        """a == 0 → log|b|, b == 0 → log|a|"""
        assert log_hypot(0.0, -math.e) == pytest.approx(1.0, rel=1e-15)
        assert log_hypot(-math.e, 0.0) == pytest.approx(1.0, rel=1e-15)

    def test_zero_is_negative_infinity(self) -> None:
        assert log_hypot(0.0, 0.0) == -math.inf

    def test_large_values_do_not_overflow(self) -> None:
        expected = math.log(1e308) + 0.5 * math.log(2.0)
        assert log_hypot(1e308, 1e308) == pytest.approx(expected, rel=1e-14)
        assert log_hypot(-1e308, 1e300) == pytest.approx(math.log(1e308), rel=1e-14)

    def test_infinite_component(self) -> None:
        assert log_hypot(math.inf, 1.0) == math.inf
        assert log_hypot(1e5, -math.inf) == math.inf
        assert math.isnan(log_hypot(math.inf, math.nan))

    def test_tiny_values_do_not_underflow(self) -> None:
        """a^2 + b^2 обращается в 0, результат остаётся конечным"""
        expected = math.log(math.hypot(1e-200, 1e-200))
        assert log_hypot(1e-200, 1e-200) == pytest.approx(expected, rel=1e-14)
        assert log_hypot(-1e-300, 1e-200) == pytest.approx(math.log(1e-200), rel=1e-14)

    def test_subnormal_sum_keeps_precision(self) -> None:
        expected = math.log(math.hypot(3e-160, 4e-160))
        assert log_hypot(3e-160, 4e-160) == pytest.approx(expected, rel=1e-14)


# =============================================================================
# ТЕСТЫ COSM1
# =============================================================================


class TestCosm1:
    """Тесты для cosm1"""

    def test_zero(self) -> None:
        assert cosm1(0.0) == 0.0

    def test_small_argument_keeps_precision(self) -> None:
        """cos(1e-8) - 1 даёт 0 в double, cosm1 — точное -x^2/2"""
        assert math.cos(1e-8) - 1.0 == 0.0
        assert cosm1(1e-8) == pytest.approx(-5e-17, rel=1e-12)

    def test_taylor_region_matches_cos(self) -> None:
        for x in (0.1, -0.3, 0.5, 0.78):
            assert cosm1(x) == pytest.approx(math.cos(x) - 1.0, abs=EPSILON)

    def test_outside_taylor_region(self) -> None:
        assert cosm1(1.0) == math.cos(1.0) - 1.0
        assert cosm1(-3.0) == math.cos(-3.0) - 1.0

    def test_infinity_is_nan(self) -> None:
        assert math.isnan(cosm1(math.inf))

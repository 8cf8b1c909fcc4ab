"""
Тесты для Arithmetic Core (функции над парами (re, im))

Проверяет:
1. Полюсные правила выполняются ДО формулы
2. Формулы для конечных операндов
3. Устойчивость деления (алгоритм Smith) к переполнению
4. Специальные ветки pow: z ** 0, вещественная степень, цикл i ** n, 0 ** z
5. Главную ветвь sqrt
"""

import math

import pytest

from riemann.core.math.arithmetic import (
    INFINITY_PAIR,
    NAN_PAIR,
    ONE_PAIR,
    ZERO_PAIR,
    add,
    conjugate,
    div,
    inverse,
    mul,
    neg,
    outcome_pair,
    pow_,
    sqrt,
    sub,
)
from riemann.core.math.poles import PoleOutcome

INF = (math.inf, math.inf)
NAN = (math.nan, math.nan)


def assert_nan(pair: tuple[float, float]) -> None:
    assert math.isnan(pair[0]) and math.isnan(pair[1])


def assert_pair(pair: tuple[float, float], expected: complex, tol: float = 1e-12) -> None:
    assert pair[0] == pytest.approx(expected.real, abs=tol)
    assert pair[1] == pytest.approx(expected.imag, abs=tol)


# =============================================================================
# ТЕСТЫ КАНОНИЧЕСКИХ ПАР
# =============================================================================


class TestOutcomePair:
    """Тесты для outcome_pair"""

    def test_canonical_pairs(self) -> None:
        assert outcome_pair(PoleOutcome.ZERO) == ZERO_PAIR
        assert outcome_pair(PoleOutcome.ONE) == ONE_PAIR
        assert outcome_pair(PoleOutcome.INFINITY) == INFINITY_PAIR
        assert_nan(outcome_pair(PoleOutcome.NAN))

    def test_compute_has_no_pair(self) -> None:
        with pytest.raises(KeyError):
            outcome_pair(PoleOutcome.COMPUTE)


# =============================================================================
# ТЕСТЫ СЛОЖЕНИЯ / ВЫЧИТАНИЯ
# =============================================================================


class TestAddSub:
    """Тесты для add, sub"""

    def test_componentwise(self) -> None:
        assert add((1.0, 2.0), (3.0, 4.0)) == (4.0, 6.0)
        assert sub((1.0, 2.0), (3.0, 5.0)) == (-2.0, -3.0)

    def test_infinity_plus_infinity_is_nan(self) -> None:
        assert_nan(add(INF, INF))
        assert_nan(sub(INF, INF))

    def test_infinity_plus_finite_is_canonical_infinity(self) -> None:
        """Направление не сохраняется: результат — (inf, inf)"""
        assert add((-math.inf, 0.0), (1.0, 1.0)) == INFINITY_PAIR
        assert sub((1.0, 1.0), (0.0, math.inf)) == INFINITY_PAIR

    def test_nan_absorbs(self) -> None:
        assert_nan(add(NAN, (1.0, 0.0)))
        assert_nan(add(NAN, INF))


# =============================================================================
# ТЕСТЫ УМНОЖЕНИЯ / ДЕЛЕНИЯ
# =============================================================================


class TestMul:
    """Тесты для mul"""

    def test_formula(self) -> None:
        assert mul((1.0, 1.0), (1.0, -1.0)) == (2.0, 0.0)
        assert mul((1.0, 2.0), (3.0, 4.0)) == (-5.0, 10.0)

    def test_real_short_circuit_keeps_positive_zero(self) -> None:
        result = mul((-2.0, 0.0), (3.0, 0.0))
        assert result == (-6.0, 0.0)
        assert math.copysign(1.0, result[1]) == 1.0

    def test_infinity_times_zero_is_nan(self) -> None:
        assert_nan(mul(INF, (0.0, 0.0)))
        assert_nan(mul((0.0, 0.0), INF))

    def test_infinity_times_nonzero_is_infinity(self) -> None:
        assert mul(INF, (0.0, -1.0)) == INFINITY_PAIR
        assert mul(INF, INF) == INFINITY_PAIR


class TestDiv:
    """Тесты для div"""

    def test_formula(self) -> None:
        assert_pair(div((1.0, 2.0), (3.0, 4.0)), (1 + 2j) / (3 + 4j))
        assert_pair(div((1.0, 2.0), (4.0, -3.0)), (1 + 2j) / (4 - 3j))

    def test_real_divisor(self) -> None:
        assert div((4.0, 2.0), (2.0, 0.0)) == (2.0, 1.0)

    def test_large_operands_do_not_overflow(self) -> None:
        """c^2 + d^2 переполнился бы, Smith — нет"""
        assert div((1e300, 1e300), (1e300, 1e300)) == (1.0, 0.0)
        assert_pair(div((1e300, 0.0), (0.0, 1e300)), -1j)

    def test_division_by_zero_is_infinity(self) -> None:
        assert div((1.0, 0.0), (0.0, 0.0)) == INFINITY_PAIR

    def test_zero_over_zero_is_nan(self) -> None:
        assert_nan(div((0.0, 0.0), (0.0, 0.0)))

    def test_division_by_infinity_is_zero(self) -> None:
        assert div((0.0, 0.0), INF) == ZERO_PAIR
        assert div((5.0, -3.0), INF) == ZERO_PAIR

    def test_infinity_over_infinity_is_nan(self) -> None:
        assert_nan(div(INF, INF))


class TestInverse:
    """Тесты для inverse"""

    def test_formula(self) -> None:
        assert inverse((0.0, 2.0)) == (0.0, -0.5)
        assert_pair(inverse((3.0, 4.0)), 1 / (3 + 4j))

    def test_poles(self) -> None:
        assert inverse((0.0, 0.0)) == INFINITY_PAIR
        assert inverse(INF) == ZERO_PAIR
        assert_nan(inverse(NAN))


# =============================================================================
# ТЕСТЫ СТЕПЕНИ / КОРНЯ
# =============================================================================


class TestPow:
    """Тесты для pow_"""

    def test_zero_exponent_is_one(self) -> None:
        assert pow_((0.0, 0.0), (0.0, 0.0)) == ONE_PAIR
        assert pow_(INF, (0.0, 0.0)) == ONE_PAIR
        assert pow_(NAN, (0.0, 0.0)) == ONE_PAIR

    def test_nan_exponent_is_nan(self) -> None:
        assert_nan(pow_((2.0, 0.0), NAN))

    def test_positive_real_base(self) -> None:
        assert pow_((2.0, 0.0), (10.0, 0.0)) == (1024.0, 0.0)
        assert pow_((4.0, 0.0), (-0.5, 0.0)) == (0.5, 0.0)

    def test_imaginary_base_cycle(self) -> None:
        """i ** n циклична с периодом 4"""
        assert pow_((0.0, 1.0), (2.0, 0.0)) == (-1.0, 0.0)
        assert pow_((0.0, 1.0), (3.0, 0.0)) == (0.0, -1.0)
        assert pow_((0.0, 1.0), (4.0, 0.0)) == (1.0, 0.0)
        assert pow_((0.0, 2.0), (-1.0, 0.0)) == (0.0, -0.5)
        assert pow_((0.0, -1.0), (2.0, 0.0)) == (-1.0, 0.0)

    def test_imaginary_base_fractional_exponent(self) -> None:
        assert_pair(pow_((0.0, 1.0), (0.5, 0.0)), 1j ** 0.5)

    def test_zero_base(self) -> None:
        assert pow_((0.0, 0.0), (2.0, 1.0)) == ZERO_PAIR
        assert pow_((0.0, 0.0), (3.0, 0.0)) == ZERO_PAIR

    def test_negative_real_base(self) -> None:
        assert_pair(pow_((-8.0, 0.0), (1.0 / 3.0, 0.0)), complex(1.0, math.sqrt(3.0)))

    def test_general_formula(self) -> None:
        assert_pair(pow_((1.0, 1.0), (0.0, 1.0)), (1 + 1j) ** 1j)
        assert_pair(pow_((2.0, -1.0), (1.5, 0.5)), (2 - 1j) ** (1.5 + 0.5j))


class TestSqrt:
    """Тесты для sqrt"""

    def test_zero(self) -> None:
        assert sqrt((0.0, 0.0)) == (0.0, 0.0)

    def test_negative_real_is_principal(self) -> None:
        """sqrt(-1) = i (неотрицательная вещественная часть)"""
        assert sqrt((-1.0, 0.0)) == (0.0, 1.0)
        assert sqrt((-4.0, 0.0)) == (0.0, 2.0)

    def test_positive_real(self) -> None:
        assert sqrt((9.0, 0.0)) == (3.0, 0.0)

    def test_exact_squares(self) -> None:
        assert sqrt((3.0, 4.0)) == (2.0, 1.0)
        assert sqrt((3.0, -4.0)) == (2.0, -1.0)
        assert sqrt((-3.0, 4.0)) == (1.0, 2.0)
        assert sqrt((5.0, 12.0)) == (3.0, 2.0)

    def test_matches_principal_branch(self) -> None:
        assert_pair(sqrt((-2.0, -7.0)), (-2 - 7j) ** 0.5)

    def test_infinity(self) -> None:
        result = sqrt(INF)
        assert math.isinf(result[0]) or math.isnan(result[0])


class TestConjugateNeg:
    """Тесты для conjugate, neg"""

    def test_conjugate(self) -> None:
        assert conjugate((1.0, 2.0)) == (1.0, -2.0)

    def test_neg(self) -> None:
        assert neg((1.0, -2.0)) == (-1.0, 2.0)

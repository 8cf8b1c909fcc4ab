"""
Arithmetic Core — алгебра на расширенной комплексной плоскости

Все функции работают с парами (re, im) и возвращают новую пару.
Порядок вычисления каждой бинарной операции:
1. Классификация обоих операндов (poles.classify)
2. Исход по таблице правил (poles.resolve)
3. Формула — только для исхода COMPUTE

ФОРМУЛЫ:
    (a + bi)(c + di) = (ac - bd) + (ad + bc)i
    (a + bi) / (c + di) — алгоритм Smith (масштабирование по min/max |c|, |d|)
    (a + bi) ** (c + di) = exp(c * L - d * arg) * cis(d * L + c * arg),
        L = log|a + bi|, arg = atan2(b, a)
"""

import math
from typing import Final

from riemann.core.math.numerical_safeguards import (
    hypot,
    ieee_cos,
    ieee_div,
    ieee_exp,
    ieee_pow,
    ieee_sin,
    ieee_sqrt,
    log_hypot,
)
from riemann.core.math.poles import (
    ADD_RULES,
    DIV_RULES,
    INVERSE_RULES,
    MUL_RULES,
    POW_RULES,
    SUB_RULES,
    PoleOutcome,
    classify,
    resolve,
)

Pair = tuple[float, float]

NAN_PAIR: Final[Pair] = (math.nan, math.nan)
INFINITY_PAIR: Final[Pair] = (math.inf, math.inf)
ZERO_PAIR: Final[Pair] = (0.0, 0.0)
ONE_PAIR: Final[Pair] = (1.0, 0.0)

_OUTCOME_PAIRS: Final[dict[PoleOutcome, Pair]] = {
    PoleOutcome.NAN: NAN_PAIR,
    PoleOutcome.INFINITY: INFINITY_PAIR,
    PoleOutcome.ZERO: ZERO_PAIR,
    PoleOutcome.ONE: ONE_PAIR,
}


def outcome_pair(outcome: PoleOutcome) -> Pair:
    """Каноническая пара для полюсного исхода (не COMPUTE)."""
    return _OUTCOME_PAIRS[outcome]


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add(z: Pair, w: Pair) -> Pair:
    outcome = resolve(ADD_RULES, classify(*z), classify(*w))
    if outcome is not PoleOutcome.COMPUTE:
        return outcome_pair(outcome)
    return (z[0] + w[0], z[1] + w[1])


def sub(z: Pair, w: Pair) -> Pair:
    outcome = resolve(SUB_RULES, classify(*z), classify(*w))
    if outcome is not PoleOutcome.COMPUTE:
        return outcome_pair(outcome)
    return (z[0] - w[0], z[1] - w[1])


# =============================================================================
# УМНОЖЕНИЕ / ДЕЛЕНИЕ
# =============================================================================


def mul(z: Pair, w: Pair) -> Pair:
    """
    Произведение z * w.

    Для двух вещественных операндов мнимая часть — точный ноль
    (без вклада 0 * x, который дал бы -0.0 или NaN).
    """
    outcome = resolve(MUL_RULES, classify(*z), classify(*w))
    if outcome is not PoleOutcome.COMPUTE:
        return outcome_pair(outcome)

    a, b = z
    c, d = w

    if b == 0.0 and d == 0.0:
        return (a * c, 0.0)

    return (a * c - b * d, a * d + b * c)


def div(z: Pair, w: Pair) -> Pair:
    """
    Частное z / w по алгоритму Smith.

    Вместо (c^2 + d^2) в знаменателе делим на большую по модулю компоненту
    делителя, поэтому промежуточные величины не переполняются.
    """
    outcome = resolve(DIV_RULES, classify(*z), classify(*w))
    if outcome is not PoleOutcome.COMPUTE:
        return outcome_pair(outcome)

    a, b = z
    c, d = w

    if d == 0.0:
        return (ieee_div(a, c), ieee_div(b, c))

    if abs(c) < abs(d):
        x = c / d
        t = c * x + d
        return (ieee_div(a * x + b, t), ieee_div(b * x - a, t))

    x = d / c
    t = d * x + c
    return (ieee_div(a + b * x, t), ieee_div(b - a * x, t))


def inverse(z: Pair) -> Pair:
    """1 / z: 1 / 0 = inf, 1 / inf = 0."""
    outcome = INVERSE_RULES[classify(*z)]
    if outcome is not PoleOutcome.COMPUTE:
        return outcome_pair(outcome)

    re, im = z
    d = re * re + im * im
    return (ieee_div(re, d), ieee_div(-im, d))


# =============================================================================
# СТЕПЕНЬ / КОРЕНЬ
# =============================================================================


def _imaginary_base_power(im: float, exponent: float) -> Pair | None:
    """
    (i * im) ** n для вещественного n: i ** n циклична с периодом 4.

    Returns:
        Пару или None, если n mod 4 не целое (тогда общая формула).
    """
    magnitude = ieee_pow(im, exponent)
    cycle = exponent % 4.0
    if cycle == 0.0:
        return (magnitude, 0.0)
    if cycle == 1.0:
        return (0.0, magnitude)
    if cycle == 2.0:
        return (-magnitude, 0.0)
    if cycle == 3.0:
        return (0.0, -magnitude)
    return None


def pow_(z: Pair, w: Pair) -> Pair:
    """
    Степень z ** w.

    Порядок:
        1. w == 0 → 1 (включая 0 ** 0); NaN → NaN
        2. w вещественное, z положительное вещественное → math.pow
        3. w вещественное, z чисто мнимое → цикл i ** n
        4. z == 0, Re w > 0, Im w >= 0 → 0
        5. общая формула через log_hypot / atan2
    """
    outcome = resolve(POW_RULES, classify(*z), classify(*w))
    if outcome is not PoleOutcome.COMPUTE:
        return outcome_pair(outcome)

    re, im = z
    c, d = w

    if d == 0.0:
        if im == 0.0 and re > 0.0:
            return (ieee_pow(re, c), 0.0)
        if re == 0.0:
            cyclic = _imaginary_base_power(im, c)
            if cyclic is not None:
                return cyclic

    if re == 0.0 and im == 0.0 and c > 0.0 and d >= 0.0:
        return ZERO_PAIR

    arg = math.atan2(im, re)
    loh = log_hypot(re, im)

    magnitude = ieee_exp(c * loh - d * arg)
    phase = d * loh + c * arg

    return (magnitude * ieee_cos(phase), magnitude * ieee_sin(phase))


def sqrt(z: Pair) -> Pair:
    """
    Главное значение квадратного корня.

    Половинный угол:
        Re = 0.5 * sqrt(2 * (r + re)),  Im = 0.5 * sqrt(2 * (r - re))
    Для компоненты, где возможно сокращение (r ~ |re|), используется
    эквивалентная форма |im| / sqrt(2 * (r -+ re)). Знак Im копируется из im.
    """
    re, im = z
    r = hypot(re, im)

    if re >= 0.0:
        if im == 0.0:
            return (ieee_sqrt(re), 0.0)
        a = 0.5 * ieee_sqrt(2.0 * (r + re))
    else:
        a = ieee_div(abs(im), ieee_sqrt(2.0 * (r - re)))

    if re <= 0.0:
        b = 0.5 * ieee_sqrt(2.0 * (r - re))
    else:
        b = ieee_div(abs(im), ieee_sqrt(2.0 * (r + re)))

    return (a, -b if im < 0.0 else b)


# =============================================================================
# СОПРЯЖЕНИЕ / ОТРИЦАНИЕ
# =============================================================================


def conjugate(z: Pair) -> Pair:
    return (z[0], -z[1])


def neg(z: Pair) -> Pair:
    return (-z[0], -z[1])

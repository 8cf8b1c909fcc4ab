"""
Transcendental Family — exp, log, круговые и гиперболические функции

Все функции принимают и возвращают пары (re, im).

Прямые функции вычисляются по тождествам через вещественные cos/sin/cosh/sinh,
например sin(a + bi) = sin(a)cosh(b) + i cos(a)sinh(b). Проверки полюсов нет:
при переполнении cosh/sinh результат естественно становится inf или NaN.

Обратные функции сводятся к log и sqrt:
    asin(z) = -i log(iz + sqrt(1 - z^2))
    acos(z) = pi/2 - asin(z)
    atan(z) = i/2 log((i + z) / (i - z))
Обратные к sec/csc/cot/sech/csch/coth — через обратную функцию от 1/z.
Гиперболические обратные — поворотом на 90°: asinh(z) = -i asin(iz).

Вырожденный знаменатель d == 0 даёт явные ±inf / 0 компоненты, а не исключение.
"""

import math

from riemann.core.math.arithmetic import Pair, sqrt
from riemann.core.math.numerical_safeguards import (
    cosh,
    cosm1,
    ieee_cos,
    ieee_div,
    ieee_exp,
    ieee_expm1,
    ieee_sin,
    log_hypot,
    sinh,
)

HALF_PI = math.pi / 2


# =============================================================================
# EXP / LOG
# =============================================================================


def exp(z: Pair) -> Pair:
    re, im = z
    exp_re = ieee_exp(re)
    return (exp_re * ieee_cos(im), exp_re * ieee_sin(im))


def expm1(z: Pair) -> Pair:
    """
    exp(z) - 1 с сохранением точности при малом z.

    exp(a + bi) - 1 = expm1(a) cos(b) + cosm1(b) + i exp(a) sin(b)
    """
    re, im = z
    return (
        ieee_expm1(re) * ieee_cos(im) + cosm1(im),
        ieee_exp(re) * ieee_sin(im),
    )


def log(z: Pair) -> Pair:
    """Главное значение: (log|z|, atan2(im, re))."""
    re, im = z
    return (log_hypot(re, im), math.atan2(im, re))


# =============================================================================
# КРУГОВЫЕ ФУНКЦИИ
# =============================================================================


def sin(z: Pair) -> Pair:
    re, im = z
    return (ieee_sin(re) * cosh(im), ieee_cos(re) * sinh(im))


def cos(z: Pair) -> Pair:
    re, im = z
    return (ieee_cos(re) * cosh(im), -ieee_sin(re) * sinh(im))


def tan(z: Pair) -> Pair:
    a = 2.0 * z[0]
    b = 2.0 * z[1]
    d = ieee_cos(a) + cosh(b)
    return (ieee_div(ieee_sin(a), d), ieee_div(sinh(b), d))


def cot(z: Pair) -> Pair:
    a = 2.0 * z[0]
    b = 2.0 * z[1]
    d = ieee_cos(a) - cosh(b)
    return (ieee_div(-ieee_sin(a), d), ieee_div(sinh(b), d))


def sec(z: Pair) -> Pair:
    re, im = z
    d = 0.5 * cosh(2.0 * im) + 0.5 * ieee_cos(2.0 * re)
    return (
        ieee_div(ieee_cos(re) * cosh(im), d),
        ieee_div(ieee_sin(re) * sinh(im), d),
    )


def csc(z: Pair) -> Pair:
    re, im = z
    d = 0.5 * cosh(2.0 * im) - 0.5 * ieee_cos(2.0 * re)
    return (
        ieee_div(ieee_sin(re) * cosh(im), d),
        ieee_div(-ieee_cos(re) * sinh(im), d),
    )


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def sinh_(z: Pair) -> Pair:
    re, im = z
    return (sinh(re) * ieee_cos(im), cosh(re) * ieee_sin(im))


def cosh_(z: Pair) -> Pair:
    re, im = z
    return (cosh(re) * ieee_cos(im), sinh(re) * ieee_sin(im))


def tanh(z: Pair) -> Pair:
    a = 2.0 * z[0]
    b = 2.0 * z[1]
    d = cosh(a) + ieee_cos(b)
    return (ieee_div(sinh(a), d), ieee_div(ieee_sin(b), d))


def coth(z: Pair) -> Pair:
    a = 2.0 * z[0]
    b = 2.0 * z[1]
    d = cosh(a) - ieee_cos(b)
    return (ieee_div(sinh(a), d), ieee_div(-ieee_sin(b), d))


def sech(z: Pair) -> Pair:
    re, im = z
    d = ieee_cos(2.0 * im) + cosh(2.0 * re)
    return (
        ieee_div(2.0 * cosh(re) * ieee_cos(im), d),
        ieee_div(-2.0 * sinh(re) * ieee_sin(im), d),
    )


def csch(z: Pair) -> Pair:
    re, im = z
    d = ieee_cos(2.0 * im) - cosh(2.0 * re)
    return (
        ieee_div(-2.0 * sinh(re) * ieee_cos(im), d),
        ieee_div(2.0 * cosh(re) * ieee_sin(im), d),
    )


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ
# =============================================================================


def _reciprocal(z: Pair) -> Pair:
    """
    1 / z покомпонентно через conj(z) / |z|^2.

    При |z|^2 == 0 (underflow или ноль) — явные ±inf для ненулевых компонент.
    """
    re, im = z
    d = re * re + im * im
    if d != 0.0:
        return (re / d, -im / d)
    return (
        ieee_div(re, 0.0) if re != 0.0 else 0.0,
        ieee_div(-im, 0.0) if im != 0.0 else 0.0,
    )


def _rotate_ccw(z: Pair) -> Pair:
    """i * z"""
    return (-z[1], z[0])


def _rotate_cw(z: Pair) -> Pair:
    """-i * z"""
    return (z[1], -z[0])


def _asin_log_term(z: Pair) -> Pair:
    """log(iz + sqrt(1 - z^2)) — общий множитель asin и acos."""
    re, im = z
    t1 = sqrt((im * im - re * re + 1.0, -2.0 * re * im))
    return log((t1[0] - im, t1[1] + re))


# =============================================================================
# ОБРАТНЫЕ КРУГОВЫЕ
# =============================================================================


def asin(z: Pair) -> Pair:
    t2 = _asin_log_term(z)
    return (t2[1], -t2[0])


def acos(z: Pair) -> Pair:
    t2 = _asin_log_term(z)
    return (HALF_PI - t2[1], t2[0])


def atan(z: Pair) -> Pair:
    re, im = z

    if re == 0.0:
        if im == 1.0:
            return (0.0, math.inf)
        if im == -1.0:
            return (0.0, -math.inf)

    d = re * re + (1.0 - im) * (1.0 - im)
    t1 = log((
        ieee_div(1.0 - im * im - re * re, d),
        ieee_div(-2.0 * re, d),
    ))
    return (-0.5 * t1[1], 0.5 * t1[0])


def acot(z: Pair) -> Pair:
    re, im = z
    if im == 0.0:
        return (math.atan2(1.0, re), 0.0)
    return atan(_reciprocal(z))


def asec(z: Pair) -> Pair:
    re, im = z
    if re == 0.0 and im == 0.0:
        return (0.0, math.inf)
    return acos(_reciprocal(z))


def acsc(z: Pair) -> Pair:
    re, im = z
    if re == 0.0 and im == 0.0:
        return (HALF_PI, math.inf)
    return asin(_reciprocal(z))


# =============================================================================
# ОБРАТНЫЕ ГИПЕРБОЛИЧЕСКИЕ
# =============================================================================


def asinh(z: Pair) -> Pair:
    """asinh(z) = i asin(-iz); повёрнутый аргумент — новая пара."""
    return _rotate_ccw(asin(_rotate_cw(z)))


def acosh(z: Pair) -> Pair:
    """acosh(z) = ±i acos(z), знак выбирается так, чтобы Re >= 0."""
    res = acos(z)
    if res[1] <= 0.0:
        return _rotate_ccw(res)
    return _rotate_cw(res)


def atanh(z: Pair) -> Pair:
    """atanh(z) = log((1 + z) / (1 - z)) / 2"""
    re, im = z

    no_im = re > 1.0 and im == 0.0
    one_minus = 1.0 - re
    one_plus = 1.0 + re
    d = one_minus * one_minus + im * im

    if d != 0.0:
        x = (
            (one_plus * one_minus - im * im) / d,
            (im * one_minus + one_plus * im) / d,
        )
    else:
        x = (
            ieee_div(re, 0.0) if re != -1.0 else 0.0,
            ieee_div(im, 0.0) if im != 0.0 else 0.0,
        )

    result_im = math.atan2(x[1], x[0]) / 2.0
    if no_im:
        result_im = -result_im
    return (log_hypot(x[0], x[1]) / 2.0, result_im)


def acoth(z: Pair) -> Pair:
    re, im = z
    if re == 0.0 and im == 0.0:
        return (0.0, HALF_PI)
    return atanh(_reciprocal(z))


def acsch(z: Pair) -> Pair:
    re, im = z
    if im == 0.0:
        if re == 0.0:
            return (math.inf, 0.0)
        return (math.asinh(1.0 / re), 0.0)
    return asinh(_reciprocal(z))


def asech(z: Pair) -> Pair:
    re, im = z
    if re == 0.0 and im == 0.0:
        return (math.inf, math.inf)
    return acosh(_reciprocal(z))

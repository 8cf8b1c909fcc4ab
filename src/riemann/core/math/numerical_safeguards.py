"""
Numerical Safeguards — Stability Kernel

Модуль обеспечивает численную устойчивость всех операций над комплексными числами:
- hypot / log_hypot без переполнения для компонент вплоть до предела double
- cosm1 без катастрофического сокращения вблизи нуля
- cosh / sinh для вещественного аргумента
- IEEE-754 обёртки над math: там, где math бросает исключение,
  IEEE-арифметика возвращает ±inf или NaN

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не бросает исключение на float входе
2. Переполнение → ±inf, domain error → NaN, x/0 → ±inf, 0/0 → NaN
3. Все операции детерминированы и воспроизводимы
"""

import math
import sys
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность для приближённого равенства (Complex.equals)
# и для округления компонент к нулю при форматировании
EPSILON: Final[float] = 1e-15

# Граница прямого вычисления sqrt(x^2 + y^2)
# Выше неё квадрат компоненты может переполниться
HYPOT_DIRECT_LIMIT: Final[float] = 3000.0

# Граница применения ряда Тейлора в cosm1: |x| <= pi/4
COSM1_TAYLOR_LIMIT: Final[float] = math.pi / 4

# Наименьший нормализованный double: ниже сумма квадратов теряет точность
# или обращается в 0
NORMAL_FLOOR: Final[float] = sys.float_info.min


# =============================================================================
# IEEE-754 ОБЁРТКИ
# =============================================================================


def ieee_div(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754.

    Python бросает ZeroDivisionError на x / 0.0, IEEE возвращает ±inf.
    Знак бесконечности учитывает знак нуля в знаменателе.

    Examples:
        >>> ieee_div(1.0, 0.0)
        inf
        >>> ieee_div(-1.0, 0.0)
        -inf
        >>> ieee_div(1.0, -0.0)
        -inf
        >>> math.isnan(ieee_div(0.0, 0.0))
        True
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def ieee_exp(x: float) -> float:
    """exp(x), переполнение → +inf."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def ieee_expm1(x: float) -> float:
    """expm1(x), переполнение → +inf."""
    try:
        return math.expm1(x)
    except OverflowError:
        return math.inf


def ieee_log(x: float) -> float:
    """
    Натуральный логарифм: log(0) = -inf, log(x < 0) = NaN.

    Examples:
        >>> ieee_log(0.0)
        -inf
        >>> math.isnan(ieee_log(-1.0))
        True
    """
    if x == 0.0:
        return -math.inf
    if x < 0.0:
        return math.nan
    return math.log(x)


def ieee_sqrt(x: float) -> float:
    """Квадратный корень: sqrt(x < 0) = NaN."""
    if x < 0.0:
        return math.nan
    return math.sqrt(x)


def ieee_cos(x: float) -> float:
    """cos(±inf) = NaN вместо ValueError."""
    if math.isinf(x):
        return math.nan
    return math.cos(x)


def ieee_sin(x: float) -> float:
    """sin(±inf) = NaN вместо ValueError."""
    if math.isinf(x):
        return math.nan
    return math.sin(x)


def _is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and y.is_integer() and int(y) % 2 == 1


def ieee_pow(base: float, exponent: float) -> float:
    """
    Вещественная степень с семантикой IEEE-754.

    math.pow бросает ValueError для 0 ** (y < 0) и отрицательного основания
    в нецелой степени, OverflowError при переполнении.

    Returns:
        - 0 ** (y < 0) → ±inf (знак сохраняется для -0 в нечётной степени)
        - (x < 0) ** нецелое → NaN
        - переполнение → ±inf (минус для отрицательного основания в нечётной степени)

    Examples:
        >>> ieee_pow(0.0, -1.0)
        inf
        >>> ieee_pow(-10.0, 1001.0)
        -inf
        >>> math.isnan(ieee_pow(-8.0, 1.0 / 3.0))
        True
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0.0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0.0:
            if math.copysign(1.0, base) < 0.0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
        return math.nan


def ieee_floor(x: float) -> float:
    """floor без исключений: inf и NaN возвращаются как есть."""
    if not math.isfinite(x):
        return x
    return float(math.floor(x))


def ieee_ceil(x: float) -> float:
    """ceil без исключений: inf и NaN возвращаются как есть."""
    if not math.isfinite(x):
        return x
    return float(math.ceil(x))


def ieee_round(x: float) -> float:
    """
    Округление к ближайшему целому, половины — в сторону +inf.

    В отличие от встроенного round() (banker's rounding):
        >>> ieee_round(2.5)
        3.0
        >>> ieee_round(-2.5)
        -2.0
    """
    if not math.isfinite(x):
        return x
    return float(math.floor(x + 0.5))


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ ВЕЩЕСТВЕННОГО АРГУМЕНТА
# =============================================================================


def cosh(x: float) -> float:
    """cosh(x) = (e^x + e^-x) / 2, переполнение → +inf."""
    return (ieee_exp(x) + ieee_exp(-x)) * 0.5


def sinh(x: float) -> float:
    """sinh(x) = (e^x - e^-x) / 2, переполнение → ±inf."""
    return (ieee_exp(x) - ieee_exp(-x)) * 0.5


# =============================================================================
# МОДУЛЬ И ЛОГАРИФМ МОДУЛЯ
# =============================================================================


def hypot(x: float, y: float) -> float:
    """
    Модуль вектора (x, y) без переполнения.

    Алгоритм:
        |x|, |y| < HYPOT_DIRECT_LIMIT и x^2 + y^2 >= NORMAL_FLOOR → sqrt(x^2 + y^2)
        иначе: a = max(|x|, |y|), b = min/max → a * sqrt(1 + b^2)

    Бесконечная компонента даёт +inf даже в паре с NaN (как hypot в IEEE-754).

    Examples:
        >>> hypot(3.0, 4.0)
        5.0
        >>> hypot(3e200, 4e200)
        5e+200
    """
    if math.isinf(x) or math.isinf(y):
        return math.inf

    a = abs(x)
    b = abs(y)

    if a < HYPOT_DIRECT_LIMIT and b < HYPOT_DIRECT_LIMIT:
        sum_sq = a * a + b * b
        if sum_sq >= NORMAL_FLOOR or (a == 0.0 and b == 0.0):
            return math.sqrt(sum_sq)

    if a < b:
        a = b
        b = ieee_div(x, y)
    else:
        b = ieee_div(y, x)

    return a * math.sqrt(1.0 + b * b)


def log_hypot(a: float, b: float) -> float:
    """
    Численно устойчивое log(sqrt(a^2 + b^2)).

    Алгоритм:
        a == 0 → log|b|
        b == 0 → log|a|
        |a|, |b| < HYPOT_DIRECT_LIMIT → 0.5 * log(a^2 + b^2)
        a^2 + b^2 < NORMAL_FLOOR → log(m) + 0.5 * log1p((n / m)^2), m = max, n = min
        иначе → log(a / cos(atan2(b, a)))  (cos(atan(y/x)) = x / sqrt(x^2 + y^2))

    Тождество через atan2 не требует вычисления a^2 + b^2, поэтому не
    переполняется. На бесконечной компоненте оно вырождается, поэтому
    бесконечность обрабатывается отдельно.

    Examples:
        >>> log_hypot(3.0, 4.0) == math.log(5.0)
        True
        >>> log_hypot(0.0, 0.0)
        -inf
        >>> abs(log_hypot(1e-200, 1e-200) - math.log(math.hypot(1e-200, 1e-200))) < 1e-12
        True
    """
    abs_a = abs(a)
    abs_b = abs(b)

    if a == 0.0:
        return ieee_log(abs_b)

    if b == 0.0:
        return ieee_log(abs_a)

    if abs_a < HYPOT_DIRECT_LIMIT and abs_b < HYPOT_DIRECT_LIMIT:
        sum_sq = a * a + b * b
        if sum_sq >= NORMAL_FLOOR:
            return math.log(sum_sq) * 0.5

        big = max(abs_a, abs_b)
        ratio = min(abs_a, abs_b) / big
        return math.log(big) + 0.5 * math.log1p(ratio * ratio)

    if math.isinf(a) or math.isinf(b):
        if math.isnan(a) or math.isnan(b):
            return math.nan
        return math.inf

    return ieee_log(ieee_div(a, math.cos(math.atan2(b, a))))


# =============================================================================
# COS(X) - 1
# =============================================================================

# Коэффициенты ряда Тейлора cos(x) - 1 по степеням x^2, от старшего к младшему:
# 1/16!, -1/14!, 1/12!, -1/10!, 1/8!, -1/6!, 1/4!, -1/2!
_COSM1_COEFFICIENTS: Final[tuple[float, ...]] = (
    1.0 / 20922789888000.0,
    -1.0 / 87178291200.0,
    1.0 / 479001600.0,
    -1.0 / 3628800.0,
    1.0 / 40320.0,
    -1.0 / 720.0,
    1.0 / 24.0,
    -1.0 / 2.0,
)


def cosm1(x: float) -> float:
    """
    cos(x) - 1 без катастрофического сокращения вблизи нуля.

    Для |x| > pi/4 сокращения нет, используется cos(x) - 1 напрямую.
    Иначе — 8 членов ряда Тейлора в форме Горнера по x^2.

    Examples:
        >>> cosm1(0.0)
        0.0
        >>> abs(cosm1(1e-8) + 5e-17) < 1e-30
        True
    """
    if x < -COSM1_TAYLOR_LIMIT or x > COSM1_TAYLOR_LIMIT:
        return ieee_cos(x) - 1.0

    xx = x * x
    acc = 0.0
    for coefficient in _COSM1_COEFFICIENTS:
        acc = acc * xx + coefficient
    return acc * xx

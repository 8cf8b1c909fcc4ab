"""
Extended-Plane Classifier — полюса сферы Римана

Каждое значение (re, im) относится ровно к одному классу Pole:
    NAN      — хотя бы одна компонента NaN
    INFINITY — не NaN, хотя бы одна компонента ±inf (единственная бесконечность,
               направление не сохраняется)
    ZERO     — re == 0 и im == 0 (знак нуля игнорируется)
    FINITE   — обе компоненты конечны, не ноль

Порядок проверки: NaN → бесконечность → ноль → конечное.

Таблицы правил (ADD_RULES, MUL_RULES, ...) фиксируют результат бинарной
операции по паре классов операндов ДО вычисления формулы. Формула
вычисляется только для исхода PoleOutcome.COMPUTE.
"""

import math
from enum import Enum
from typing import Final, Mapping


# =============================================================================
# ENUMS
# =============================================================================


class Pole(str, Enum):
    """Класс значения на расширенной комплексной плоскости"""

    NAN = "NAN"
    INFINITY = "INFINITY"
    ZERO = "ZERO"
    FINITE = "FINITE"


class PoleOutcome(str, Enum):
    """Исход разрешения полюсов для операции"""

    NAN = "NAN"
    INFINITY = "INFINITY"
    ZERO = "ZERO"
    ONE = "ONE"
    COMPUTE = "COMPUTE"


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def classify(re: float, im: float) -> Pole:
    """
    Классификация пары (re, im).

    Examples:
        >>> classify(0.0, -0.0)
        <Pole.ZERO: 'ZERO'>
        >>> classify(math.inf, math.nan)
        <Pole.NAN: 'NAN'>
        >>> classify(-math.inf, 1.0)
        <Pole.INFINITY: 'INFINITY'>
    """
    if math.isnan(re) or math.isnan(im):
        return Pole.NAN
    if math.isinf(re) or math.isinf(im):
        return Pole.INFINITY
    if re == 0.0 and im == 0.0:
        return Pole.ZERO
    return Pole.FINITE


def is_nan(re: float, im: float) -> bool:
    return classify(re, im) is Pole.NAN


def is_infinite(re: float, im: float) -> bool:
    return classify(re, im) is Pole.INFINITY


def is_zero(re: float, im: float) -> bool:
    return classify(re, im) is Pole.ZERO


def is_finite(re: float, im: float) -> bool:
    """Конечное значение, включая ноль."""
    return classify(re, im) in (Pole.ZERO, Pole.FINITE)


# =============================================================================
# ТАБЛИЦЫ ПРАВИЛ
# =============================================================================

_Z = Pole.ZERO
_F = Pole.FINITE
_INF = Pole.INFINITY
_NAN = Pole.NAN

_ALL_POLES: Final[tuple[Pole, ...]] = (_Z, _F, _INF, _NAN)


def _with_nan_absorbing(
    rules: Mapping[tuple[Pole, Pole], PoleOutcome],
) -> dict[tuple[Pole, Pole], PoleOutcome]:
    """Дополняет таблицу: любой NaN операнд → NAN."""
    table = dict(rules)
    for pole in _ALL_POLES:
        table.setdefault((_NAN, pole), PoleOutcome.NAN)
        table.setdefault((pole, _NAN), PoleOutcome.NAN)
    return table


# inf + inf = NaN, inf + z = inf
ADD_RULES: Final[dict[tuple[Pole, Pole], PoleOutcome]] = _with_nan_absorbing({
    (_Z, _Z): PoleOutcome.COMPUTE,
    (_Z, _F): PoleOutcome.COMPUTE,
    (_F, _Z): PoleOutcome.COMPUTE,
    (_F, _F): PoleOutcome.COMPUTE,
    (_INF, _INF): PoleOutcome.NAN,
    (_INF, _Z): PoleOutcome.INFINITY,
    (_INF, _F): PoleOutcome.INFINITY,
    (_Z, _INF): PoleOutcome.INFINITY,
    (_F, _INF): PoleOutcome.INFINITY,
})

# inf - inf = NaN, inf - z = z - inf = inf
SUB_RULES: Final[dict[tuple[Pole, Pole], PoleOutcome]] = dict(ADD_RULES)

# inf * 0 = 0 * inf = NaN, inf * z = inf
MUL_RULES: Final[dict[tuple[Pole, Pole], PoleOutcome]] = _with_nan_absorbing({
    (_Z, _Z): PoleOutcome.COMPUTE,
    (_Z, _F): PoleOutcome.COMPUTE,
    (_F, _Z): PoleOutcome.COMPUTE,
    (_F, _F): PoleOutcome.COMPUTE,
    (_INF, _Z): PoleOutcome.NAN,
    (_Z, _INF): PoleOutcome.NAN,
    (_INF, _F): PoleOutcome.INFINITY,
    (_F, _INF): PoleOutcome.INFINITY,
    (_INF, _INF): PoleOutcome.INFINITY,
})

# 0 / 0 = inf / inf = NaN, inf / z = z / 0 = inf, 0 / inf = z / inf = 0
DIV_RULES: Final[dict[tuple[Pole, Pole], PoleOutcome]] = _with_nan_absorbing({
    (_Z, _Z): PoleOutcome.NAN,
    (_INF, _INF): PoleOutcome.NAN,
    (_INF, _Z): PoleOutcome.INFINITY,
    (_INF, _F): PoleOutcome.INFINITY,
    (_F, _Z): PoleOutcome.INFINITY,
    (_Z, _INF): PoleOutcome.ZERO,
    (_F, _INF): PoleOutcome.ZERO,
    (_Z, _F): PoleOutcome.COMPUTE,
    (_F, _F): PoleOutcome.COMPUTE,
})

# z ** 0 = 1 для любого основания, включая 0 и NaN
POW_RULES: Final[dict[tuple[Pole, Pole], PoleOutcome]] = _with_nan_absorbing({
    **{(base, _Z): PoleOutcome.ONE for base in _ALL_POLES},
    **{
        (base, exponent): PoleOutcome.COMPUTE
        for base in (_Z, _F, _INF)
        for exponent in (_F, _INF)
    },
})

# 1 / 0 = inf, 1 / inf = 0
INVERSE_RULES: Final[dict[Pole, PoleOutcome]] = {
    _Z: PoleOutcome.INFINITY,
    _INF: PoleOutcome.ZERO,
    _NAN: PoleOutcome.NAN,
    _F: PoleOutcome.COMPUTE,
}


def resolve(
    rules: Mapping[tuple[Pole, Pole], PoleOutcome],
    left: Pole,
    right: Pole,
) -> PoleOutcome:
    """
    Исход бинарной операции по классам операндов.

    Raises:
        KeyError: если таблица не покрывает пару (таблицы выше полные)
    """
    return rules[(left, right)]

"""
Complex — значение на расширенной комплексной плоскости

Immutable Pydantic модель (re, im). Каждый метод возвращает НОВОЕ значение,
получатель никогда не изменяется; константы ZERO, ONE, I, PI, E, INFINITY,
NAN безопасно разделять между потоками.

Два канала ошибок:
1. MalformedInputError — вход нельзя интерпретировать (бросается)
2. Математически неопределённый результат (0/0, inf - inf, inf * 0) — NAN
   (возвращается как значение, не бросается)

Вычисления делегируются чистым функциям над парами (re, im):
    riemann.core.math.arithmetic     — add, sub, mul, div, pow, sqrt, inverse
    riemann.core.math.transcendental — exp, log, круговые, гиперболические
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Final, Optional

from pydantic import BaseModel, Field, ValidationError

from riemann.core.contracts import validate_complex_value
from riemann.core.domain.inputs import (
    InputKind,
    MalformedInputError,
    normalize,
    to_input,
)
from riemann.core.math import arithmetic, transcendental
from riemann.core.math.arithmetic import Pair
from riemann.core.math.numerical_safeguards import (
    EPSILON,
    hypot,
    ieee_ceil,
    ieee_div,
    ieee_floor,
    ieee_pow,
    ieee_round,
)
from riemann.core.math.poles import Pole, classify


def _is_real(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _format_number(x: float) -> str:
    """Целые значения без ".0": 1.0 → "1", 2.5 → "2.5"."""
    if x.is_integer() and abs(x) < 1e21:
        return str(int(x))
    return repr(x)


class Complex(BaseModel):
    """
    Комплексное число re + im * i.

    Complex(3, 4) — декартова пара, компоненты строго вещественные числа
    (bool и строки отклоняются). Единственный не-числовой аргумент
    проходит нормализатор: Complex("3+4i"), Complex(INFINITY), Complex(3 + 4j).

    Raises:
        MalformedInputError: если вход нельзя интерпретировать
    """

    re: float = Field(0.0, description="Вещественная часть")
    im: float = Field(0.0, description="Мнимая часть")

    model_config = {"frozen": True, "strict": True}

    def __init__(self, re: Any = 0.0, im: Optional[float] = None, **data: Any):
        if im is None and not _is_real(re):
            re, im = normalize(to_input(re))
        elif im is None:
            im = 0.0

        try:
            super().__init__(re=re, im=im, **data)
        except ValidationError as e:
            raise MalformedInputError(
                (re, im), f"non-numeric component: {e.errors()[0]['msg']}"
            ) from e

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, raw: Any = None) -> "Complex":
        """
        Построение из любой поддерживаемой формы.

        Raises:
            MalformedInputError: если форма не поддерживается
        """
        re, im = normalize(to_input(raw))
        return cls(re, im)

    @classmethod
    def from_pair(cls, pair: Pair) -> "Complex":
        return cls(pair[0], pair[1])

    @classmethod
    def from_polar(cls, r: float, phi: float) -> "Complex":
        return cls.parse({"r": r, "phi": phi})

    @property
    def pair(self) -> Pair:
        return (self.re, self.im)

    def clone(self) -> "Complex":
        return Complex(self.re, self.im)

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    @property
    def pole(self) -> Pole:
        return classify(self.re, self.im)

    def is_nan(self) -> bool:
        return self.pole is Pole.NAN

    def is_zero(self) -> bool:
        return self.pole is Pole.ZERO

    def is_finite(self) -> bool:
        return self.pole in (Pole.ZERO, Pole.FINITE)

    def is_infinite(self) -> bool:
        return self.pole is Pole.INFINITY

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _binary(
        self, fn: Callable[[Pair, Pair], Pair], other: Any, im: Optional[float]
    ) -> "Complex":
        return Complex.from_pair(fn(self.pair, _coerce(other, im)))

    def add(self, other: Any, im: Optional[float] = None) -> "Complex":
        return self._binary(arithmetic.add, other, im)

    def sub(self, other: Any, im: Optional[float] = None) -> "Complex":
        return self._binary(arithmetic.sub, other, im)

    def mul(self, other: Any, im: Optional[float] = None) -> "Complex":
        return self._binary(arithmetic.mul, other, im)

    def div(self, other: Any, im: Optional[float] = None) -> "Complex":
        return self._binary(arithmetic.div, other, im)

    def pow(self, other: Any, im: Optional[float] = None) -> "Complex":
        return self._binary(arithmetic.pow_, other, im)

    def sqrt(self) -> "Complex":
        return Complex.from_pair(arithmetic.sqrt(self.pair))

    def inverse(self) -> "Complex":
        return Complex.from_pair(arithmetic.inverse(self.pair))

    def conjugate(self) -> "Complex":
        return Complex.from_pair(arithmetic.conjugate(self.pair))

    def neg(self) -> "Complex":
        return Complex.from_pair(arithmetic.neg(self.pair))

    def abs(self) -> float:
        """Модуль |z| без переполнения."""
        return hypot(self.re, self.im)

    def arg(self) -> float:
        """Аргумент atan2(im, re) в (-pi, pi]."""
        return math.atan2(self.im, self.re)

    def sign(self) -> "Complex":
        """z / |z|; для нуля — NaN."""
        magnitude = self.abs()
        return Complex(ieee_div(self.re, magnitude), ieee_div(self.im, magnitude))

    # -------------------------------------------------------------------------
    # Transcendental
    # -------------------------------------------------------------------------

    def _unary(self, fn: Callable[[Pair], Pair]) -> "Complex":
        return Complex.from_pair(fn(self.pair))

    def exp(self) -> "Complex":
        return self._unary(transcendental.exp)

    def expm1(self) -> "Complex":
        return self._unary(transcendental.expm1)

    def log(self) -> "Complex":
        return self._unary(transcendental.log)

    def sin(self) -> "Complex":
        return self._unary(transcendental.sin)

    def cos(self) -> "Complex":
        return self._unary(transcendental.cos)

    def tan(self) -> "Complex":
        return self._unary(transcendental.tan)

    def cot(self) -> "Complex":
        return self._unary(transcendental.cot)

    def sec(self) -> "Complex":
        return self._unary(transcendental.sec)

    def csc(self) -> "Complex":
        return self._unary(transcendental.csc)

    def asin(self) -> "Complex":
        return self._unary(transcendental.asin)

    def acos(self) -> "Complex":
        return self._unary(transcendental.acos)

    def atan(self) -> "Complex":
        return self._unary(transcendental.atan)

    def acot(self) -> "Complex":
        return self._unary(transcendental.acot)

    def asec(self) -> "Complex":
        return self._unary(transcendental.asec)

    def acsc(self) -> "Complex":
        return self._unary(transcendental.acsc)

    def sinh(self) -> "Complex":
        return self._unary(transcendental.sinh_)

    def cosh(self) -> "Complex":
        return self._unary(transcendental.cosh_)

    def tanh(self) -> "Complex":
        return self._unary(transcendental.tanh)

    def coth(self) -> "Complex":
        return self._unary(transcendental.coth)

    def sech(self) -> "Complex":
        return self._unary(transcendental.sech)

    def csch(self) -> "Complex":
        return self._unary(transcendental.csch)

    def asinh(self) -> "Complex":
        return self._unary(transcendental.asinh)

    def acosh(self) -> "Complex":
        return self._unary(transcendental.acosh)

    def atanh(self) -> "Complex":
        return self._unary(transcendental.atanh)

    def acoth(self) -> "Complex":
        return self._unary(transcendental.acoth)

    def acsch(self) -> "Complex":
        return self._unary(transcendental.acsch)

    def asech(self) -> "Complex":
        return self._unary(transcendental.asech)

    # -------------------------------------------------------------------------
    # Rounding
    # -------------------------------------------------------------------------

    def _rounded(self, fn: Callable[[float], float], places: int) -> "Complex":
        scale = ieee_pow(10.0, places)
        return Complex(
            ieee_div(fn(self.re * scale), scale),
            ieee_div(fn(self.im * scale), scale),
        )

    def ceil(self, places: int = 0) -> "Complex":
        return self._rounded(ieee_ceil, places)

    def floor(self, places: int = 0) -> "Complex":
        return self._rounded(ieee_floor, places)

    def round(self, places: int = 0) -> "Complex":
        """Округление половин в сторону +inf, как ieee_round."""
        return self._rounded(ieee_round, places)

    # -------------------------------------------------------------------------
    # Comparison & presentation
    # -------------------------------------------------------------------------

    def equals(self, other: Any, im: Optional[float] = None) -> bool:
        """
        Приближённое равенство: |dre| <= EPSILON и |dim| <= EPSILON.

        Это проверка числовой толерантности, а не идентичности полюсов:
        INFINITY.equals(INFINITY) is False (разности — NaN).
        """
        re, im = _coerce(other, im)
        return abs(re - self.re) <= EPSILON and abs(im - self.im) <= EPSILON

    def to_string(self) -> str:
        """
        Каноническое текстовое представление.

        Examples:
            Complex(1, 0)  → "1"
            Complex(0, 1)  → "i"
            Complex(1, -1) → "1 - i"
            Complex(3, 4)  → "3 + 4i"
        """
        if self.is_nan():
            return "NaN"

        if self.is_infinite():
            return "Infinity"

        re = 0.0 if abs(self.re) < EPSILON else self.re
        im = 0.0 if abs(self.im) < EPSILON else self.im

        if im == 0.0:
            return _format_number(re)

        ret = ""
        if re != 0.0:
            ret += _format_number(re)
            ret += " - " if im < 0.0 else " + "
            im = abs(im)
        elif im < 0.0:
            ret += "-"
            im = -im

        if im != 1.0:
            ret += _format_number(im)
        return ret + "i"

    def to_vector(self) -> list[float]:
        return [self.re, self.im]

    def value_of(self) -> Optional[float]:
        """re для вещественного значения, иначе None (не сравнимо со скаляром)."""
        if self.im == 0.0:
            return self.re
        return None

    def to_dict(self) -> dict[str, float]:
        """Сериализованное представление, проверенное контрактом complex_value."""
        data = self.model_dump()
        validate_complex_value(data)
        return data

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Complex(re={self.re!r}, im={self.im!r})"

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __abs__(self) -> float:
        return self.abs()

    def __neg__(self) -> "Complex":
        return self.neg()

    def __pos__(self) -> "Complex":
        return self.clone()

    def __add__(self, other: Any) -> "Complex":
        return self.add(other)

    def __radd__(self, other: Any) -> "Complex":
        return Complex.parse(other).add(self)

    def __sub__(self, other: Any) -> "Complex":
        return self.sub(other)

    def __rsub__(self, other: Any) -> "Complex":
        return Complex.parse(other).sub(self)

    def __mul__(self, other: Any) -> "Complex":
        return self.mul(other)

    def __rmul__(self, other: Any) -> "Complex":
        return Complex.parse(other).mul(self)

    def __truediv__(self, other: Any) -> "Complex":
        return self.div(other)

    def __rtruediv__(self, other: Any) -> "Complex":
        return Complex.parse(other).div(self)

    def __pow__(self, other: Any) -> "Complex":
        return self.pow(other)

    def __rpow__(self, other: Any) -> "Complex":
        return Complex.parse(other).pow(self)


def _coerce(other: Any, im: Optional[float] = None) -> Pair:
    """
    Пара (re, im) для аргумента бинарной операции.

    С явным im аргумент читается как декартова пара: z.add(1, 2) == z.add(1 + 2j).
    """
    if im is not None:
        return normalize(to_input({"re": other, "im": im}))
    if isinstance(other, Complex):
        return other.pair
    return normalize(to_input(other))


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[Complex] = Complex(0.0, 0.0)
ONE: Final[Complex] = Complex(1.0, 0.0)
I: Final[Complex] = Complex(0.0, 1.0)
PI: Final[Complex] = Complex(math.pi, 0.0)
E: Final[Complex] = Complex(math.e, 0.0)
INFINITY: Final[Complex] = Complex(math.inf, math.inf)
NAN: Final[Complex] = Complex(math.nan, math.nan)


# =============================================================================
# PARSE RESULT
# =============================================================================


@dataclass(frozen=True)
class ParseResult:
    """
    Результат разбора без исключения.

    ok=True и value — успешно нормализованное значение (может быть NaN,
    если NaN передан явно); ok=False и error — ошибка формы входа.
    """

    ok: bool
    value: Optional[Complex]
    kind: Optional[InputKind]
    error: str


def parse_complex(raw: Any = None) -> Complex:
    """
    Raises:
        MalformedInputError: если форма не поддерживается
    """
    return Complex.parse(raw)


def try_parse_complex(raw: Any = None) -> ParseResult:
    """Разбор с явным результатом вместо исключения."""
    try:
        variant = to_input(raw)
        re, im = normalize(variant)
    except MalformedInputError as e:
        return ParseResult(ok=False, value=None, kind=None, error=e.reason)

    return ParseResult(ok=True, value=Complex(re, im), kind=variant.kind, error="")


__all__ = [
    "Complex",
    "ParseResult",
    "parse_complex",
    "try_parse_complex",
    "ZERO",
    "ONE",
    "I",
    "PI",
    "E",
    "INFINITY",
    "NAN",
]

"""
riemann — комплексная арифметика на расширенной комплексной плоскости

    >>> from riemann import Complex
    >>> Complex.parse("3+4i").abs()
    5.0
    >>> str(Complex(1, 0).div(Complex(0, 0)))
    'Infinity'
"""

from riemann.core.domain import (
    E,
    I,
    INFINITY,
    NAN,
    ONE,
    PI,
    ZERO,
    Complex,
    InputKind,
    MalformedInputError,
    ParseResult,
    parse_complex,
    try_parse_complex,
)
from riemann.core.math import EPSILON, Pole

__version__ = "0.1.0"

__all__ = [
    "Complex",
    "ParseResult",
    "parse_complex",
    "try_parse_complex",
    "MalformedInputError",
    "InputKind",
    "Pole",
    "ZERO",
    "ONE",
    "I",
    "PI",
    "E",
    "INFINITY",
    "NAN",
    "EPSILON",
]

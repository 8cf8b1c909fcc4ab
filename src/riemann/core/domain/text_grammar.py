"""
Text grammar — разбор строкового представления комплексного числа

Токены (жадно, слева направо):
    число  : \\d+\\.?\\d*e[+-]?\\d+ | \\d+\\.?\\d* | \\.\\d+
    знак   : + | -
    мнимая : i | I
    пробел : пропускается
    прочее : одиночный символ → ошибка разбора

Правила:
- Цепочка знаков накапливает состояние; у первого слагаемого неявный "+"
- Число, за которым сразу следует i/I, прибавляется к мнимой части,
  иначе — к вещественной
- i/I, за которым следует число, прибавляет это число к мнимой части,
  иначе ±1
- Слагаемое без знака перед ним ("3 4"), незавершённый знак в конце,
  пустая строка или посторонний символ → TextGrammarError

Examples:
    "3+4i"   → (3, 4)
    "-i"     → (0, -1)
    "1e3-2I" → (1000, -2)
    "i2"     → (0, 2)
"""

import re
from typing import Final

_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\d+\.?\d*e[+-]?\d+|\d+\.?\d*|\.\d+|.", re.DOTALL
)
_NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\d+\.?\d*e[+-]?\d+|\d+\.?\d*|\.\d+"
)
_IMAGINARY_UNITS: Final[frozenset[str]] = frozenset({"i", "I"})


class TextGrammarError(ValueError):
    """Строка не соответствует грамматике комплексного числа."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid complex expression {text!r}: {reason}")


def tokenize(text: str) -> list[str]:
    """Разбиение строки на токены; каждый символ попадает ровно в один токен."""
    return _TOKEN_PATTERN.findall(text)


def _is_number(token: str | None) -> bool:
    return token is not None and _NUMBER_PATTERN.fullmatch(token) is not None


def parse_text(text: str) -> tuple[float, float]:
    """
    Разбор строки в пару (re, im).

    Raises:
        TextGrammarError: если строка не соответствует грамматике
    """
    tokens = tokenize(text)
    if not tokens:
        raise TextGrammarError(text, "empty expression")

    re_part = 0.0
    im_part = 0.0
    plus = 1
    minus = 0

    i = 0
    while i < len(tokens):
        token = tokens[i]
        following = tokens[i + 1] if i + 1 < len(tokens) else None

        if token.isspace():
            pass
        elif token == "+":
            plus += 1
        elif token == "-":
            minus += 1
        elif token in _IMAGINARY_UNITS:
            if plus + minus == 0:
                raise TextGrammarError(text, f"missing sign before {token!r}")

            sign = -1.0 if minus % 2 else 1.0
            if _is_number(following):
                im_part += sign * float(following)
                i += 1
            else:
                im_part += sign
            plus = minus = 0
        else:
            if plus + minus == 0:
                raise TextGrammarError(text, f"missing sign before {token!r}")
            if not _is_number(token):
                raise TextGrammarError(text, f"unexpected token {token!r}")

            sign = -1.0 if minus % 2 else 1.0
            if following in _IMAGINARY_UNITS:
                im_part += sign * float(token)
                i += 1
            else:
                re_part += sign * float(token)
            plus = minus = 0

        i += 1

    if plus + minus > 0:
        raise TextGrammarError(text, "dangling sign at end of expression")

    return (re_part, im_part)

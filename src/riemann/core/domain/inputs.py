"""
Input Normalizer — входные формы комплексного числа

Любое "комплекснозначное" значение сначала классифицируется в один из
вариантов ComplexInput, затем normalize() приводит его к канонической паре
(re, im). Конструктор Complex и все бинарные операции используют эту пару.

Варианты (в порядке приоритета to_input):
    None                            → CartesianInput(0, 0)
    Complex / builtin complex       → CartesianInput
    mapping {re, im}                → CartesianInput
    mapping {abs, arg} / {r, phi}   → PolarInput
    list / tuple из 2 элементов     → SequenceInput
    int / float (не bool)           → ScalarInput
    str                             → TextInput

Всё остальное — MalformedInputError (ошибка вызывающего, никогда не NaN).
NaN, явно переданный в компоненте, принимается как есть.
"""

import math
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, ClassVar, Union

from jsonschema import ValidationError as ContractViolation
from pydantic import BaseModel, Field, ValidationError

from riemann.core.contracts import validate_complex_input
from riemann.core.domain.text_grammar import TextGrammarError, parse_text
from riemann.core.logging import get_logger
from riemann.core.math.numerical_safeguards import ieee_cos, ieee_sin

logger = get_logger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MalformedInputError(ValueError):
    """
    Вход нельзя интерпретировать как комплексное число.

    Ошибка формы или синтаксиса: неподдерживаемый тип, mapping без полной
    пары ключей, последовательность не из 2 элементов, строка вне грамматики.
    Не путать с NaN-результатом арифметики: тот возвращается как значение.
    """

    def __init__(self, raw: Any, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Cannot interpret {raw!r} as a complex number: {reason}")


# =============================================================================
# ENUMS
# =============================================================================


class InputKind(str, Enum):
    """Форма входного значения"""

    CARTESIAN = "cartesian"
    POLAR = "polar"
    SEQUENCE = "sequence"
    SCALAR = "scalar"
    TEXT = "text"


# =============================================================================
# INPUT VARIANTS
# =============================================================================


class CartesianInput(BaseModel):
    """Декартова форма (re, im)"""

    kind: ClassVar[InputKind] = InputKind.CARTESIAN

    re: float = Field(0.0, description="Вещественная часть")
    im: float = Field(0.0, description="Мнимая часть")

    model_config = {"frozen": True, "strict": True}


class PolarInput(BaseModel):
    """Полярная форма r * (cos(phi) + i sin(phi))"""

    kind: ClassVar[InputKind] = InputKind.POLAR

    r: float = Field(..., description="Модуль")
    phi: float = Field(..., description="Аргумент (радианы)")

    model_config = {"frozen": True, "strict": True}


class SequenceInput(BaseModel):
    """Последовательность [re, im]"""

    kind: ClassVar[InputKind] = InputKind.SEQUENCE

    items: tuple[float, float] = Field(..., description="Компоненты [re, im]")

    model_config = {"frozen": True, "strict": True}


class ScalarInput(BaseModel):
    """Вещественное число (im = 0)"""

    kind: ClassVar[InputKind] = InputKind.SCALAR

    value: float = Field(..., description="Вещественное значение")

    model_config = {"frozen": True, "strict": True}


class TextInput(BaseModel):
    """Строковое выражение вида "3 + 4i" """

    kind: ClassVar[InputKind] = InputKind.TEXT

    text: str = Field(..., description="Выражение")

    model_config = {"frozen": True, "strict": True}


ComplexInput = Union[CartesianInput, PolarInput, SequenceInput, ScalarInput, TextInput]

_INPUT_VARIANTS = (CartesianInput, PolarInput, SequenceInput, ScalarInput, TextInput)


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def _from_mapping(raw: Mapping) -> ComplexInput:
    try:
        validate_complex_input(raw)
    except ContractViolation as e:
        raise MalformedInputError(raw, f"mapping violates complex_input contract: {e.message}") from e

    if "re" in raw and "im" in raw:
        return CartesianInput(re=raw["re"], im=raw["im"])
    if "abs" in raw and "arg" in raw:
        return PolarInput(r=raw["abs"], phi=raw["arg"])
    return PolarInput(r=raw["r"], phi=raw["phi"])


def _classify(raw: Any) -> ComplexInput:
    if raw is None:
        return CartesianInput()

    if isinstance(raw, _INPUT_VARIANTS):
        return raw

    if isinstance(raw, bool):
        raise MalformedInputError(raw, "bool is not a number")

    if isinstance(raw, complex):
        return CartesianInput(re=raw.real, im=raw.imag)

    # Complex из domain.complex_number: читаем компоненты без импорта класса
    if isinstance(raw, BaseModel) and {"re", "im"} <= set(type(raw).model_fields):
        return CartesianInput(re=raw.re, im=raw.im)

    if isinstance(raw, (int, float)):
        return ScalarInput(value=raw)

    if isinstance(raw, str):
        return TextInput(text=raw)

    if isinstance(raw, Mapping):
        return _from_mapping(raw)

    if isinstance(raw, (bytes, bytearray)):
        raise MalformedInputError(raw, "bytes are not a complex number")

    if isinstance(raw, Sequence):
        if len(raw) != 2:
            raise MalformedInputError(raw, f"sequence must have 2 elements, got {len(raw)}")
        return SequenceInput(items=(raw[0], raw[1]))

    raise MalformedInputError(raw, f"unsupported type {type(raw).__name__}")


def to_input(raw: Any) -> ComplexInput:
    """
    Классификация сырого значения в вариант ComplexInput.

    Raises:
        MalformedInputError: если форма не поддерживается или компоненты
            не являются числами
    """
    try:
        return _classify(raw)
    except MalformedInputError as e:
        logger.debug(
            "Rejected complex input %r: %s", raw, e.reason,
            extra={"raw": repr(raw), "reason": e.reason},
        )
        raise
    except ValidationError as e:
        error = MalformedInputError(raw, f"non-numeric component: {e.errors()[0]['msg']}")
        logger.debug(
            "Rejected complex input %r: %s", raw, error.reason,
            extra={"raw": repr(raw), "reason": error.reason},
        )
        raise error from e


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(value: ComplexInput) -> tuple[float, float]:
    """
    Каноническая пара (re, im) для варианта входа.

    Полярная форма с бесконечным модулем и конечным углом даёт полюс
    (inf, inf), а не r * cos(phi) (которое для некоторых phi было бы NaN).

    Raises:
        MalformedInputError: если строка не соответствует грамматике
    """
    if isinstance(value, CartesianInput):
        return (value.re, value.im)

    if isinstance(value, PolarInput):
        if not math.isfinite(value.r) and math.isfinite(value.phi):
            return (math.inf, math.inf)
        return (value.r * ieee_cos(value.phi), value.r * ieee_sin(value.phi))

    if isinstance(value, SequenceInput):
        return value.items

    if isinstance(value, ScalarInput):
        return (value.value, 0.0)

    if isinstance(value, TextInput):
        try:
            return parse_text(value.text)
        except TextGrammarError as e:
            logger.debug(
                "Rejected complex text %r: %s", value.text, e.reason,
                extra={"raw": repr(value.text), "reason": e.reason},
            )
            raise MalformedInputError(value.text, e.reason) from e

    raise MalformedInputError(value, f"unsupported input variant {type(value).__name__}")


def normalize_raw(raw: Any) -> tuple[float, float]:
    """to_input + normalize за один вызов."""
    return normalize(to_input(raw))

"""
Domain models для riemann

Значение Complex, варианты входа нормализатора и текстовая грамматика.
"""

from riemann.core.domain.complex_number import (
    E,
    I,
    INFINITY,
    NAN,
    ONE,
    PI,
    ZERO,
    Complex,
    ParseResult,
    parse_complex,
    try_parse_complex,
)
from riemann.core.domain.inputs import (
    CartesianInput,
    ComplexInput,
    InputKind,
    MalformedInputError,
    PolarInput,
    ScalarInput,
    SequenceInput,
    TextInput,
    normalize,
    normalize_raw,
    to_input,
)
from riemann.core.domain.text_grammar import TextGrammarError, parse_text, tokenize

__all__ = [
    # Complex
    "Complex",
    "ParseResult",
    "parse_complex",
    "try_parse_complex",
    # Constants
    "ZERO",
    "ONE",
    "I",
    "PI",
    "E",
    "INFINITY",
    "NAN",
    # Inputs
    "ComplexInput",
    "CartesianInput",
    "PolarInput",
    "SequenceInput",
    "ScalarInput",
    "TextInput",
    "InputKind",
    "MalformedInputError",
    "normalize",
    "normalize_raw",
    "to_input",
    # Text grammar
    "TextGrammarError",
    "parse_text",
    "tokenize",
]

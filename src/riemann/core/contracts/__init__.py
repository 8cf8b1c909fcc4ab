"""
Contract Validation Module

Модуль для валидации JSON контрактов комплексных значений.
"""

from .validators import (
    ComplexInputValidator,
    ComplexValueValidator,
    ContractValidator,
    SchemaLoader,
    validate_complex_input,
    validate_complex_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexInputValidator",
    "ComplexValueValidator",
    # Functions
    "validate_complex_input",
    "validate_complex_value",
]

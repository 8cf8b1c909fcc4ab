"""
JSON Schema Contract Validators

Модуль для валидации mapping-представлений комплексных чисел согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы:
- complex_input.json (mapping на входе нормализатора: {re, im}, {abs, arg}, {r, phi})
- complex_value.json (сериализованное значение: ровно {re, im})
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Схемы из каталога schema/ пакета, с meta-validation и кэшем."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: нет файла schema/<schema_name>.json
            ValueError: схема не проходит meta-validation Draft 2020-12
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка mapping против одной схемы; Mapping копируется в dict."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Mapping[str, Any]) -> None:
        self.validator.validate(dict(data))

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        return self.validator.is_valid(dict(data))

    def iter_errors(self, data: Mapping[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(dict(data))


class ComplexInputValidator(ContractValidator):
    """Валидатор mapping-входа нормализатора (complex_input)."""

    def __init__(self):
        super().__init__("complex_input")


class ComplexValueValidator(ContractValidator):
    """Валидатор сериализованного значения (complex_value)."""

    def __init__(self):
        super().__init__("complex_value")


# Валидаторы без состояния, переиспользуются между вызовами
_COMPLEX_INPUT_VALIDATOR = ComplexInputValidator()
_COMPLEX_VALUE_VALIDATOR = ComplexValueValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_complex_input(data: Mapping[str, Any]) -> None:
    """
    Валидация mapping-входа.

    Raises:
        ValidationError: Если mapping не содержит ни одной полной пары ключей
            (re/im, abs/arg, r/phi) или значения не числовые
    """
    _COMPLEX_INPUT_VALIDATOR.validate(data)


def validate_complex_value(data: Mapping[str, Any]) -> None:
    """Ровно {re, im}, оба числа (NaN и inf допустимы)."""
    _COMPLEX_VALUE_VALIDATOR.validate(data)

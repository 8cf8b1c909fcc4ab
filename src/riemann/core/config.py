"""
EngineSettings — конфигурация пакета

Настройки читаются из переменных окружения с префиксом RIEMANN_:
    RIEMANN_LOG_LEVEL   — уровень логирования (default: WARNING)
    RIEMANN_LOG_FORMAT  — text | json (default: text)

Численные константы (EPSILON, границы hypot/cosm1) не настраиваются:
они определены как Final в numerical_safeguards.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Настройки окружения движка"""

    log_level: str = Field("WARNING", description="Уровень логирования пакета")
    log_format: Literal["text", "json"] = Field("text", description="Формат записей лога")

    model_config = SettingsConfigDict(env_prefix="RIEMANN_", frozen=True)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Уровень должен быть известен модулю logging"""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> EngineSettings:
    """Кэшированный экземпляр настроек"""
    return EngineSettings()

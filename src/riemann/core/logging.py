"""
Structured logging configuration.

Логгеры пакета живут под корнем "riemann". По умолчанию пакет не
настраивает обработчики (библиотечное поведение); setup_logging()
подключает text или JSON форматтер согласно EngineSettings.

Отклонённые входы нормализатор пишет с полями raw и reason
(logger.debug(..., extra={"raw": ..., "reason": ...})).
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Final

from riemann.core.config import EngineSettings, get_settings

ROOT_LOGGER_NAME = "riemann"

# Поля контекста, которые модули пакета передают через extra=
CONTEXT_FIELDS: Final[tuple[str, ...]] = ("raw", "reason")

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class StructuredFormatter(logging.Formatter):
    """Одна JSON-запись на строку"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class TextFormatter(logging.Formatter):
    """Human-readable: время, уровень, логгер, сообщение"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(settings: EngineSettings | None = None) -> logging.Logger:
    """
    Настройка корневого логгера пакета.

    Повторный вызов заменяет ранее установленный обработчик.

    Returns:
        Корневой логгер "riemann"
    """
    settings = settings or get_settings()

    formatter: logging.Formatter
    if settings.log_format == "json":
        formatter = StructuredFormatter()
    else:
        formatter = TextFormatter()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in list(logger.handlers):
        if not isinstance(existing, logging.NullHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(settings.log_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Логгер модуля пакета"""
    return logging.getLogger(name)

"""
Logging — Единая настройка логирования split-правила

Все модули получают logger через get_logger(); корневой logger пакета
называется "split_gate". Handlers вешает только configure_logging(),
которую вызывает hosting application один раз при старте процесса.

Уровень: явный аргумент > переменная окружения SPLIT_GATE_LOG_LEVEL > INFO.

Логирование не влияет на решения gates: результат одинаков при любой
конфигурации logging.
"""

import logging
import os
import sys
from typing import IO, Optional, Union

ROOT_LOGGER_NAME = "split_gate"
LEVEL_ENV_VAR = "SPLIT_GATE_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_CONFIGURED = False


def _resolve_level(level: Union[int, str, None]) -> int:
    """int как есть, имя уровня или число строкой; неизвестное имя → INFO."""
    if level is None:
        level = os.getenv(LEVEL_ENV_VAR) or logging.INFO

    if isinstance(level, int):
        return level

    name = level.strip().upper()
    if name.isdigit():
        return int(name)

    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: Union[int, str, None] = None,
    *,
    fmt: Optional[str] = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """
    Подключение одного StreamHandler к корневому logger пакета.

    Повторные вызовы ничего не меняют. Записи не уходят в root logger
    приложения (propagate=False).

    Args:
        level: Уровень (int или имя); None → SPLIT_GATE_LOG_LEVEL или INFO
        fmt: Формат записи; по умолчанию DEFAULT_FORMAT
        stream: Поток для handler
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in [h for h in root.handlers if isinstance(h, logging.NullHandler)]:
        root.removeHandler(handler)

    resolved = _resolve_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    root.setLevel(resolved)
    root.addHandler(handler)
    root.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """
    Logger "split_gate.<name>".

    Пока configure_logging() не вызвана, на корневом logger пакета висит
    NullHandler, и записи никуда не выводятся.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not _CONFIGURED and not root.handlers:
        root.addHandler(logging.NullHandler())

    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

"""
Модуль конфигурации логирования.

Предназначен для единообразной настройки логирования во всём приложении.
"""

import logging
from logging import Logger
from typing import Union


def setup_logging(level: Union[int, str] = logging.INFO) -> Logger:
    """
    Настроить формат и уровень логирования.

    :param level: Уровень логирования (число или имя, по умолчанию INFO).
    :return: Логгер приложения.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    return logging.getLogger("cleanbot")

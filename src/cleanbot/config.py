"""
Загрузка и валидация конфигурации приложения.

Используется pydantic для работы с переменными окружения (.env).
"""

from enum import Enum
from functools import lru_cache
from typing import Optional, Set, Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceKind(str, Enum):
    """
    Виды служебных сообщений.

    Значение совпадает с именем поля aiogram.types.Message, которое
    заполнено у сообщения этого вида.
    """

    NEW_CHAT_MEMBERS = "new_chat_members"
    LEFT_CHAT_MEMBER = "left_chat_member"
    GROUP_CHAT_CREATED = "group_chat_created"
    SUPERGROUP_CHAT_CREATED = "supergroup_chat_created"
    CHANNEL_CHAT_CREATED = "channel_chat_created"
    PINNED_MESSAGE = "pinned_message"


DEFAULT_SERVICE_KINDS = frozenset(ServiceKind)


class Settings(BaseSettings):
    """
    Настройки бота, загружаемые из окружения.

    - TELEGRAM_BOT_TOKEN: токен бота;
    - DEVELOPER_CHAT_ID: чат разработчика, куда при старте уходит "Bot running" (опц.);
    - SERVICE_KINDS: какие служебные сообщения удалять (JSON-список, по умолчанию все);
    - LOG_LEVEL: уровень логирования.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    TELEGRAM_BOT_TOKEN: str = Field(..., min_length=10)
    DEVELOPER_CHAT_ID: Optional[Union[int, str]] = Field(default=None, union_mode="left_to_right")
    SERVICE_KINDS: Set[ServiceKind] = Field(default_factory=lambda: set(DEFAULT_SERVICE_KINDS))
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Прочитать настройки один раз и закэшировать."""
    return Settings()

"""
Фильтры маршрутизации входящих сообщений.

Команды разбирает aiogram (префикс "/", регистр не важен, упоминание
"@username" обязано совпадать с ботом). Служебные сообщения определяются
по набору ServiceKind, который задаётся в конфигурации.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Union

from aiogram.filters import BaseFilter, Command
from aiogram.types import Message

from cleanbot.config import DEFAULT_SERVICE_KINDS, ServiceKind

START_COMMAND = Command("start", ignore_case=True)
HELP_COMMAND = Command("help", ignore_case=True)


def service_kind_of(
    message: Message, kinds: Iterable[ServiceKind] = DEFAULT_SERVICE_KINDS
) -> Optional[ServiceKind]:
    """
    Вернуть вид служебного сообщения или None.

    Проверяются только виды из kinds, в порядке объявления ServiceKind.
    """
    enabled = set(kinds)
    for kind in ServiceKind:
        if kind in enabled and getattr(message, kind.value, None):
            return kind
    return None


class ServiceMessageFilter(BaseFilter):
    """
    Пропускает служебные сообщения.

    Набор видов берётся из workflow_data диспетчера (ключ service_kinds),
    иначе используются все виды.
    """

    async def __call__(
        self,
        message: Message,
        service_kinds: Optional[Iterable[ServiceKind]] = None,
    ) -> Union[bool, Dict[str, Any]]:
        kind = service_kind_of(
            message, DEFAULT_SERVICE_KINDS if service_kinds is None else service_kinds
        )
        if kind is None:
            return False
        return {"service_kind": kind}

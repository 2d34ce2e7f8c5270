# src/cleanbot/handlers/cleanup.py
from __future__ import annotations

import logging
from typing import Optional

from aiogram import Bot, Router
from aiogram.exceptions import TelegramAPIError
from aiogram.types import Message

from cleanbot.config import ServiceKind
from cleanbot.filters import ServiceMessageFilter
from cleanbot.utils.hashing import hash_chat_id

router = Router(name="service_cleanup")
logger = logging.getLogger("cleanbot.cleanup")

DELETE_FAILED_TEXT = (
    "⚠️ Couldn't delete the service message. \n"
    "Could be missing admin privileges and/or permission to delete messages."
)


# Удаляем "X joined", "X left", создание чата и уведомления о закрепе
@router.message(ServiceMessageFilter())
async def delete_service_message(
    message: Message, bot: Bot, service_kind: Optional[ServiceKind] = None
) -> None:
    chat_hash = hash_chat_id(message.chat.id)
    kind = service_kind.value if service_kind else "service"

    try:
        await bot.delete_message(chat_id=message.chat.id, message_id=message.message_id)
    except TelegramAPIError as e:
        logger.error("Failed to delete %s message in chat %s: %s", kind, chat_hash, e)
    else:
        logger.info("Successfully deleted %s message in chat %s", kind, chat_hash)
        return

    # Один раз предупреждаем чат, без повторов
    try:
        await bot.send_message(chat_id=message.chat.id, text=DELETE_FAILED_TEXT)
    except TelegramAPIError as e:
        logger.error("Failed to send error message to chat %s: %s", chat_hash, e)

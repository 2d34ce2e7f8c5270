from __future__ import annotations

"""
Команды /start и /help.
"""

import logging

from aiogram import Bot, F, Router
from aiogram.enums import ChatType
from aiogram.types import Message

from cleanbot.filters import HELP_COMMAND, START_COMMAND
from cleanbot.keyboards.common import add_to_group_kb

router = Router(name="commands")
logger = logging.getLogger("cleanbot.commands")

WELCOME_TEXT = (
    "👋 Hello! I'm a bot that automatically deletes join/leave messages.\n\n"
    "Just add me to your group and give me admin permissions to delete messages.\n\n"
    "I will automatically remove:\n"
    "• User joined messages\n"
    "• User left messages\n"
    "• Group creation messages\n"
    "• Pinned message notifications\n\n"
    "Use /help to get started."
)

GROUP_WELCOME_TEXT = (
    "👋 Hello, chat! I'll keep this chat clean from join/leave and other service messages.\n"
    "Make sure I'm an admin with permission to delete messages. Use /help for details."
)

HELP_TEXT = (
    "🤖 What I do:\n"
    "• Automatically delete join/leave notifications\n"
    "• Keep your chat clean from service messages\n"
    "• Work silently in the background\n\n"
    "Setup:\n"
    "1 - Add this bot to your group\n"
    "2 - Make the bot an admin\n"
    "3 - Give it permission to delete messages\n\n"
    "Note: Admin privileges is necessary to delete messages!"
)


# Только текст: подпись к фото или видео командой не считается
@router.message(F.text, START_COMMAND)
async def cmd_start(message: Message, bot: Bot) -> None:
    """
    В личке: приветствие и кнопка "добавить в группу".
    В группе: короткое приветствие без кнопки.
    """
    if message.chat.type == ChatType.PRIVATE:
        me = await bot.get_me()
        await bot.send_message(
            chat_id=message.chat.id,
            text=WELCOME_TEXT,
            reply_markup=add_to_group_kb(me.username),
        )
    else:
        await bot.send_message(chat_id=message.chat.id, text=GROUP_WELCOME_TEXT)
    logger.debug("/start answered in %s chat", message.chat.type)


@router.message(F.text, HELP_COMMAND)
async def cmd_help(message: Message, bot: Bot) -> None:
    await bot.send_message(chat_id=message.chat.id, text=HELP_TEXT)

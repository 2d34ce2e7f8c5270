from __future__ import annotations

"""
Diagnostics for the bot's own rights in a chat.

Not used on the dispatch path: deletion is simply attempted and the chat is
warned on failure. These helpers back scripts/check_permissions.py.
"""

from typing import Union

from aiogram import Bot
from aiogram.enums import ChatMemberStatus

ChatIdUnion = Union[int, str]


async def is_bot_admin(bot: Bot, chat_id: ChatIdUnion) -> bool:
    """
    Return True if the bot is listed among the chat administrators.
    """
    me = await bot.get_me()
    admins = await bot.get_chat_administrators(chat_id=chat_id)
    return any(admin.user.id == me.id for admin in admins)


async def can_delete_messages(bot: Bot, chat_id: ChatIdUnion) -> bool:
    """
    Return True if the bot may delete other members' messages:
    it owns the chat, or is an administrator with can_delete_messages.
    """
    me = await bot.get_me()
    member = await bot.get_chat_member(chat_id=chat_id, user_id=me.id)
    if member.status == ChatMemberStatus.CREATOR:
        return True
    if member.status == ChatMemberStatus.ADMINISTRATOR:
        return bool(getattr(member, "can_delete_messages", False))
    return False

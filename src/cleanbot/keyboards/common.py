"""
Конструкторы простых клавиатур.
"""

from aiogram.types import InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

TELEGRAM_LINK_BASE = "https://t.me"


def add_to_group_url(bot_username: str) -> str:
    """Ссылка, открывающая выбор группы для добавления бота."""
    return f"{TELEGRAM_LINK_BASE}/{bot_username}?startgroup=true"


def add_to_group_kb(bot_username: str) -> InlineKeyboardMarkup:
    """Одна кнопка "Add me to a group" с deep-link на startgroup."""
    kb = InlineKeyboardBuilder()
    kb.button(text="➕ Add me to a group", url=add_to_group_url(bot_username))
    kb.adjust(1)
    return kb.as_markup()

#!/usr/bin/env python3
"""
Проверка прав бота в чате: админ ли он и может ли удалять сообщения.

Использование:
    python scripts/check_permissions.py <chat_id>
"""

import asyncio
import sys
from pathlib import Path

# Добавляем src в PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from aiogram import Bot  # noqa: E402
from aiogram.exceptions import TelegramAPIError  # noqa: E402

from cleanbot.config import get_settings  # noqa: E402
from cleanbot.utils.admins import can_delete_messages, is_bot_admin  # noqa: E402


async def check_permissions(chat_id: str) -> bool:
    bot = Bot(token=get_settings().TELEGRAM_BOT_TOKEN)

    try:
        me = await bot.get_me()
        print(f"✅ Подключен к боту: @{me.username} ({me.first_name})")

        admin = await is_bot_admin(bot, chat_id)
        can_delete = await can_delete_messages(bot, chat_id)
        print(f"   Администратор: {'да' if admin else 'нет'}")
        print(f"   Может удалять сообщения: {'да' if can_delete else 'нет'}")
    except TelegramAPIError as e:
        print(f"❌ Ошибка Telegram API: {e}")
        return False
    finally:
        await bot.session.close()

    return admin and can_delete


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)

    ok = asyncio.run(check_permissions(sys.argv[1]))
    if not ok:
        print("\n💥 Боту не хватает прав: сделайте его админом с правом удалять сообщения.")
        sys.exit(1)
    print("\n🎉 Всё в порядке, служебные сообщения будут удаляться.")

"""
Точка входа: сборка диспетчера, регистрация роутеров, запуск long polling.

Также:
 - регистрирует команды бота;
 - при заданном DEVELOPER_CHAT_ID отправляет разработчику "Bot running".
"""

import asyncio
import logging
import sys
from typing import Optional, Union

from aiogram import Bot, Dispatcher
from aiogram.exceptions import TelegramAPIError
from aiogram.types import BotCommand
from aiogram.utils.token import TokenValidationError, validate_token
from pydantic import ValidationError

from cleanbot.config import Settings, get_settings
from cleanbot.handlers import cleanup as cleanup_handlers
from cleanbot.handlers import commands as command_handlers
from cleanbot.handlers import errors as error_handlers
from cleanbot.logging_config import setup_logging

logger = logging.getLogger("cleanbot")

STARTUP_TEXT = "Bot running"
ALLOWED_UPDATES = ["message"]


async def set_bot_commands(bot: Bot) -> None:
    """
    Зарегистрировать команды бота в интерфейсе Telegram.

    Не критично для работы: при ошибке пишем предупреждение и продолжаем запуск.
    """
    try:
        await bot.set_my_commands(
            commands=[
                BotCommand(command="start", description="Start the bot"),
                BotCommand(command="help", description="Show help"),
            ]
        )
    except TelegramAPIError as e:
        logger.warning("Couldn't register bot commands, continuing without them: %s", e)


async def notify_developer(bot: Bot, chat_id: Union[int, str]) -> None:
    """
    Сообщить в чат разработчика, что бот запущен.

    Ошибка отправки прерывает запуск: исключение логируется и пробрасывается.
    """
    try:
        await bot.send_message(chat_id=chat_id, text=STARTUP_TEXT)
    except TelegramAPIError:
        logger.exception("Bot couldn't send start message to developer chat")
        raise


def build_dispatcher(settings: Settings) -> Dispatcher:
    """Собрать диспетчер. Порядок роутеров задаёт приоритет: команды раньше удаления."""
    dp = Dispatcher()
    dp["service_kinds"] = frozenset(settings.SERVICE_KINDS)

    # ПОРЯДОК ВАЖЕН: команды до служебных сообщений
    dp.include_router(command_handlers.router)
    dp.include_router(cleanup_handlers.router)
    dp.include_router(error_handlers.router)
    return dp


async def main(settings: Optional[Settings] = None) -> None:
    """Основной цикл запуска бота."""
    if settings is None:
        settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    logger.info("Starting delete join messages bot...")

    bot = Bot(token=settings.TELEGRAM_BOT_TOKEN)
    dp = build_dispatcher(settings)

    try:
        await set_bot_commands(bot)
        if settings.DEVELOPER_CHAT_ID is not None:
            await notify_developer(bot, settings.DEVELOPER_CHAT_ID)

        logger.info(
            "Bot is up. Deleting kinds: %s. Starting polling...",
            ", ".join(sorted(kind.value for kind in settings.SERVICE_KINDS)),
        )
        await dp.start_polling(bot, allowed_updates=ALLOWED_UPDATES)
    finally:
        await bot.session.close()


def run() -> None:
    """Консольная точка входа: ошибки конфигурации завершают процесс с кодом 1."""
    try:
        settings = get_settings()
        validate_token(settings.TELEGRAM_BOT_TOKEN)
    except (ValidationError, TokenValidationError) as e:
        setup_logging()
        logger.critical("Configuration error: %s", e)
        sys.exit(1)

    try:
        asyncio.run(main(settings))
    except KeyboardInterrupt:
        logger.info("Bot stopped")


if __name__ == "__main__":
    run()

from datetime import datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from aiogram.types import Chat, Message, User

BOT_USERNAME = "cleaner_bot"


def make_user(user_id: int = 1001, first_name: str = "Test") -> User:
    return User(id=user_id, is_bot=False, first_name=first_name)


def make_message(
    *,
    chat_id: int = 42,
    chat_type: str = "supergroup",
    message_id: int = 7,
    **fields,
) -> Message:
    """Собрать настоящее aiogram-сообщение с нужными полями."""
    return Message(
        message_id=message_id,
        date=datetime(2024, 1, 1, 12, 0, 0),
        chat=Chat(id=chat_id, type=chat_type),
        **fields,
    )


@pytest.fixture
def bot() -> AsyncMock:
    """Мок Bot: все API-методы асинхронные и по умолчанию успешны."""
    mocked = AsyncMock()
    mocked.id = 4242
    mocked.get_me.return_value = SimpleNamespace(id=4242, username=BOT_USERNAME)
    mocked.me.return_value = SimpleNamespace(id=4242, username=BOT_USERNAME)
    return mocked


@pytest.fixture(scope="session")
def dispatcher():
    """Диспетчер со всеми видами служебных сообщений.

    Роутеры модульные: подключить их к диспетчеру можно только один раз за сессию.
    """
    from cleanbot.config import Settings
    from cleanbot.main import build_dispatcher

    return build_dispatcher(
        Settings(_env_file=None, TELEGRAM_BOT_TOKEN="123456789:AAFakeTokenForTests")
    )

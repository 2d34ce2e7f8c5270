"""Бот, который удаляет служебные сообщения Telegram в группах."""

__version__ = "0.1.0"

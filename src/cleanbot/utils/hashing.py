"""
Хэширование идентификаторов для логов: id чатов не пишем в открытом виде.
"""

from hashlib import sha256
from typing import Union


def hash_chat_id(chat_id: Union[int, str]) -> str:
    """SHA-256 hex-дайджест строкового представления chat_id."""
    return sha256(str(chat_id).encode("utf-8")).hexdigest()

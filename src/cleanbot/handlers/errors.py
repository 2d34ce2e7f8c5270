"""
Последний рубеж: ошибки отдельного апдейта логируем и считаем обработанными,
чтобы polling продолжал работу.
"""

import logging

from aiogram import Router
from aiogram.types import ErrorEvent

router = Router(name="errors")
logger = logging.getLogger("cleanbot.errors")


@router.errors()
async def on_error(event: ErrorEvent) -> bool:
    update_id = event.update.update_id if event.update else None
    logger.error(
        "An error has occurred in the dispatcher (update %s): %s",
        update_id,
        event.exception,
        exc_info=event.exception,
    )
    return True

#!/usr/bin/env python3
"""
Точка входа для запуска бота из исходников.
- Фиксирует рабочую директорию на папку проекта (там лежит .env)
- Подключает src в sys.path
- Грузит переменные из .env
- Запускает cleanbot.main.run(); SIGINT/SIGTERM обрабатывает polling aiogram
"""
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent
os.chdir(BASE_DIR)

sys.path.insert(0, str(BASE_DIR / "src"))

load_dotenv(dotenv_path=BASE_DIR / ".env")

from cleanbot.main import run  # noqa: E402


if __name__ == "__main__":
    run()

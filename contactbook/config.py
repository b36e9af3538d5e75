"""Настройки справочника из переменных окружения и настройка логирования."""
import logging
import os
from typing import Optional


class Settings:
    """Настройки приложения."""

    # Логирование
    LOG_LEVEL = os.getenv('CONTACTBOOK_LOG_LEVEL', 'INFO')
    LOG_FORMAT = os.getenv(
        'CONTACTBOOK_LOG_FORMAT',
        '%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # Экспорт
    EXPORT_SHEET = os.getenv('CONTACTBOOK_EXPORT_SHEET', 'Contacts')


def resolve_log_level(name: str) -> int:
    """Переводит имя уровня ('debug', 'INFO', ...) в число."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f'Неизвестный уровень логирования: {name}')
    return level


def configure_logging(level: Optional[str] = None) -> None:
    """Подключает обработчик stderr к корневому логгеру.

    Пакет сам обработчики не ставит: вызывать из кода приложения.
    """
    logging.basicConfig(
        level=resolve_log_level(level or Settings.LOG_LEVEL),
        format=Settings.LOG_FORMAT,
    )

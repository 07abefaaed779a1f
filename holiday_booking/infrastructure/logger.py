"""
Логирование на базе loguru.

Пакет отключает свои сообщения при импорте; приложение включает их
через configure_logging().
"""

import sys
from typing import Any

from loguru import logger as loguru_logger

from holiday_booking.config import BookingSettings

PACKAGE_NAME = "holiday_booking"
COMPONENT = "component"

log_format = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        f"<c>{{extra[{COMPONENT}]}}</>",
        "{message}",
        "<lk>{extra}</>",
    )
)


def configure_logging(settings: BookingSettings) -> None:
    """Включает логи пакета и направляет их в stderr."""
    if not settings.log_enabled:
        loguru_logger.disable(PACKAGE_NAME)
        return

    loguru_logger.remove()
    # Формат требует extra[component], поэтому sink принимает только записи пакета
    loguru_logger.add(
        sys.stderr,
        level=settings.log_level,
        format=log_format,
        filter=PACKAGE_NAME,
    )
    loguru_logger.enable(PACKAGE_NAME)


class LoguruLogger:
    """Реализация ILogger поверх loguru; контекст передается как extra."""

    def __init__(self, component: str = PACKAGE_NAME):
        self._logger = loguru_logger.bind(**{COMPONENT: component})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.bind(**kwargs).debug(message)

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.bind(**kwargs).info(message)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.bind(**kwargs).warning(message)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.bind(**kwargs).error(message)

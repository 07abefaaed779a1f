"""
Сборка сервиса бронирований: явное внедрение зависимостей через конструкторы.
"""

from typing import Optional

from holiday_booking.application.repositories import BookingRepository
from holiday_booking.application.services import BookingService
from holiday_booking.config import BookingSettings, get_settings
from holiday_booking.infrastructure.logger import LoguruLogger, configure_logging
from holiday_booking.infrastructure.repositories import InMemoryBookingRepository


def build_booking_service(
    settings: Optional[BookingSettings] = None,
    repository: Optional[BookingRepository] = None,
) -> BookingService:
    """Создает сервис с репозиторием в памяти и логгером loguru."""
    settings = settings or get_settings()
    configure_logging(settings)

    if repository is None:
        repository = InMemoryBookingRepository(logger=LoguruLogger("repository"))

    return BookingService(repository, logger=LoguruLogger("service"))

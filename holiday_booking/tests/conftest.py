"""
Общие фикстуры тестов.
"""

from datetime import date, timedelta
from typing import Any, List, Tuple

import pytest

from holiday_booking.application.services import BookingService
from holiday_booking.domain.booking import Booking
from holiday_booking.infrastructure.repositories import InMemoryBookingRepository


class RecordingLogger:
    """Логгер для тестов: запоминает сообщения вместо вывода."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, dict]] = []

    def _record(self, level: str, message: str, **kwargs: Any) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("ERROR", message, **kwargs)

    def levels(self) -> List[str]:
        return [level for level, _, _ in self.records]


@pytest.fixture
def today() -> date:
    """Фиксированная 'сегодняшняя' дата для детерминированных проверок."""
    return date(2030, 6, 15)


@pytest.fixture
def clock(today: date):
    return lambda: today


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def repository() -> InMemoryBookingRepository:
    return InMemoryBookingRepository()


@pytest.fixture
def booking_service(repository, clock, logger) -> BookingService:
    """Сервис приложения с чистым репозиторием и фиксированными часами."""
    return BookingService(repository, logger=logger, clock=clock)


@pytest.fixture
def make_booking(today: date):
    """Фабрика валидных бронирований (без сохранения)."""

    def _make(
        customer_name: str = "Ridwaan Maharaj",
        booking_type: str = "Flat",
        start_offset: int = 1,
        end_offset: int = 7,
    ) -> Booking:
        return Booking.create(
            customer_name=customer_name,
            booking_type=booking_type,
            start_date=today + timedelta(days=start_offset),
            end_date=today + timedelta(days=end_offset),
        )

    return _make

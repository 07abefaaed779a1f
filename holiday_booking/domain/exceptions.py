"""
Доменные исключения контекста бронирования.
"""

from datetime import date
from uuid import UUID


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class InvalidBookingDatesException(DomainException, ValueError):
    """Исключение при нарушении правил для дат бронирования."""

    def __init__(self, message: str, start_date: date, end_date: date):
        super().__init__(message)
        self.start_date = start_date
        self.end_date = end_date


class BookingNotFoundException(DomainException):
    """Бронирование с указанным идентификатором не найдено."""

    def __init__(self, booking_id: UUID):
        super().__init__(f"Бронирование {booking_id} не найдено")
        self.booking_id = booking_id

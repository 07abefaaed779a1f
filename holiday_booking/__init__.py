"""
Менеджер бронирований в памяти.

Отвечает за создание, получение, изменение и удаление бронирований:
- проверку дат бронирования;
- выдачу идентификаторов;
- потокобезопасное хранение записей.
"""

from loguru import logger

from .application import (
    BookingRepository,
    BookingService,
    DuplicateKeyException,
    RecordNotFoundException,
    RepositoryException,
)
from .bootstrap import build_booking_service
from .domain import (
    Booking,
    BookingId,
    BookingNotFoundException,
    BookingPolicy,
    DomainException,
    InvalidBookingDatesException,
)
from .infrastructure import InMemoryBookingRepository

logger.disable(__name__)

__all__ = [
    "Booking",
    "BookingId",
    "BookingNotFoundException",
    "BookingPolicy",
    "BookingRepository",
    "BookingService",
    "DomainException",
    "DuplicateKeyException",
    "InMemoryBookingRepository",
    "InvalidBookingDatesException",
    "RecordNotFoundException",
    "RepositoryException",
    "build_booking_service",
]

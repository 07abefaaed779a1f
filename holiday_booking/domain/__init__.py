"""
Доменная модель контекста бронирования.
"""

from .booking import Booking, BookingId, new_booking_id
from .exceptions import (
    BookingNotFoundException,
    DomainException,
    InvalidBookingDatesException,
)
from .policy import BookingPolicy, calendar_date

__all__ = [
    "Booking",
    "BookingId",
    "BookingNotFoundException",
    "BookingPolicy",
    "DomainException",
    "InvalidBookingDatesException",
    "calendar_date",
    "new_booking_id",
]

"""
Бизнес-правила для дат бронирования.
"""

from datetime import date, datetime

from .exceptions import InvalidBookingDatesException


def calendar_date(value: date) -> date:
    """Отбрасывает время суток: значение имеет только календарная дата."""
    return value.date() if isinstance(value, datetime) else value


class BookingPolicy:
    """Политики и бизнес-правила для бронирований."""

    END_NOT_AFTER_START = "Дата окончания должна быть позже даты начала"
    START_IN_PAST = "Нельзя забронировать на прошедшую дату"

    @classmethod
    def validate_booking_dates(
        cls, start_date: date, end_date: date, today: date
    ) -> None:
        """Проверяет, что период бронирования соответствует политикам."""
        start_date = calendar_date(start_date)
        end_date = calendar_date(end_date)

        if start_date >= end_date:
            raise InvalidBookingDatesException(
                cls.END_NOT_AFTER_START, start_date, end_date
            )

        # Сегодняшний день допустим, вчерашний уже нет
        if start_date < calendar_date(today):
            raise InvalidBookingDatesException(cls.START_IN_PAST, start_date, end_date)

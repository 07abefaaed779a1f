from datetime import date
from typing import List, Optional

from holiday_booking.application.interfaces import Clock, ILogger
from holiday_booking.application.repositories import (
    BookingRepository,
    RecordNotFoundException,
)
from holiday_booking.domain.booking import Booking, BookingId
from holiday_booking.domain.exceptions import BookingNotFoundException
from holiday_booking.domain.policy import BookingPolicy, calendar_date


class BookingService:
    """Сервис приложения для управления бронированиями."""

    def __init__(
        self,
        booking_repo: BookingRepository,
        logger: Optional[ILogger] = None,
        clock: Optional[Clock] = None,
    ):
        self.booking_repo = booking_repo
        self._logger = logger
        self._clock = clock or date.today

    def create_booking(
        self,
        customer_name: str,
        booking_type: str,
        start_date: date,
        end_date: date,
    ) -> Booking:
        """Создает новое бронирование; время суток в датах отбрасывается."""
        start_date = calendar_date(start_date)
        end_date = calendar_date(end_date)
        BookingPolicy.validate_booking_dates(start_date, end_date, self._clock())

        booking = Booking.create(
            customer_name=customer_name,
            booking_type=booking_type,
            start_date=start_date,
            end_date=end_date,
        )
        # DuplicateKeyException при коллизии id пробрасывается как есть
        self.booking_repo.add(booking)
        self._log_info("Бронирование создано", booking_id=str(booking.id))
        return booking

    def get_booking(self, booking_id: BookingId) -> Optional[Booking]:
        return self.booking_repo.get_by_id(booking_id)

    def get_all_bookings(self) -> List[Booking]:
        return self.booking_repo.list_all()

    def update_booking(self, booking: Booking) -> None:
        """Полностью заменяет бронирование с тем же id."""
        BookingPolicy.validate_booking_dates(
            booking.start_date, booking.end_date, self._clock()
        )

        try:
            self.booking_repo.update(booking)
        except RecordNotFoundException as e:
            if self._logger is not None:
                self._logger.warning(
                    "Попытка обновить несуществующее бронирование",
                    booking_id=str(booking.id),
                )
            raise BookingNotFoundException(booking.id) from e

        self._log_info("Бронирование обновлено", booking_id=str(booking.id))

    def delete_booking(self, booking_id: BookingId) -> None:
        self.booking_repo.delete(booking_id)
        self._log_info("Запрошено удаление бронирования", booking_id=str(booking_id))

    def _log_info(self, message: str, **kwargs) -> None:
        if self._logger is not None:
            self._logger.info(message, **kwargs)

import threading
from typing import Dict, List, Optional

from holiday_booking.application.interfaces import ILogger
from holiday_booking.application.repositories import (
    BookingRepository,
    DuplicateKeyException,
    RecordNotFoundException,
)
from holiday_booking.domain.booking import Booking, BookingId


class InMemoryBookingRepository(BookingRepository):
    """
    Реализация репозитория в памяти, безопасная для нескольких потоков.

    Репозиторий владеет канонической копией каждого бронирования: при записи
    сохраняется копия, при чтении возвращается копия. Изменить сохраненное
    состояние можно только явным вызовом update().

    Одна блокировка защищает словарь и удерживается только на время
    собственного шага операции. Одновременные update() одного id
    разрешаются по принципу "последняя запись побеждает".
    """

    def __init__(self, logger: Optional[ILogger] = None) -> None:
        self._bookings: Dict[BookingId, Booking] = {}
        self._lock = threading.Lock()
        self._logger = logger

    def get_by_id(self, booking_id: BookingId) -> Optional[Booking]:
        with self._lock:
            booking = self._bookings.get(booking_id)
        return booking.copy_of() if booking is not None else None

    def list_all(self) -> List[Booking]:
        with self._lock:
            snapshot = list(self._bookings.values())
        # Хранимые объекты не изменяются на месте, копировать можно без блокировки
        return [booking.copy_of() for booking in snapshot]

    def add(self, booking: Booking) -> None:
        stored = booking.copy_of()
        with self._lock:
            if stored.id in self._bookings:
                raise DuplicateKeyException(stored.id)
            self._bookings[stored.id] = stored
        self._debug("Бронирование добавлено в репозиторий", booking_id=str(stored.id))

    def update(self, booking: Booking) -> None:
        stored = booking.copy_of()
        with self._lock:
            if stored.id not in self._bookings:
                raise RecordNotFoundException(stored.id)
            self._bookings[stored.id] = stored
        self._debug("Бронирование заменено в репозитории", booking_id=str(stored.id))

    def delete(self, booking_id: BookingId) -> None:
        with self._lock:
            removed = self._bookings.pop(booking_id, None)
        if removed is not None:
            self._debug("Бронирование удалено из репозитория", booking_id=str(booking_id))

    def __len__(self) -> int:
        with self._lock:
            return len(self._bookings)

    def __contains__(self, booking_id: object) -> bool:
        with self._lock:
            return booking_id in self._bookings

    def _debug(self, message: str, **kwargs) -> None:
        if self._logger is not None:
            self._logger.debug(message, **kwargs)

from abc import ABC, abstractmethod
from typing import List, Optional

from holiday_booking.domain.booking import Booking, BookingId


class RepositoryException(Exception):
    """Базовое исключение уровня хранилища."""

    def __init__(self, message: str, record_id: BookingId):
        super().__init__(message)
        self.record_id = record_id


class DuplicateKeyException(RepositoryException, ValueError):
    """Запись с таким идентификатором уже существует."""

    def __init__(self, record_id: BookingId):
        super().__init__(f"Запись {record_id} уже существует", record_id)


class RecordNotFoundException(RepositoryException, LookupError):
    """Запись с таким идентификатором не найдена."""

    def __init__(self, record_id: BookingId):
        super().__init__(f"Запись {record_id} не найдена", record_id)


class BookingRepository(ABC):
    """
    Абстрактный репозиторий бронирований.

    Все операции атомарны и безопасны при одновременном вызове
    из нескольких потоков без внешней блокировки.
    """

    @abstractmethod
    def get_by_id(self, booking_id: BookingId) -> Optional[Booking]:
        """Возвращает бронирование или None, если его нет."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> List[Booking]:
        """Возвращает снимок всех бронирований в произвольном порядке."""
        raise NotImplementedError

    @abstractmethod
    def add(self, booking: Booking) -> None:
        """Добавляет новое бронирование, DuplicateKeyException при повторе id."""
        raise NotImplementedError

    @abstractmethod
    def update(self, booking: Booking) -> None:
        """Полностью заменяет бронирование, RecordNotFoundException если его нет."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking_id: BookingId) -> None:
        """Удаляет бронирование; отсутствие записи не ошибка."""
        raise NotImplementedError

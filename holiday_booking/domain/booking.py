"""
Сущность 'Бронирование'.
"""

from __future__ import annotations

from datetime import date
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

BookingId = UUID


def new_booking_id() -> BookingId:
    """Генерирует новый идентификатор бронирования."""
    return uuid4()


class Booking(BaseModel):
    """Бронирование: клиент, тип и период."""

    # Строки не превращаются в даты и UUID: разбор ввода не задача ядра.
    model_config = ConfigDict(strict=True, validate_assignment=True)

    id: BookingId
    customer_name: str
    booking_type: str = Field(..., description="Категория, например 'Flat' или 'Vehicle'")
    start_date: date
    end_date: date

    @classmethod
    def create(
        cls,
        customer_name: str,
        booking_type: str,
        start_date: date,
        end_date: date,
    ) -> Booking:
        return cls(
            id=new_booking_id(),
            customer_name=customer_name,
            booking_type=booking_type,
            start_date=start_date,
            end_date=end_date,
        )

    @property
    def nights(self) -> int:
        """Количество ночей в бронировании."""
        return (self.end_date - self.start_date).days

    def copy_of(self) -> Booking:
        """Возвращает независимую копию бронирования."""
        return self.model_copy(deep=True)

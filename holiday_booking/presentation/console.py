"""
Консольный интерфейс менеджера бронирований.

Только этот слой читает ввод и пишет в консоль: разбирает строки в даты
и идентификаторы, показывает результаты и сообщения об ошибках.
Ядро вызывается исключительно через BookingService.
"""

import uuid
from datetime import date, datetime
from typing import Callable, Iterable, Optional

from holiday_booking.application.services import BookingService
from holiday_booking.config import BookingSettings, get_settings
from holiday_booking.domain.booking import Booking
from holiday_booking.domain.exceptions import DomainException

MENU = """
--- Главное меню ---
  1. Создать бронирование
  2. Показать все бронирования
  3. Изменить бронирование
  4. Удалить бронирование
  5. Выход"""

MENU_PROMPT = "Выберите пункт (1-5): "


class ConsoleUI:
    """Интерактивное меню поверх сервиса бронирований."""

    def __init__(
        self,
        booking_service: BookingService,
        settings: Optional[BookingSettings] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        clock: Optional[Callable[[], date]] = None,
    ):
        self._service = booking_service
        self._settings = settings or get_settings()
        self._input = input_func
        self._output = output_func
        self._clock = clock or date.today

    def run(self) -> None:
        self._output("=== Система бронирования ===")
        actions = {
            1: self.create_booking,
            2: self.view_bookings,
            3: self.update_booking,
            4: self.delete_booking,
        }

        try:
            while True:
                self._output(MENU)
                choice = self._read_menu_choice()
                if choice == 5:
                    self._output("Спасибо, что воспользовались системой бронирования!")
                    return
                try:
                    actions[choice]()
                except EOFError:
                    raise
                except DomainException as e:
                    self._show_error(str(e))
                except Exception as e:
                    # Меню продолжает работу после любой ошибки действия
                    self._show_error(f"Непредвиденная ошибка: {e}")
        except EOFError:
            return

    def create_booking(self) -> None:
        self._output("\n--- Новое бронирование ---")
        details = self._read_booking_details()
        created = self._service.create_booking(
            details["customer_name"],
            details["booking_type"],
            details["start_date"],
            details["end_date"],
        )
        self._output("Бронирование успешно создано.")
        self._output(self._format_booking(created))

    def view_bookings(self) -> None:
        self._output("\n--- Все бронирования ---")
        bookings = self._service.get_all_bookings()
        if not bookings:
            self._output("  Бронирований нет.")
            return
        self._output_lines(self._format_row(b) for b in bookings)

    def update_booking(self) -> None:
        self._output("\n--- Изменение бронирования ---")
        existing = self._read_existing_booking("Введите ID бронирования для изменения: ")
        if existing is None:
            return

        self._output("Текущие данные:")
        self._output(self._format_booking(existing))

        details = self._read_booking_details()
        updated = Booking(id=existing.id, **details)
        self._service.update_booking(updated)
        self._output("Бронирование успешно изменено.")

    def delete_booking(self) -> None:
        self._output("\n--- Удаление бронирования ---")
        existing = self._read_existing_booking("Введите ID бронирования для удаления: ")
        if existing is None:
            return

        self._output("Будет удалено:")
        self._output(self._format_booking(existing))
        confirmation = self._input("Удалить это бронирование? (y/N): ")
        if confirmation.strip().lower() != "y":
            self._output("Удаление отменено.")
            return

        self._service.delete_booking(existing.id)
        self._output("Бронирование успешно удалено.")

    def _read_menu_choice(self) -> int:
        while True:
            raw = self._input(MENU_PROMPT).strip()
            if raw.isdigit() and 1 <= int(raw) <= 5:
                return int(raw)
            self._show_error("Введите число от 1 до 5.")

    def _read_existing_booking(self, prompt: str) -> Optional[Booking]:
        raw = self._input(prompt).strip()
        try:
            booking_id = uuid.UUID(raw)
        except ValueError:
            self._show_error("Некорректный формат ID.")
            return None

        booking = self._service.get_booking(booking_id)
        if booking is None:
            self._show_error("Бронирование не найдено.")
        return booking

    def _read_booking_details(self) -> dict:
        customer_name = self._read_required("Имя клиента: ", "Имя клиента обязательно.")
        booking_type = self._read_required(
            "Тип бронирования (квартира, транспорт, шоу и т.д.): ",
            "Тип бронирования обязателен.",
        )

        while True:
            start_date = self._read_date("Дата начала")
            if start_date >= self._clock():
                break
            self._show_error("Дата начала не может быть в прошлом.")

        while True:
            end_date = self._read_date("Дата окончания")
            if end_date > start_date:
                break
            self._show_error("Дата окончания должна быть позже даты начала.")

        return {
            "customer_name": customer_name,
            "booking_type": booking_type,
            "start_date": start_date,
            "end_date": end_date,
        }

    def _read_required(self, prompt: str, error: str) -> str:
        while True:
            value = self._input(prompt).strip()
            if value:
                return value
            self._show_error(error)

    def _read_date(self, label: str) -> date:
        date_format = self._settings.date_format
        while True:
            raw = self._input(f"{label} ({date_format}): ").strip()
            try:
                return datetime.strptime(raw, date_format).date()
            except ValueError:
                self._show_error(f"Неверный формат даты, ожидается {date_format}.")

    def _format_booking(self, booking: Booking) -> str:
        return (
            f"ID: {booking.id}\n"
            f"Клиент: {booking.customer_name}\n"
            f"Тип: {booking.booking_type}\n"
            f"Даты: {self._format_date(booking.start_date)} - "
            f"{self._format_date(booking.end_date)}"
        )

    def _format_row(self, booking: Booking) -> str:
        return (
            f"  {booking.id} {booking.customer_name:<15} {booking.booking_type:<12} "
            f"{self._format_date(booking.start_date)}  "
            f"{self._format_date(booking.end_date)}"
        )

    def _format_date(self, value: date) -> str:
        return value.strftime(self._settings.date_format)

    def _output_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._output(line)

    def _show_error(self, message: str) -> None:
        self._output(f"Ошибка: {message}")

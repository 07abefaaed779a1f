from holiday_booking.bootstrap import build_booking_service
from holiday_booking.presentation.console import ConsoleUI


def main() -> None:
    ConsoleUI(build_booking_service()).run()


if __name__ == "__main__":
    main()

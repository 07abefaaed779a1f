from .logger import LoguruLogger, configure_logging
from .repositories import InMemoryBookingRepository

__all__ = ["InMemoryBookingRepository", "LoguruLogger", "configure_logging"]

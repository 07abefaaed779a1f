"""
Прикладной слой: сервис бронирований и порт репозитория.
"""

from .repositories import (
    BookingRepository,
    DuplicateKeyException,
    RecordNotFoundException,
    RepositoryException,
)
from .services import BookingService

__all__ = [
    "BookingRepository",
    "BookingService",
    "DuplicateKeyException",
    "RecordNotFoundException",
    "RepositoryException",
]

"""
Интерфейсы (порты) прикладного слоя.
"""

from datetime import date
from typing import Any, Callable, Protocol

Clock = Callable[[], date]


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def debug(self, message: str, **kwargs: Any) -> None: ...
    def info(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...

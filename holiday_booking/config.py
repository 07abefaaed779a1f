from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class BookingSettings(BaseSettings):
    """Настройки приложения, читаются из переменных окружения HOLIDAY_BOOKING_*."""

    model_config = SettingsConfigDict(
        env_prefix="HOLIDAY_BOOKING_",
        env_ignore_empty=True,
        extra="ignore",
    )

    log_enabled: bool = False
    log_level: str = "INFO"
    date_format: str = "%Y-%m-%d"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return level


@lru_cache
def get_settings() -> BookingSettings:
    return BookingSettings()

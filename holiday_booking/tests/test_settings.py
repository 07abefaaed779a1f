import pytest
from pydantic import ValidationError

from holiday_booking.config import BookingSettings, get_settings


def test_defaults():
    settings = BookingSettings()

    assert settings.log_enabled is False
    assert settings.log_level == "INFO"
    assert settings.date_format == "%Y-%m-%d"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("HOLIDAY_BOOKING_LOG_ENABLED", "true")
    monkeypatch.setenv("HOLIDAY_BOOKING_LOG_LEVEL", "debug")
    monkeypatch.setenv("HOLIDAY_BOOKING_DATE_FORMAT", "%d.%m.%Y")

    settings = BookingSettings()

    assert settings.log_enabled is True
    assert settings.log_level == "DEBUG"
    assert settings.date_format == "%d.%m.%Y"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        BookingSettings(log_level="verbose")


def test_get_settings_is_cached():
    assert get_settings() is get_settings()

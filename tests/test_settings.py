import pytest
from pydantic import ValidationError

from artgallery.settings import Settings, configure_logging, get_settings


def test_settings_defaults(monkeypatch) -> None:
    for key in ("ARTGALLERY_LOG_LEVEL", "ARTGALLERY_CURRENCY", "ARTGALLERY_SHIPPING_RATE"):
        monkeypatch.delenv(key, raising=False)
    settings = Settings.load()
    assert settings.log_level == "WARNING"
    assert settings.currency == "$"
    assert settings.shipping_rate_per_kg == 2.5


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("ARTGALLERY_CURRENCY", "EUR ")
    monkeypatch.setenv("ARTGALLERY_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.currency == "EUR "
    assert settings.log_level == "debug"


def test_configure_logging_tolerates_unknown_level() -> None:
    configure_logging("not-a-level")
    configure_logging("WARNING")


def test_shipping_rate_is_coerced_and_checked(monkeypatch) -> None:
    monkeypatch.setenv("ARTGALLERY_SHIPPING_RATE", "3.75")
    assert Settings.load().shipping_rate_per_kg == 3.75
    monkeypatch.setenv("ARTGALLERY_SHIPPING_RATE", "-1")
    with pytest.raises(ValidationError):
        Settings.load()

"""Configuration helpers for the gallery catalog."""

from __future__ import annotations

import logging
import os

import structlog
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Runtime configuration loaded from env vars with sensible defaults."""

    log_level: str = "WARNING"
    currency: str = "$"
    shipping_rate_per_kg: float = Field(default=2.5, ge=0)

    @classmethod
    def load(cls) -> "Settings":
        load_dotenv()
        return cls(
            log_level=os.environ.get("ARTGALLERY_LOG_LEVEL", "WARNING"),
            currency=os.environ.get("ARTGALLERY_CURRENCY", "$"),
            shipping_rate_per_kg=os.environ.get("ARTGALLERY_SHIPPING_RATE", "2.5"),
        )


def configure_logging(level: str) -> None:
    """Drop structlog events below ``level`` (a stdlib level name)."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(numeric))


def get_settings() -> Settings:
    """Convenience accessor for lazy modules."""
    settings = Settings.load()
    configure_logging(settings.log_level)
    return settings

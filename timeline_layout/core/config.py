"""
Timeline layout configuration using Pydantic Settings.

Values are read from environment variables (or a .env file) once per process.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Layout settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # Logging
    # ===========================================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # ===========================================
    # Calendar
    # ===========================================
    # IANA timezone used to decide calendar days when a view has none
    TIMEZONE: str = "UTC"
    # The month view always spans this many days from the 1st
    MONTH_WINDOW_DAYS: int = Field(30, ge=1)

    # ===========================================
    # Zoom (percent)
    # ===========================================
    ZOOM_MIN: int = Field(60, ge=1)
    ZOOM_MAX: int = Field(200, ge=1)
    DEFAULT_ZOOM: int = 100

    # ===========================================
    # Day widths at 100% zoom (pixels)
    # ===========================================
    DAY_WIDTH_WEEK: float = Field(120.0, gt=0)
    DAY_WIDTH_TWO_WEEKS: float = Field(70.0, gt=0)
    DAY_WIDTH_MONTH: float = Field(40.0, gt=0)

    # Minimum bar width as a fraction of one day
    MIN_BAR_RATIO: float = Field(0.9, gt=0, le=1)

    # ===========================================
    # Lane packing
    # ===========================================
    # Groups larger than this are packed with the heap-based packer
    LANE_HEAP_THRESHOLD: int = Field(500, ge=0)

    # ===========================================
    # Labels (product locale)
    # ===========================================
    UNASSIGNED_LABEL: str = "Не назначено"
    NO_PROJECT_LABEL: str = "Без проекта"
    OVERDUE_DAY_SUFFIX: str = "д"
    OVERDUE_HOUR_SUFFIX: str = "ч"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded only once.
    """
    return Settings()

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _normalize_locale_id(value: str | None, default: str) -> str:
    val = (value or "").strip().replace("-", "_")
    return val or default


class CalendarComboSettings(BaseSettings):
    """Host-level defaults pulled from environment/.env."""

    # Locale used when callers pass locale=None and for the generic short-date strategy
    default_locale: str = Field("en_US", alias="CALENDARCOMBO_DEFAULT_LOCALE")
    # Locale that selects the US (month-first) numeric layouts
    us_locale: str = Field("en_US", alias="CALENDARCOMBO_US_LOCALE")
    json_logs: bool = Field(False, alias="CALENDARCOMBO_JSON_LOGS")
    log_level: str = Field("INFO", alias="CALENDARCOMBO_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("default_locale", mode="before")
    @classmethod
    def _normalize_default_locale(cls, value: str | None) -> str:
        return _normalize_locale_id(value, "en_US")

    @field_validator("us_locale", mode="before")
    @classmethod
    def _normalize_us_locale(cls, value: str | None) -> str:
        return _normalize_locale_id(value, "en_US")

    @field_validator("json_logs", mode="before")
    @classmethod
    def _parse_bool(cls, value) -> bool:
        if isinstance(value, bool):
            return value
        if value is None or value == "":
            return False
        return str(value).strip().lower() in {"1", "true", "yes", "on"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str | None) -> str:
        val = (value or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(val), int):
            return "INFO"
        return val


@lru_cache(maxsize=1)
def get_settings() -> CalendarComboSettings:
    return CalendarComboSettings()


def reset_settings_cache() -> None:
    """Testing helper to clear cached settings."""
    get_settings.cache_clear()

"""Configuration loaded from the process environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from epochcal.log import get_logger

LOGGER = get_logger(__name__)

DEFAULT_LOCALE = "zh_CN"


@dataclass(slots=True, frozen=True)
class Settings:
    """Runtime configuration for the default DateMath instance."""

    locale: str
    timezone: Optional[str]

    @property
    def uses_system_zone(self) -> bool:
        return self.timezone is None


@lru_cache(maxsize=1)
def _load_settings() -> Settings:
    locale = os.getenv("EPOCHCAL_LOCALE", DEFAULT_LOCALE).strip() or DEFAULT_LOCALE
    timezone = os.getenv("EPOCHCAL_TZ", "").strip() or None

    settings = Settings(locale=locale, timezone=timezone)
    LOGGER.debug(
        "Settings loaded: locale=%s timezone=%s",
        settings.locale,
        settings.timezone or "<system>",
    )
    return settings


def load_settings(refresh: bool = False) -> Settings:
    """Load settings, re-reading the environment when ``refresh`` is set.

    The shared default DateMath is keyed on these settings, so a refresh
    that changes them also rebuilds it.
    """
    if refresh:
        _load_settings.cache_clear()
    return _load_settings()


__all__ = ["DEFAULT_LOCALE", "Settings", "load_settings"]

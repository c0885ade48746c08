"""Weekday display names keyed by locale.

Weekday numbers follow ISO 8601: 1 = Monday through 7 = Sunday.
"""

from dataclasses import dataclass

from epochcal.config import DEFAULT_LOCALE
from epochcal.log import get_logger

LOGGER = get_logger(__name__)


def _normalize(locale: str) -> str:
    return locale.strip().replace("-", "_").lower()


@dataclass(frozen=True)
class WeekdayNames:
    """Full weekday names for one locale, Monday first."""

    locale: str
    names: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.names) != 7:
            raise ValueError(
                f"WeekdayNames for '{self.locale}' needs 7 names, got {len(self.names)}"
            )

    def name(self, number: int) -> str:
        """Return the display name for ISO weekday ``number`` (1-7)."""
        if not (1 <= number <= 7):
            raise ValueError(f"Weekday number must be 1-7, got {number}")
        return self.names[number - 1]


_LOCALES: dict[str, WeekdayNames] = {}


def register(names: WeekdayNames) -> None:
    """Add or replace the weekday names for ``names.locale``."""
    key = _normalize(names.locale)
    if key in _LOCALES:
        LOGGER.debug("Replacing weekday names for locale %s", names.locale)
    else:
        LOGGER.debug("Registering weekday names for locale %s", names.locale)
    _LOCALES[key] = names


def for_locale(locale: str = DEFAULT_LOCALE) -> WeekdayNames:
    """
    Look up weekday names for a locale.

    Args:
        locale: Locale tag, case-insensitive; "zh-CN" and "zh_CN" are equivalent

    Raises:
        ValueError: If no names are registered for the locale

    Example:
        >>> for_locale("zh_CN").name(1)
        '星期一'
        >>> for_locale("en-us").name(7)
        'Sunday'
    """
    key = _normalize(locale)
    if key not in _LOCALES:
        valid = ", ".join(sorted(n.locale for n in _LOCALES.values()))
        raise ValueError(f"Unknown locale '{locale}'. Valid locales: {valid}")
    return _LOCALES[key]


def available_locales() -> list[str]:
    return sorted(n.locale for n in _LOCALES.values())


register(
    WeekdayNames(
        "zh_CN",
        ("星期一", "星期二", "星期三", "星期四", "星期五", "星期六", "星期日"),
    )
)
register(
    WeekdayNames(
        "en_US",
        ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    )
)

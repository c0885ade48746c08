"""Module-level shortcuts bound to a shared default DateMath.

The default instance is built from environment settings on first use and
reads the system clock and the host zone (unless EPOCHCAL_TZ is set).
"""

from datetime import timedelta
from functools import lru_cache

from epochcal.config import Settings, load_settings
from epochcal.core import DateMath
from epochcal.period import Period


@lru_cache(maxsize=1)
def _date_math_for(settings: Settings) -> DateMath:
    return DateMath.from_settings(settings)


def default_date_math() -> DateMath:
    """Return the shared DateMath for the current settings.

    Rebuilt whenever ``load_settings(refresh=True)`` yields different settings.
    """
    return _date_math_for(load_settings())


def now() -> int:
    return default_date_math().now()


def period_until_today(target: int) -> Period:
    return default_date_math().period_until_today(target)


def duration_until_now(target: int) -> timedelta:
    return default_date_math().duration_until_now(target)


def total_minutes_until_now(target: int) -> int:
    return default_date_math().total_minutes_until_now(target)


def total_hours_until_now(target: int) -> int:
    return default_date_math().total_hours_until_now(target)


def total_days_until_today(target: int) -> int:
    return default_date_math().total_days_until_today(target)


def total_months_until_today(target: int) -> int:
    return default_date_math().total_months_until_today(target)


def total_years_until_today(target: int) -> int:
    return default_date_math().total_years_until_today(target)


def start_of_this_month() -> int:
    return default_date_math().start_of_this_month()


def start_of_month(timestamp: int) -> int:
    return default_date_math().start_of_month(timestamp)


def end_of_this_month() -> int:
    return default_date_math().end_of_this_month()


def end_of_month(timestamp: int) -> int:
    return default_date_math().end_of_month(timestamp)


def start_of_this_week() -> int:
    return default_date_math().start_of_this_week()


def start_of_week(timestamp: int) -> int:
    return default_date_math().start_of_week(timestamp)


def end_of_this_week() -> int:
    return default_date_math().end_of_this_week()


def end_of_week(timestamp: int) -> int:
    return default_date_math().end_of_week(timestamp)


def start_of_day(timestamp: int) -> int:
    return default_date_math().start_of_day(timestamp)


def start_of_today() -> int:
    return default_date_math().start_of_today()


def end_of_day(timestamp: int) -> int:
    return default_date_math().end_of_day(timestamp)


def end_of_today() -> int:
    return default_date_math().end_of_today()


def weekday_number(timestamp: int) -> int:
    return default_date_math().weekday_number(timestamp)


def weekday_name(timestamp: int) -> str:
    return default_date_math().weekday_name(timestamp)

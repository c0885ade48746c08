from .clock import Clock, FixedClock, SystemClock
from .config import Settings, load_settings
from .core import DateMath
from .errors import EpochCalError, OutOfRangeError
from .functions import (
    default_date_math,
    duration_until_now,
    end_of_day,
    end_of_month,
    end_of_this_month,
    end_of_this_week,
    end_of_today,
    end_of_week,
    now,
    period_until_today,
    start_of_day,
    start_of_month,
    start_of_this_month,
    start_of_this_week,
    start_of_today,
    start_of_week,
    total_days_until_today,
    total_hours_until_now,
    total_minutes_until_now,
    total_months_until_today,
    total_years_until_today,
    weekday_name,
    weekday_number,
)
from .period import Period
from .weekdays import WeekdayNames

__all__ = [
    "DateMath",
    "Period",
    "Clock",
    "SystemClock",
    "FixedClock",
    "WeekdayNames",
    "Settings",
    "load_settings",
    "EpochCalError",
    "OutOfRangeError",
    "default_date_math",
    "now",
    "period_until_today",
    "duration_until_now",
    "total_minutes_until_now",
    "total_hours_until_now",
    "total_days_until_today",
    "total_months_until_today",
    "total_years_until_today",
    "start_of_this_month",
    "start_of_month",
    "end_of_this_month",
    "end_of_month",
    "start_of_this_week",
    "start_of_week",
    "end_of_this_week",
    "end_of_week",
    "start_of_day",
    "start_of_today",
    "end_of_day",
    "end_of_today",
    "weekday_number",
    "weekday_name",
]

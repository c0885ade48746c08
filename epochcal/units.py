"""Truncating counts of whole calendar units.

Every count here is taken by subtracting calendar fields, never by dividing
a flat duration. Month and year lengths vary, so "one month" between
Jan 31 and Feb 28 is decided by the day-of-month fields, not by 30 days of
elapsed time. Minute and hour counts compare naive local wall-clock fields,
which means a DST jump between the two sides counts as wall-clock time.

All counts truncate toward zero.
"""

from datetime import date, datetime, timedelta

from epochcal.util import HOUR, MINUTE

_MICROS = 1_000_000

# Packing a date as month * 32 + day keeps day-of-month ordering inside a
# month while 32 exceeds every month length.
_PACK = 32


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _micros(delta: timedelta) -> int:
    return (delta.days * 86400 + delta.seconds) * _MICROS + delta.microseconds


def _packed(d: date) -> int:
    return (d.year * 12 + d.month - 1) * _PACK + d.day


def days_between(start: date, end: date) -> int:
    return (end - start).days


def months_between(start: date, end: date) -> int:
    """Whole months from ``start`` to ``end``.

    Example:
        >>> months_between(date(2023, 1, 31), date(2023, 2, 28))
        0
        >>> months_between(date(2024, 1, 31), date(2024, 3, 1))
        1
    """
    return _trunc_div(_packed(end) - _packed(start), _PACK)


def years_between(start: date, end: date) -> int:
    return _trunc_div(months_between(start, end), 12)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes between two naive wall-clock datetimes."""
    return _trunc_div(_micros(_wall_delta(start, end)), MINUTE * _MICROS)


def hours_between(start: datetime, end: datetime) -> int:
    """Whole hours between two naive wall-clock datetimes."""
    return _trunc_div(_micros(_wall_delta(start, end)), HOUR * _MICROS)


def _wall_delta(start: datetime, end: datetime) -> timedelta:
    # Drop any zone so subtraction compares fields, not instants.
    return end.replace(tzinfo=None) - start.replace(tzinfo=None)

"""Utility constants and helpers for epochcal.

Time unit constants represent durations in seconds.
These are used throughout the API for consistent time representation.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from dateutil import tz as dateutil_tz

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_SECOND = timedelta(seconds=SECOND)


def resolve_zone(zone: str | tzinfo | None) -> tzinfo:
    """Return a tzinfo for ``zone``.

    ``None`` selects the host's local zone, a string is looked up as an
    IANA name (e.g. "UTC", "Asia/Shanghai"), and a tzinfo is returned as is.
    """
    if zone is None:
        return dateutil_tz.tzlocal()
    if isinstance(zone, tzinfo):
        return zone
    return ZoneInfo(zone)


def to_epoch_seconds(dt: datetime) -> int:
    """Floor an aware datetime to whole epoch seconds.

    Uses exact timedelta arithmetic so sub-second parts such as
    23:59:59.999999 never round up into the next second.
    """
    if dt.tzinfo is None:
        raise TypeError(f"Expected a timezone-aware datetime, got {dt!r}")
    return (dt - EPOCH) // _ONE_SECOND

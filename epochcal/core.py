"""Date arithmetic over epoch-second timestamps.

Every operation decomposes a timestamp into local calendar fields using the
instance's zone (the host zone by default), does its arithmetic on those
fields, and converts wall-clock results back to whole epoch seconds.
"""

from collections.abc import Callable
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Any

from dateutil.relativedelta import relativedelta

from epochcal import units
from epochcal.clock import Clock, SystemClock
from epochcal.config import DEFAULT_LOCALE, Settings, load_settings
from epochcal.errors import OutOfRangeError
from epochcal.log import get_logger
from epochcal.period import Period
from epochcal.util import resolve_zone, to_epoch_seconds
from epochcal.weekdays import WeekdayNames, for_locale

LOGGER = get_logger(__name__)

# Errors the datetime machinery raises for values it cannot represent.
_RANGE_ERRORS = (OverflowError, OSError, ValueError)


def _same_day(d: date) -> date:
    return d


def _monday_on_or_before(d: date) -> date:
    return d - timedelta(days=d.weekday())


def _sunday_on_or_after(d: date) -> date:
    return d + timedelta(days=6 - d.weekday())


def _first_of_month(d: date) -> date:
    return d.replace(day=1)


def _last_of_month(d: date) -> date:
    # relativedelta clamps day=31 to the month's length
    return d + relativedelta(day=31)


class DateMath:
    """Stateless date helpers bound to a zone, a clock and a weekday locale."""

    def __init__(
        self,
        tz: str | tzinfo | None = None,
        clock: Clock | None = None,
        locale: str | WeekdayNames | None = None,
    ):
        """
        Initialize date helpers.

        Args:
            tz: IANA timezone name or tzinfo; None uses the host's local zone
            clock: Source of "now"; defaults to SystemClock()
            locale: Weekday-name locale tag or WeekdayNames (default "zh_CN")

        Example:
            >>> dm = DateMath()
            >>> dm.start_of_today()
            >>> pinned = DateMath(tz="Asia/Shanghai", clock=FixedClock(1710469800))
        """
        self.zone: tzinfo = resolve_zone(tz)
        self.clock: Clock = clock if clock is not None else SystemClock()
        if isinstance(locale, WeekdayNames):
            self.weekday_names: WeekdayNames = locale
        else:
            self.weekday_names = for_locale(locale or DEFAULT_LOCALE)

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, clock: Clock | None = None
    ) -> "DateMath":
        """Build an instance from environment settings."""
        settings = settings or load_settings()
        LOGGER.debug(
            "Building DateMath from settings: locale=%s timezone=%s",
            settings.locale,
            settings.timezone or "<system>",
        )
        return cls(tz=settings.timezone, clock=clock, locale=settings.locale)

    def __repr__(self) -> str:
        return (
            f"DateMath(zone={self.zone!r}, clock={self.clock!r}, "
            f"locale={self.weekday_names.locale!r})"
        )

    # ------------------------------------------------------------------
    # Current time and decomposition
    # ------------------------------------------------------------------

    def now(self) -> int:
        """Return the current time as whole epoch seconds."""
        return to_epoch_seconds(self.clock.now())

    def today(self) -> date:
        """Return today's date in this instance's zone."""
        return self._local_now().date()

    def local_datetime(self, timestamp: int) -> datetime:
        """Return ``timestamp`` as an aware datetime in this instance's zone.

        Raises:
            OutOfRangeError: If the timestamp cannot be represented
        """
        try:
            return datetime.fromtimestamp(timestamp, tz=self.zone)
        except _RANGE_ERRORS as exc:
            raise self._out_of_range(timestamp, exc) from exc

    # ------------------------------------------------------------------
    # Elapsed time relative to now / today
    # ------------------------------------------------------------------

    def period_until_today(self, target: int) -> Period:
        """Return the (years, months, days) from the target's date to today.

        Positive when the target date is before today, zero on the same date,
        negative when it is after. Commonly used for ages ("N years M months").
        """
        return Period.between(self._local_date(target), self.today())

    def duration_until_now(self, target: int) -> timedelta:
        """Return the exact elapsed time from ``target`` to now.

        Unlike the ``total_*`` counts this subtracts instants, so it is not
        affected by DST shifts.
        """
        try:
            instant = datetime.fromtimestamp(target, tz=timezone.utc)
        except _RANGE_ERRORS as exc:
            raise self._out_of_range(target, exc) from exc
        return self.clock.now() - instant

    def total_minutes_until_now(self, target: int) -> int:
        return units.minutes_between(self.local_datetime(target), self._local_now())

    def total_hours_until_now(self, target: int) -> int:
        return units.hours_between(self.local_datetime(target), self._local_now())

    def total_days_until_today(self, target: int) -> int:
        return units.days_between(self._local_date(target), self.today())

    def total_months_until_today(self, target: int) -> int:
        return units.months_between(self._local_date(target), self.today())

    def total_years_until_today(self, target: int) -> int:
        return units.years_between(self._local_date(target), self.today())

    # ------------------------------------------------------------------
    # Period boundaries
    # ------------------------------------------------------------------

    def start_of_month(self, timestamp: int) -> int:
        """00:00:00 on the first day of the timestamp's month."""
        return self._boundary(self._local_date(timestamp), _first_of_month, time.min, timestamp)

    def start_of_this_month(self) -> int:
        return self._boundary(self.today(), _first_of_month, time.min, "today")

    def end_of_month(self, timestamp: int) -> int:
        """Last second of the last day of the timestamp's month."""
        return self._boundary(self._local_date(timestamp), _last_of_month, time.max, timestamp)

    def end_of_this_month(self) -> int:
        return self._boundary(self.today(), _last_of_month, time.max, "today")

    def start_of_week(self, timestamp: int) -> int:
        """00:00:00 on the Monday on or before the timestamp's date."""
        return self._boundary(
            self._local_date(timestamp), _monday_on_or_before, time.min, timestamp
        )

    def start_of_this_week(self) -> int:
        return self._boundary(self.today(), _monday_on_or_before, time.min, "today")

    def end_of_week(self, timestamp: int) -> int:
        """Last second of the Sunday on or after the timestamp's date."""
        return self._boundary(
            self._local_date(timestamp), _sunday_on_or_after, time.max, timestamp
        )

    def end_of_this_week(self) -> int:
        return self._boundary(self.today(), _sunday_on_or_after, time.max, "today")

    def start_of_day(self, timestamp: int) -> int:
        return self._boundary(self._local_date(timestamp), _same_day, time.min, timestamp)

    def start_of_today(self) -> int:
        return self._boundary(self.today(), _same_day, time.min, "today")

    def end_of_day(self, timestamp: int) -> int:
        return self._boundary(self._local_date(timestamp), _same_day, time.max, timestamp)

    def end_of_today(self) -> int:
        return self._boundary(self.today(), _same_day, time.max, "today")

    # ------------------------------------------------------------------
    # Weekday lookup
    # ------------------------------------------------------------------

    def weekday_number(self, timestamp: int) -> int:
        """ISO weekday of the timestamp's date: 1 = Monday ... 7 = Sunday."""
        return self.local_datetime(timestamp).isoweekday()

    def weekday_name(self, timestamp: int) -> str:
        """Full weekday name of the timestamp's date, e.g. "星期五"."""
        return self.weekday_names.name(self.weekday_number(timestamp))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _local_now(self) -> datetime:
        return self.clock.now().astimezone(self.zone)

    def _local_date(self, timestamp: int) -> date:
        return self.local_datetime(timestamp).date()

    def _boundary(
        self,
        day: date,
        adjust: Callable[[date], date],
        at: time,
        origin: Any,
    ) -> int:
        """Move ``day`` with ``adjust`` and return ``at`` on that date as epoch seconds.

        Wall times are resolved with fold=0: the earlier offset for repeated
        times and the pre-transition offset for skipped ones.
        """
        try:
            wall = datetime.combine(adjust(day), at, tzinfo=self.zone)
            return to_epoch_seconds(wall)
        except _RANGE_ERRORS as exc:
            raise self._out_of_range(origin, exc) from exc

    def _out_of_range(self, value: Any, exc: Exception) -> OutOfRangeError:
        LOGGER.warning("Value out of range for zone %r: %r (%s)", self.zone, value, exc)
        return OutOfRangeError(value, str(exc))

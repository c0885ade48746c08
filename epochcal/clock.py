"""Sources of "now".

DateMath never reads the wall clock directly; it asks a Clock. Production
code uses SystemClock, tests pin time with FixedClock.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone

from typing_extensions import override


class Clock(ABC):

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        pass


class SystemClock(Clock):
    """Clock backed by the host's system time."""

    @override
    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    @override
    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock(Clock):
    """Clock frozen at a single instant."""

    def __init__(self, instant: int | datetime):
        """
        Initialize a fixed clock.

        Args:
            instant: Unix timestamp in seconds, or a timezone-aware datetime

        Example:
            >>> FixedClock(1710469800)
            >>> FixedClock(datetime(2024, 3, 15, 10, 30, tzinfo=ZoneInfo("Asia/Shanghai")))
        """
        if isinstance(instant, datetime):
            if instant.tzinfo is None:
                raise TypeError(
                    f"FixedClock requires a timezone-aware datetime.\n"
                    f"Got naive datetime: {instant!r}\n"
                    f"Hint: Add timezone info:\n"
                    f"  from zoneinfo import ZoneInfo\n"
                    f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))"
                )
            self.instant: datetime = instant.astimezone(timezone.utc)
        elif isinstance(instant, int):
            self.instant = datetime.fromtimestamp(instant, tz=timezone.utc)
        else:
            raise TypeError(
                f"FixedClock instant must be int or datetime, "
                f"got {type(instant).__name__!r}: {instant!r}"
            )

    @override
    def now(self) -> datetime:
        return self.instant

    def advance(self, seconds: float) -> "FixedClock":
        """Return a new clock shifted by ``seconds`` (may be negative)."""
        return FixedClock(self.instant + timedelta(seconds=seconds))

    @override
    def __repr__(self) -> str:
        return f"FixedClock({self.instant.isoformat()})"

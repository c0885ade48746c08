"""Exception hierarchy for epochcal.

All epochcal-specific exceptions inherit from EpochCalError.
"""

from typing import Any


class EpochCalError(Exception):
    """Base exception for all epochcal errors."""

    pass


class OutOfRangeError(EpochCalError, OverflowError):
    """A timestamp or derived date cannot be represented.

    Raised when an input timestamp, or a date computed from it, falls
    outside the range supported by ``datetime`` (years 1 through 9999,
    and whatever the platform's ``localtime`` accepts).

    Examples:
        - ``DateMath().start_of_day(10**12)``
        - ``DateMath().end_of_week(ts)`` where ``ts`` is in the last week
          of year 9999
    """

    def __init__(self, value: Any, reason: str):
        super().__init__(f"{value!r} is out of range: {reason}")
        self.value: Any = value

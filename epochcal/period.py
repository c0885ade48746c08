"""Calendar-aware (years, months, days) differences between dates."""

import calendar
from dataclasses import dataclass
from datetime import date

from dateutil.relativedelta import relativedelta


@dataclass(frozen=True, kw_only=True)
class Period:
    years: int = 0
    months: int = 0
    days: int = 0

    @classmethod
    def between(cls, start: date, end: date) -> "Period":
        """Return the ISO calendar difference from ``start`` to ``end``.

        The result is positive when ``start`` is before ``end``. Months are
        counted first and the remainder is expressed in days, borrowing a
        month when the day-of-month fields point the other way:

            >>> Period.between(date(2024, 1, 31), date(2024, 3, 1))
            Period(years=0, months=1, days=1)
            >>> Period.between(date(2023, 1, 31), date(2023, 2, 28))
            Period(years=0, months=0, days=28)
            >>> Period.between(date(2024, 3, 1), date(2024, 1, 31))
            Period(years=0, months=-1, days=-1)
        """
        total_months = (end.year - start.year) * 12 + (end.month - start.month)
        days = end.day - start.day
        if total_months > 0 and days < 0:
            total_months -= 1
            anchor = start + relativedelta(months=total_months)
            days = (end - anchor).days
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= calendar.monthrange(end.year, end.month)[1]

        sign = -1 if total_months < 0 else 1
        years, months = divmod(abs(total_months), 12)
        return cls(years=sign * years, months=sign * months, days=days)

    @property
    def total_months(self) -> int:
        return self.years * 12 + self.months

    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0

    def is_negative(self) -> bool:
        return self.years < 0 or self.months < 0 or self.days < 0

    def to_relativedelta(self) -> relativedelta:
        return relativedelta(years=self.years, months=self.months, days=self.days)

    def __neg__(self) -> "Period":
        return Period(years=-self.years, months=-self.months, days=-self.days)

    def __str__(self) -> str:
        """ISO-8601 period, e.g. ``P1Y2M3D`` or ``P0D``."""
        if self.is_zero():
            return "P0D"
        parts = ["P"]
        if self.years:
            parts.append(f"{self.years}Y")
        if self.months:
            parts.append(f"{self.months}M")
        if self.days:
            parts.append(f"{self.days}D")
        return "".join(parts)

"""Tests for day, week and month boundaries."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from epochcal import DateMath, FixedClock, OutOfRangeError
from epochcal.util import DAY, HOUR

SHANGHAI = "Asia/Shanghai"
PACIFIC = "US/Pacific"


def _ts(*fields: int, tz: str = SHANGHAI) -> int:
    return int(datetime(*fields, tzinfo=ZoneInfo(tz)).timestamp())


def test_friday_scenario_boundaries():
    """Test all boundaries for 2024-03-15 10:30 (a Friday)."""
    t = _ts(2024, 3, 15, 10, 30)
    dm = DateMath(tz=SHANGHAI, clock=FixedClock(t))

    assert dm.start_of_month(t) == _ts(2024, 3, 1)
    assert dm.end_of_month(t) == _ts(2024, 3, 31, 23, 59, 59)
    assert dm.start_of_week(t) == _ts(2024, 3, 11)
    assert dm.end_of_week(t) == _ts(2024, 3, 17, 23, 59, 59)
    assert dm.start_of_day(t) == _ts(2024, 3, 15)
    assert dm.end_of_day(t) == _ts(2024, 3, 15, 23, 59, 59)
    assert dm.weekday_number(t) == 5
    assert dm.weekday_name(t) == "星期五"


def test_this_variants_follow_the_clock():
    """Test that the no-argument forms use the clock's current date."""
    t = _ts(2024, 3, 15, 10, 30)
    dm = DateMath(tz=SHANGHAI, clock=FixedClock(t))

    assert dm.start_of_this_month() == dm.start_of_month(t)
    assert dm.end_of_this_month() == dm.end_of_month(t)
    assert dm.start_of_this_week() == dm.start_of_week(t)
    assert dm.end_of_this_week() == dm.end_of_week(t)
    assert dm.start_of_today() == dm.start_of_day(t)
    assert dm.end_of_today() == dm.end_of_day(t)


def test_monday_midnight_is_its_own_week_start():
    """Test that a Monday midnight timestamp starts its own week."""
    monday = _ts(2024, 3, 11)
    dm = DateMath(tz=SHANGHAI)

    assert dm.start_of_week(monday) == monday
    assert dm.start_of_week(monday) == dm.start_of_day(monday)


def test_sunday_is_its_own_week_end():
    """Test that end_of_week on a Sunday returns that day's end."""
    sunday_noon = _ts(2024, 3, 17, 12)
    dm = DateMath(tz=SHANGHAI)

    assert dm.end_of_week(sunday_noon) == dm.end_of_day(sunday_noon)


def test_week_spanning_year_boundary():
    """Test week boundaries for 2025-01-01 (a Wednesday)."""
    new_year = _ts(2025, 1, 1, 9)
    dm = DateMath(tz=SHANGHAI)

    assert dm.start_of_week(new_year) == _ts(2024, 12, 30)
    assert dm.end_of_week(new_year) == _ts(2025, 1, 5, 23, 59, 59)


def test_end_of_february():
    """Test that end_of_month respects leap years."""
    dm = DateMath(tz=SHANGHAI)

    assert dm.end_of_month(_ts(2024, 2, 10)) == _ts(2024, 2, 29, 23, 59, 59)
    assert dm.end_of_month(_ts(2023, 2, 10)) == _ts(2023, 2, 28, 23, 59, 59)


def test_boundaries_depend_on_zone():
    """Test that the same instant falls on different local days per zone."""
    # 2024-03-14 20:00 UTC is 2024-03-15 04:00 in Shanghai
    instant = _ts(2024, 3, 14, 20, tz="UTC")

    assert DateMath(tz="UTC").start_of_day(instant) == _ts(2024, 3, 14, tz="UTC")
    assert DateMath(tz=SHANGHAI).start_of_day(instant) == _ts(2024, 3, 15)
    assert DateMath(tz="UTC").weekday_number(instant) == 4
    assert DateMath(tz=SHANGHAI).weekday_number(instant) == 5


@pytest.mark.parametrize("tz", ["UTC", SHANGHAI, PACIFIC])
def test_boundary_properties_hold_across_two_months(tz: str):
    """Test ordering and weekday properties for many timestamps."""
    dm = DateMath(tz=tz)
    first = _ts(2024, 2, 20, tz=tz)
    zone = ZoneInfo(tz)

    for t in range(first, first + 60 * DAY, 3 * HOUR + 17):
        day_start = dm.start_of_day(t)
        assert day_start <= t <= dm.end_of_day(t)
        assert dm.start_of_day(day_start) == day_start

        assert dm.weekday_number(dm.start_of_week(t)) == 1
        assert dm.weekday_number(dm.end_of_week(t)) == 7
        assert dm.start_of_week(t) <= day_start
        assert dm.start_of_month(t) <= day_start

        month_start = datetime.fromtimestamp(dm.start_of_month(t), tz=zone)
        assert (month_start.day, month_start.hour, month_start.minute, month_start.second) == (1, 0, 0, 0)


def test_dst_days_have_local_lengths():
    """Test that spring-forward and fall-back days are 23 and 25 hours long."""
    dm = DateMath(tz=PACIFIC)

    spring = _ts(2024, 3, 10, 12, tz=PACIFIC)
    assert dm.start_of_day(spring) == _ts(2024, 3, 10, tz=PACIFIC)
    assert dm.end_of_day(spring) - dm.start_of_day(spring) == 23 * HOUR - 1

    fall = _ts(2024, 11, 3, 12, tz=PACIFIC)
    assert dm.end_of_day(fall) - dm.start_of_day(fall) == 25 * HOUR - 1


def test_skipped_midnight_resolves_to_first_valid_instant():
    """Test start_of_day when local midnight does not exist."""
    # Sao Paulo jumped from 00:00 to 01:00 on 2018-11-04
    tz = "America/Sao_Paulo"
    dm = DateMath(tz=tz)

    noon = _ts(2018, 11, 4, 12, tz=tz)
    assert dm.start_of_day(noon) == _ts(2018, 11, 4, 1, tz=tz)


def test_out_of_range_timestamp():
    """Test that unrepresentable timestamps raise OutOfRangeError."""
    dm = DateMath(tz="UTC")

    with pytest.raises(OutOfRangeError) as info:
        dm.start_of_day(10**15)
    assert info.value.value == 10**15
    assert isinstance(info.value, OverflowError)

    with pytest.raises(OutOfRangeError):
        dm.weekday_number(-(10**15))


def test_out_of_range_derived_date():
    """Test that a boundary past year 9999 raises OutOfRangeError."""
    dm = DateMath(tz="UTC")
    last_day = _ts(9999, 12, 31, tz="UTC")

    assert dm.end_of_month(last_day) == _ts(9999, 12, 31, 23, 59, 59, tz="UTC")
    with pytest.raises(OutOfRangeError):
        dm.end_of_week(last_day)


def test_out_of_range_elapsed_operations():
    """Test that elapsed-time operations reject unrepresentable targets."""
    dm = DateMath(tz="UTC", clock=FixedClock(_ts(2024, 3, 15, tz="UTC")))

    with pytest.raises(OutOfRangeError) as info:
        dm.duration_until_now(10**15)
    assert info.value.value == 10**15

    with pytest.raises(OutOfRangeError) as info:
        dm.period_until_today(10**15)
    assert info.value.value == 10**15

    with pytest.raises(OutOfRangeError):
        dm.total_days_until_today(-(10**15))

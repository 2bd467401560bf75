import math
from datetime import datetime, timedelta, timezone

import pytest

from solar_sim.core.constants import J2000_EPOCH, JD_J2000, MS_PER_DAY
from solar_sim.core.epoch import (
    J2000_EPOCH_MS,
    days_since_epoch,
    instant_from_days,
    days_since_epoch_from_unix_ms,
    unix_ms_from_days,
    days_since_epoch_now,
    days_from_julian_date,
)


def test_reference_epoch_is_day_zero():
    assert days_since_epoch(J2000_EPOCH) == 0.0
    assert J2000_EPOCH == datetime(2000, 1, 1, 12, tzinfo=timezone.utc)


def test_whole_and_fractional_days():
    assert days_since_epoch(datetime(2000, 1, 2, 12, tzinfo=timezone.utc)) == 1.0
    assert days_since_epoch(datetime(2000, 1, 1, 18, tzinfo=timezone.utc)) == 0.25
    assert days_since_epoch(datetime(1999, 12, 31, 12, tzinfo=timezone.utc)) == -1.0


def test_naive_datetime_is_utc():
    naive = datetime(2025, 10, 3, 12, 0, 0)
    aware = naive.replace(tzinfo=timezone.utc)
    assert days_since_epoch(naive) == days_since_epoch(aware)


def test_other_timezones_are_respected():
    plus_two = timezone(timedelta(hours=2))
    assert days_since_epoch(datetime(2000, 1, 1, 14, tzinfo=plus_two)) == 0.0


def test_instant_from_days_round_trip():
    for days in [-36525.0, -0.5, 0.0, 0.25, 9406.0, 1e5]:
        instant = instant_from_days(days)
        assert instant.tzinfo is not None
        assert math.isclose(days_since_epoch(instant), days, abs_tol=1e-9)


def test_unix_millisecond_timeline():
    # 2000-01-01T12:00:00Z
    assert J2000_EPOCH_MS == 946728000000
    assert days_since_epoch_from_unix_ms(J2000_EPOCH_MS + MS_PER_DAY) == 1.0
    assert unix_ms_from_days(-2.0) == J2000_EPOCH_MS - 2 * MS_PER_DAY


def test_now_is_after_epoch():
    assert days_since_epoch_now() > 9000.0


def test_julian_date_offsets():
    assert days_from_julian_date(JD_J2000) == 0.0
    assert days_from_julian_date(2460977.98) == pytest.approx(9432.98)

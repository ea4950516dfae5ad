from datetime import date, datetime, timedelta, timezone

from freezegun import freeze_time

from staffsphere.utils.date_utils import (
    get_day_bounds,
    to_naive_local,
)


def test_get_day_bounds_from_datetime():
    start, end = get_day_bounds(datetime(2025, 1, 15, 10, 30))

    assert start == datetime(2025, 1, 15, 0, 0, 0)
    assert end == datetime(2025, 1, 15, 23, 59, 59, 999999)


def test_get_day_bounds_from_date():
    start, end = get_day_bounds(date(2024, 2, 29))

    assert start == datetime(2024, 2, 29)
    assert end == datetime(2024, 2, 29, 23, 59, 59, 999999)


def test_get_day_bounds_last_instant_stays_in_day():
    start, end = get_day_bounds(datetime(2025, 3, 1, 23, 59, 59, 999999))

    assert start.date() == end.date() == date(2025, 3, 1)


@freeze_time("2025-06-10 17:45:00")
def test_get_day_bounds_defaults_to_today():
    start, end = get_day_bounds()

    assert start == datetime(2025, 6, 10)
    assert end.date() == date(2025, 6, 10)


def test_to_naive_local():
    aware = datetime(2025, 1, 15, 10, 30, tzinfo=timezone(timedelta(hours=5)))

    assert to_naive_local(None) is None
    assert to_naive_local(datetime(2025, 1, 15)) == datetime(2025, 1, 15)
    assert to_naive_local(aware) == aware.astimezone().replace(tzinfo=None)

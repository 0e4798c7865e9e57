from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from wareki.core.converter import compute_fields, sexagenary_day, sexagenary_year
from wareki.core.errors import OutOfRangeError
from wareki.core.tables import (
    HEISEI,
    LUNISOLAR_START,
    MEIJI,
    REIWA,
    REIWA_START,
    SHOUWA,
    SUIKO,
    TAISHOU,
    year_start,
)
from wareki.core.timeutil import JST


def _fields(y: int, m: int, d: int, **kwargs):
    return compute_fields(datetime(y, m, d, tzinfo=JST), **kwargs)


@pytest.mark.parametrize(
    "before, after, era_before, year_before, era_after",
    [
        ((2019, 4, 30), (2019, 5, 1), HEISEI, 31, REIWA),
        ((1989, 1, 7), (1989, 1, 8), SHOUWA, 64, HEISEI),
        ((1926, 12, 24), (1926, 12, 25), TAISHOU, 15, SHOUWA),
        ((1912, 7, 29), (1912, 7, 30), MEIJI, 45, TAISHOU),
    ],
)
def test_era_boundaries_are_exact(before, after, era_before, year_before, era_after):
    a = _fields(*before)
    assert a.era == era_before
    assert a.year_of_era == year_before
    assert a.month == before[1] - 1
    assert a.day_of_month == before[2]

    b = _fields(*after)
    assert b.era == era_after
    assert b.year_of_era == 1
    assert b.month == after[1] - 1
    assert b.day_of_month == after[2]
    assert not b.lunisolar


def test_last_instant_before_reiwa_is_heisei():
    fs = compute_fields(REIWA_START - timedelta(microseconds=1))
    assert fs.era == HEISEI
    assert fs.year_of_era == 31
    assert compute_fields(REIWA_START).era == REIWA


def test_gregorian_adoption():
    fs = _fields(1872, 12, 31)
    assert fs.era == MEIJI
    assert fs.year_of_era == 5
    assert fs.civil_year == 1872
    assert fs.month == 11
    assert fs.month_code == 12
    assert fs.day_of_month == 2
    assert fs.lunisolar

    fs = _fields(1873, 1, 1)
    assert fs.era == MEIJI
    assert fs.year_of_era == 6
    assert fs.month == 0
    assert fs.day_of_month == 1
    assert not fs.lunisolar


def test_lunisolar_new_year_is_after_gregorian_new_year():
    # 1872-02-08 は旧暦 1871 年の最終月
    fs = _fields(1872, 2, 8)
    assert fs.civil_year == 1871
    assert fs.month == 11
    assert fs.year_of_era == 4

    fs = _fields(1872, 2, 9)
    assert fs.civil_year == 1872
    assert fs.month == 0
    assert fs.day_of_month == 1


def test_leap_month_code():
    # 1868 (明治元年) は閏4月。正月朔日から 118 日目が閏4月1日
    t = year_start(1868) + timedelta(days=118)
    fs = compute_fields(t)
    assert fs.era == MEIJI
    assert fs.year_of_era == 1
    assert fs.month == 4
    assert fs.month_code == 24
    assert fs.day_of_month == 1
    assert fs.is_leap_month

    fs = compute_fields(t + timedelta(days=29))
    assert fs.month == 5
    assert fs.month_code == 5
    assert not fs.is_leap_month


def test_first_supported_instant():
    fs = compute_fields(LUNISOLAR_START)
    assert fs.era == SUIKO
    assert fs.year_of_era == 1
    assert fs.civil_year == 593
    assert fs.month == 0
    assert fs.day_of_month == 1

    with pytest.raises(OutOfRangeError):
        compute_fields(LUNISOLAR_START - timedelta(microseconds=1))


def test_north_court_only_changes_era_in_split_window():
    t = year_start(1340) + timedelta(days=10)
    south = compute_fields(t)
    north = compute_fields(t, north_court=True)
    assert south.era == 165  # 興国
    assert north.era == 173  # 暦応
    assert south.year_of_era == 1
    assert north.year_of_era == 3
    assert (south.month, south.day_of_month) == (north.month, north.day_of_month)

    for y in (1330, 1393, 1600):
        t = year_start(y) + timedelta(days=40)
        assert compute_fields(t).era == compute_fields(t, north_court=True).era


def test_sexagenary_year():
    assert sexagenary_year(1864) == (0, 0)  # 甲子
    assert sexagenary_year(1868) == (4, 4)  # 戊辰
    assert sexagenary_year(2019) == (5, 11)  # 己亥
    fs = _fields(2019, 5, 1)
    assert (fs.year_stem, fs.year_branch) == (5, 11)


def test_sexagenary_year_follows_lunisolar_year():
    # 旧暦の正月前は前年の干支
    assert _fields(1872, 2, 8).year_stem == sexagenary_year(1871)[0]
    assert _fields(1872, 2, 9).year_branch == sexagenary_year(1872)[1]


def test_sexagenary_day():
    fs = _fields(2019, 5, 1)
    assert (fs.day_stem, fs.day_branch) == (4, 10)  # 戊戌
    d = datetime(2019, 5, 1).date()
    assert sexagenary_day(d + timedelta(days=1)) == (5, 11)
    assert sexagenary_day(d + timedelta(days=60)) == (4, 10)


def test_time_of_day_does_not_change_the_day():
    a = compute_fields(datetime(1868, 6, 1, 0, 0, tzinfo=JST))
    b = compute_fields(datetime(1868, 6, 1, 23, 59, 59, tzinfo=JST))
    assert (a.month, a.day_of_month) == (b.month, b.day_of_month)


def test_other_timezones_are_normalized_to_jst():
    from datetime import timezone

    # 2019-04-30 15:00 UTC == 2019-05-01 00:00 JST
    fs = compute_fields(datetime(2019, 4, 30, 15, 0, tzinfo=timezone.utc))
    assert fs.era == REIWA
    assert fs.day_of_month == 1


def test_weekday():
    assert _fields(2019, 5, 1).weekday == 3  # 水曜
    assert _fields(2023, 1, 1).weekday == 0  # 日曜


def test_naive_datetime_is_rejected():
    with pytest.raises(ValueError):
        compute_fields(datetime(2019, 5, 1))

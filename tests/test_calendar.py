from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from wareki.core.calendar import JapaneseCalendar
from wareki.core.config import WarekiConfig
from wareki.core.constructor import instant_for, instant_for_civil
from wareki.core.converter import compute_fields
from wareki.core.errors import (
    InvalidArgumentError,
    OutOfRangeError,
    UnsupportedOperationError,
)
from wareki.core.fields import WarekiField
from wareki.core.gregorian import GregorianCalendar
from wareki.core.months import last_day_of_month, month_code_from_index
from wareki.core.tables import (
    HEISEI,
    LUNISOLAR_START,
    MEIJI,
    REIWA,
    SHOUWA,
    SUIKO,
    TAISHOU,
    YEARS,
)
from wareki.core.timeutil import JST

F = WarekiField


@pytest.fixture(autouse=True)
def _south_court_default(monkeypatch):
    monkeypatch.delenv("WAREKI_NORTH_COURT", raising=False)


def _jst(*args) -> datetime:
    return datetime(*args, tzinfo=JST)


def _wareki(cal: JapaneseCalendar):
    return (cal.get(F.ERA), cal.get(F.YEAR_OF_ERA), cal.get(F.MONTH_CODE), cal.get(F.DAY_OF_MONTH))


# ----------------------------
# construction / read
# ----------------------------
def test_reiwa_first_day():
    cal = JapaneseCalendar.of(2019, 5, 1)
    assert cal.get(F.ERA) == REIWA
    assert cal.get(F.YEAR_OF_ERA) == 1
    assert cal.get(F.CIVIL_YEAR) == 2019
    assert cal.get(F.MONTH) == 4
    assert cal.get("month_code") == 5
    assert cal.get(F.DAY_OF_MONTH) == 1
    assert cal.get(F.WEEKDAY) == 3

    assert cal.get_name(F.ERA) == "令和"
    assert cal.get_name(F.MONTH_CODE) == "5"
    assert cal.get_name(F.YEAR_STEM) == "己"
    assert cal.get_name(F.YEAR_BRANCH) == "亥"
    assert cal.get_name(F.DAY_STEM) == "戊"
    assert cal.get_name(F.DAY_BRANCH) == "戌"
    assert cal.get_name(F.WEEKDAY) == "水"


def test_leap_month_name():
    cal = JapaneseCalendar.from_era(MEIJI, 1, 24, 1)
    assert cal.get(F.MONTH) == 4
    assert cal.get_name(F.MONTH_CODE) == "閏4"
    assert cal.fields().is_leap_month


def test_get_name_rejects_numeric_fields():
    cal = JapaneseCalendar.of(2019, 5, 1)
    for f in (F.YEAR_OF_ERA, F.CIVIL_YEAR, F.MONTH, F.DAY_OF_MONTH):
        with pytest.raises(UnsupportedOperationError):
            cal.get_name(f)


def test_unknown_field_is_rejected():
    cal = JapaneseCalendar.of(2019, 5, 1)
    with pytest.raises(ValueError):
        cal.get("hour")


def test_before_floor_is_out_of_range():
    cal = JapaneseCalendar(LUNISOLAR_START - timedelta(days=1))
    with pytest.raises(OutOfRangeError):
        cal.get(F.ERA)


def test_default_instant_is_now():
    cal = JapaneseCalendar()
    assert cal.get(F.ERA) >= REIWA
    assert cal.instant.tzinfo is not None


# ----------------------------
# cache / collaborator
# ----------------------------
def test_gregorian_changes_invalidate_cached_fields():
    cal = JapaneseCalendar.of(2019, 4, 30)
    assert cal.get(F.ERA) == HEISEI

    cal.gregorian.add_days(1)
    assert cal.get(F.ERA) == REIWA

    cal.gregorian.set_date(1989, 1, 7)
    assert _wareki(cal) == (SHOUWA, 64, 1, 7)


def test_fields_are_cached_until_instant_changes():
    cal = JapaneseCalendar.of(2019, 5, 1)
    a = cal.fields()
    assert cal.fields() is a
    cal.invalidate()
    b = cal.fields()
    assert b is not a
    assert b == a


def test_north_court_toggle():
    cal = JapaneseCalendar.from_era(165, 1, 2, 1)  # 興国元年
    assert cal.get(F.ERA) == 165
    cal.north_court = True
    assert cal.north_court
    assert cal.get(F.ERA) == 173  # 暦応
    assert cal.get(F.YEAR_OF_ERA) == 3


def test_north_court_from_config():
    t = instant_for(165, 1, 2, 1)
    assert JapaneseCalendar(t, config=WarekiConfig(north_court=True)).get(F.ERA) == 173
    # 明示した引数が優先
    assert JapaneseCalendar(t, north_court=False, config=WarekiConfig(north_court=True)).get(F.ERA) == 165


def test_north_court_default_follows_env(monkeypatch):
    t = instant_for(165, 1, 2, 1)
    monkeypatch.setenv("WAREKI_NORTH_COURT", "1")
    cal = JapaneseCalendar(t)
    assert cal.north_court
    assert cal.get(F.ERA) == 173
    assert JapaneseCalendar(t, north_court=False).get(F.ERA) == 165
    assert JapaneseCalendar(t, config=WarekiConfig()).get(F.ERA) == 165


def test_copy_is_independent():
    cal = JapaneseCalendar.of(2019, 5, 1, north_court=True)
    other = cal.copy()
    other.add(F.DAY_OF_MONTH, 1)
    assert cal.get(F.DAY_OF_MONTH) == 1
    assert other.get(F.DAY_OF_MONTH) == 2
    assert other.north_court


def test_gregorian_calendar_reads():
    g = GregorianCalendar.of(2019, 5, 1, 12, 34, 56)
    assert (g.year, g.month, g.day) == (2019, 5, 1)
    assert (g.hour, g.minute, g.second) == (12, 34, 56)
    assert g.weekday == 3
    assert g.local_date() == date(2019, 5, 1)
    r = g.revision
    g.add_months(1)
    assert g.revision == r + 1
    assert (g.year, g.month, g.day) == (2019, 6, 1)
    assert g.hour == 12


def test_gregorian_add_months_clamps_day():
    g = GregorianCalendar.of(2020, 1, 31)
    g.add_months(1)
    assert (g.month, g.day) == (2, 29)


# ----------------------------
# set_era
# ----------------------------
def test_set_era_resets_time():
    cal = JapaneseCalendar.of(2000, 1, 1, 15, 30)
    cal.set_era(REIWA, 2, 3, 4)
    assert cal.instant == _jst(2020, 3, 4)
    assert _wareki(cal) == (REIWA, 2, 3, 4)


def test_set_era_defaults_to_new_year():
    cal = JapaneseCalendar.of(2000, 1, 1)
    cal.set_era(MEIJI, 1)
    assert cal.get(F.CIVIL_YEAR) == 1868
    assert cal.get(F.MONTH) == 0
    assert cal.get(F.DAY_OF_MONTH) == 1


def test_set_era_allows_year_overflow_into_next_era():
    cal = JapaneseCalendar.of(2000, 1, 1)
    cal.set_era(HEISEI, 31, 5, 1)
    assert cal.instant == _jst(2019, 5, 1)
    assert _wareki(cal) == (REIWA, 1, 5, 1)


@pytest.mark.parametrize(
    "era, year, month, day",
    [
        (256, 1, 1, 1),
        (-1, 1, 1, 1),
        (REIWA, 0, 1, 1),
        (REIWA, 1, 0, 1),
        (REIWA, 1, 13, 1),
        (REIWA, 1, 20, 1),
        (REIWA, 1, 33, 1),
        (REIWA, 1, 1, 0),
        (REIWA, 1, 1, 32),
        (REIWA, 2, 2, 30),  # 2020-02-30
        (REIWA, 1, 4, 31),
        (MEIJI, 2, 24, 1),  # 1869 に閏4月は無い
        (MEIJI, 5, 12, 3),  # 1872 最終月は2日まで
        (MEIJI, 2, 4, 30),  # 1869 の4月は小の月
    ],
)
def test_set_era_rejects_invalid(era, year, month, day):
    cal = JapaneseCalendar.of(2000, 1, 1)
    before = cal.instant
    with pytest.raises(InvalidArgumentError):
        cal.set_era(era, year, month, day)
    assert cal.instant == before


def test_final_lunisolar_day():
    cal = JapaneseCalendar.from_era(MEIJI, 5, 12, 2)
    assert cal.instant == _jst(1872, 12, 31)
    assert cal.fields().lunisolar


# ----------------------------
# round trip
# ----------------------------
def test_lunisolar_round_trip_every_day():
    for rec in YEARS:
        for index in range(rec.months):
            code = month_code_from_index(rec.leap, index)
            for day in range(1, last_day_of_month(rec, index) + 1):
                t = instant_for_civil(rec.year, code, day)
                fs = compute_fields(t)
                assert (fs.civil_year, fs.month, fs.month_code, fs.day_of_month) == (rec.year, index, code, day)
                assert instant_for(fs.era, fs.year_of_era, fs.month_code, fs.day_of_month) == t

                north = compute_fields(t, north_court=True)
                assert instant_for(north.era, north.year_of_era, north.month_code, north.day_of_month) == t


def test_gregorian_round_trip_first_days():
    for y in (1873, 1912, 1926, 1989, 2019, 2100):
        for m in range(1, 13):
            t = _jst(y, m, 1)
            fs = compute_fields(t)
            assert instant_for(fs.era, fs.year_of_era, fs.month_code, fs.day_of_month) == t


# ----------------------------
# add
# ----------------------------
def test_add_day_across_reiwa():
    cal = JapaneseCalendar.of(2019, 4, 30)
    cal.add(F.DAY_OF_MONTH, 1)
    assert _wareki(cal) == (REIWA, 1, 5, 1)


@pytest.mark.parametrize(
    "start, era, year",
    [
        ((1989, 1, 7), HEISEI, 1),
        ((1926, 12, 24), SHOUWA, 1),
        ((1912, 7, 29), TAISHOU, 1),
    ],
)
def test_add_day_across_era_changes(start, era, year):
    cal = JapaneseCalendar.of(*start)
    cal.add(F.DAY_OF_MONTH, 1)
    assert cal.get(F.ERA) == era
    assert cal.get(F.YEAR_OF_ERA) == year


def test_add_day_across_calendar_reform():
    cal = JapaneseCalendar.of(1872, 12, 31)
    assert _wareki(cal) == (MEIJI, 5, 12, 2)
    cal.add(F.DAY_OF_MONTH, 1)
    assert _wareki(cal) == (MEIJI, 6, 1, 1)
    assert not cal.fields().lunisolar
    cal.add(F.DAY_OF_MONTH, -1)
    assert _wareki(cal) == (MEIJI, 5, 12, 2)


def test_add_day_below_floor_is_unsupported():
    cal = JapaneseCalendar.from_era(SUIKO, 1, 1, 1)
    before = cal.instant
    with pytest.raises(UnsupportedOperationError):
        cal.add(F.DAY_OF_MONTH, -1)
    assert cal.instant == before


def test_add_keeps_time_of_day():
    cal = JapaneseCalendar.of(2019, 4, 30, 10, 20, 30)
    cal.add(F.DAY_OF_MONTH, 1)
    assert cal.instant == _jst(2019, 5, 1, 10, 20, 30)
    cal.add(F.YEAR_OF_ERA, 1)
    assert cal.instant == _jst(2020, 5, 1, 10, 20, 30)


def test_add_zero_is_noop():
    cal = JapaneseCalendar.of(2019, 5, 1)
    rev = cal.gregorian.revision
    cal.add(F.MONTH, 0)
    assert cal.gregorian.revision == rev


@pytest.mark.parametrize("field", [F.ERA, F.MONTH_CODE, F.YEAR_STEM, F.YEAR_BRANCH, F.DAY_STEM, F.DAY_BRANCH, F.WEEKDAY])
def test_add_to_derived_field_is_unsupported(field):
    cal = JapaneseCalendar.of(2019, 5, 1)
    with pytest.raises(UnsupportedOperationError):
        cal.add(field, 1)


def test_add_year_clamps_thirtieth_day():
    # 1868 3月 (大) 30日 -> 1867 3月 (小) は29日まで
    cal = JapaneseCalendar.from_era(MEIJI, 1, 3, 30)
    cal.add(F.YEAR_OF_ERA, -1)
    assert cal.get(F.CIVIL_YEAR) == 1867
    assert cal.get(F.MONTH_CODE) == 3
    assert cal.get(F.DAY_OF_MONTH) == 29


def test_add_year_drops_missing_leap_month():
    cal = JapaneseCalendar.from_era(MEIJI, 1, 24, 1)
    cal.add(F.CIVIL_YEAR, 1)
    assert cal.get(F.CIVIL_YEAR) == 1869
    assert cal.get(F.MONTH_CODE) == 4
    assert cal.get(F.DAY_OF_MONTH) == 1


def test_add_year_into_gregorian_clamps_february():
    cal = JapaneseCalendar.from_era(MEIJI, 4, 2, 30)  # 1871 2月30日
    cal.add(F.YEAR_OF_ERA, 2)
    assert cal.instant == _jst(1873, 2, 28)


def test_add_year_from_gregorian_into_lunisolar():
    cal = JapaneseCalendar.of(1873, 12, 31)
    cal.add(F.YEAR_OF_ERA, -1)
    # 1872 の12月は2日で終わる
    assert _wareki(cal) == (MEIJI, 5, 12, 2)


def test_add_year_leap_day():
    cal = JapaneseCalendar.of(2020, 2, 29)
    cal.add(F.YEAR_OF_ERA, 1)
    assert cal.instant == _jst(2021, 2, 28)


def test_add_year_below_floor_is_unsupported():
    cal = JapaneseCalendar.from_era(SUIKO, 3, 1, 1)
    before = cal.instant
    with pytest.raises(UnsupportedOperationError):
        cal.add(F.YEAR_OF_ERA, -3)
    assert cal.instant == before


def test_add_month_enters_leap_month():
    cal = JapaneseCalendar.from_era(MEIJI, 1, 4, 1)
    cal.add(F.MONTH, 1)
    assert cal.get(F.MONTH_CODE) == 24
    cal.add(F.MONTH, 1)
    assert cal.get(F.MONTH_CODE) == 5


def test_add_month_across_lunisolar_years():
    cal = JapaneseCalendar.from_era(MEIJI, 1, 12, 1)
    cal.add(F.MONTH, 1)
    assert (cal.get(F.CIVIL_YEAR), cal.get(F.MONTH_CODE)) == (1869, 1)
    # 1868 は13ヶ月
    cal.add(F.MONTH, -13)
    assert (cal.get(F.CIVIL_YEAR), cal.get(F.MONTH_CODE)) == (1868, 1)


def test_add_month_leaves_lunisolar_regime():
    # 1873-01-01 0:00 を起点に月加算するので日と時刻は引き継がない
    cal = JapaneseCalendar.from_era(MEIJI, 5, 11, 15)
    cal.add(F.MONTH, 3)
    assert cal.instant == _jst(1873, 2, 1)

    cal = JapaneseCalendar(_jst(1872, 12, 31, 18, 30))
    cal.add(F.MONTH, 1)
    assert cal.instant == _jst(1873, 1, 1)

    cal = JapaneseCalendar.from_era(MEIJI, 5, 1, 20)
    cal.add(F.MONTH, 25)
    assert cal.instant == _jst(1874, 2, 1)


def test_add_month_enters_lunisolar_regime_backwards():
    cal = JapaneseCalendar.of(1873, 1, 10)
    cal.add(F.MONTH, -1)
    assert _wareki(cal) == (MEIJI, 5, 12, 2)

    cal = JapaneseCalendar.of(1874, 3, 1)
    cal.add(F.MONTH, -15)
    assert _wareki(cal) == (MEIJI, 5, 12, 1)


def test_add_month_in_gregorian_regime():
    cal = JapaneseCalendar.of(2019, 3, 31)
    cal.add(F.MONTH, 1)
    assert cal.instant == _jst(2019, 4, 30)
    assert cal.get(F.ERA) == HEISEI
    cal.add(F.MONTH, 1)
    assert _wareki(cal) == (REIWA, 1, 5, 30)


def test_add_month_below_floor_is_unsupported():
    cal = JapaneseCalendar.from_era(SUIKO, 1, 1, 1)
    before = cal.instant
    with pytest.raises(UnsupportedOperationError):
        cal.add(F.MONTH, -1)
    assert cal.instant == before

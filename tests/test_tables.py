from __future__ import annotations

from datetime import datetime

import pytest

from wareki.core.errors import InvalidArgumentError, OutOfRangeError
from wareki.core.months import days_before_month, last_day_of_month, month_lengths
from wareki.core.tables import (
    ERA_BOUNDARIES,
    ERAS,
    GREGORIAN_START,
    HEISEI,
    LUNISOLAR_START,
    REIWA,
    REIWA_START,
    SUIKO,
    YEARS,
    era_record,
    find_era,
    year_record,
    year_start,
)
from wareki.core.timeutil import DAY, JST, from_epoch_ms, to_epoch_ms


def test_table_sizes():
    assert len(YEARS) == 1872 - 593 + 1
    assert len(ERAS) == 256
    assert YEARS[0].year == 593
    assert YEARS[-1].year == 1872


def test_month_count_matches_leap_position():
    for rec in YEARS:
        assert rec.months == 12 + (1 if rec.has_leap else 0)
        if rec.has_leap:
            assert 1 <= rec.leap <= 12
        assert 0 <= rec.mask < (1 << rec.months)


def test_month_lengths_sum_to_distance_between_new_years():
    for rec in YEARS[:-1]:
        days = (year_start(rec.year + 1) - year_start(rec.year)) // DAY
        assert sum(month_lengths(rec.year)) == days, rec.year


def test_last_lunisolar_year_ends_at_gregorian_adoption():
    rec = year_record(1872)
    days = (GREGORIAN_START - year_start(1872)) // DAY
    assert days == days_before_month(rec, 11) + last_day_of_month(rec, 11)
    assert year_start(1872) == datetime(1872, 2, 9, tzinfo=JST)


def test_year_starts_are_jst_midnight():
    for rec in YEARS:
        t = year_start(rec.year)
        assert (t.hour, t.minute, t.second, t.microsecond) == (0, 0, 0, 0)


def test_era_of_each_year_has_started():
    for rec in YEARS:
        assert era_record(rec.era).first_year <= rec.year
        if rec.north_era is not None:
            assert era_record(rec.north_era).first_year <= rec.year


def test_boundaries_match_epoch_millis():
    assert to_epoch_ms(GREGORIAN_START) == -3061011600000
    assert to_epoch_ms(REIWA_START) == 1556636400000
    assert from_epoch_ms(600188400000) == datetime(1989, 1, 8, tzinfo=JST)
    assert LUNISOLAR_START == from_epoch_ms(-43450506000000)


def test_boundaries_are_strictly_decreasing():
    starts = [t for t, _ in ERA_BOUNDARIES]
    assert starts == sorted(starts, reverse=True)
    assert len(set(starts)) == len(starts)
    assert all(t >= GREGORIAN_START for t in starts)


def test_year_lookup_out_of_range():
    with pytest.raises(OutOfRangeError):
        year_record(592)
    with pytest.raises(OutOfRangeError):
        year_start(1873)
    with pytest.raises(OutOfRangeError):
        era_record(256)


def test_era_names():
    assert era_record(SUIKO).name == "（推古）"
    assert era_record(SUIKO).is_provisional
    assert era_record(REIWA).name == "令和"
    assert era_record(REIWA).first_year == 2019
    assert not era_record(HEISEI).is_provisional


def test_find_era_by_name_key_or_code():
    assert find_era("令和").code == REIWA
    assert find_era("reiwa").code == REIWA
    assert find_era("HEISEI").code == HEISEI
    assert find_era("推古").code == SUIKO
    assert find_era("（推古）").code == SUIKO
    assert find_era("２５５").code == REIWA
    assert find_era(254).code == HEISEI
    with pytest.raises(InvalidArgumentError):
        find_era("存在しない")
    with pytest.raises(InvalidArgumentError):
        find_era(300)
